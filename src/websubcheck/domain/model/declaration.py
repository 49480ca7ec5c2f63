"""Host view of a subscriber service declaration.

Read-only structures supplied by the host front end for one analysis pass.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from websubcheck.domain.model.enums import ArgumentKind, ExpressionKind, Qualifier

if TYPE_CHECKING:
    from websubcheck.domain.model.location import Location
    from websubcheck.domain.model.type_shape import TypeShape


@dataclass(frozen=True, slots=True)
class MethodSymbol:
    """Resolved semantic information of a method.

    Attributes:
        qualifiers: Qualifiers attached to the method
        parameters: Resolved parameter types in declaration order
        return_type: Resolved return type, None if not declared (means nil)
    """

    qualifiers: frozenset[Qualifier] = frozenset()
    parameters: tuple[TypeShape, ...] = ()
    return_type: TypeShape | None = None

    @property
    def is_remote(self) -> bool:
        """Check if method carries the remote qualifier."""
        return Qualifier.REMOTE in self.qualifiers


@dataclass(frozen=True, slots=True)
class MethodDeclaration:
    """Method declared in a service body.

    Attributes:
        name: Method name as written in source
        location: Location of the method definition
        symbol: Resolved symbol, None if the host could not resolve it
    """

    name: str
    location: Location
    symbol: MethodSymbol | None = None

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.name:
            raise ValueError("name must not be empty")
        if self.location is None:
            raise TypeError("location must not be None")


@dataclass(frozen=True, slots=True)
class ServiceDeclaration:
    """Subscriber service declaration under analysis.

    Attributes:
        location: Location of the service declaration
        annotations: Names of attached annotations
        methods: Declared methods in source order
        name: Display name (usually the attach point), None if absent
    """

    location: Location
    annotations: tuple[str, ...] = ()
    methods: tuple[MethodDeclaration, ...] = ()
    name: str | None = None

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.location is None:
            raise TypeError("location must not be None")

    def has_annotation(self, name: str) -> bool:
        """Check for an annotation by exact name."""
        return name in self.annotations


@dataclass(frozen=True, slots=True)
class ListenerArgument:
    """One argument of a listener construction expression."""

    kind: ArgumentKind
    expression: ExpressionKind


@dataclass(frozen=True, slots=True)
class ListenerConstruction:
    """Expression constructing the service's listener.

    Attributes:
        location: Location of the `new` expression
        arguments: Argument list, None for implicit `new` without parentheses
        explicit: True for `new websub:Listener(...)`, False for implicit `new (...)`
    """

    location: Location
    arguments: tuple[ListenerArgument, ...] | None = ()
    explicit: bool = True

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.location is None:
            raise TypeError("location must not be None")
        if self.explicit and self.arguments is None:
            raise ValueError("explicit construction must have an argument list")


@dataclass(frozen=True, slots=True)
class ModuleDeclarations:
    """All declarations of one analysed source module.

    Listener constructions are shared by every service of the module.

    Attributes:
        name: Module name
        services: Service declarations in source order
        listeners: Listener constructions reachable from the module
    """

    name: str
    services: tuple[ServiceDeclaration, ...] = ()
    listeners: tuple[ListenerConstruction, ...] = ()

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.name:
            raise ValueError("name must not be empty")

    @property
    def method_count(self) -> int:
        """Number of methods across all services."""
        return sum(len(service.methods) for service in self.services)
