"""Resolved type shapes.

TypeShape is a closed sum type over the shapes the contract checks
distinguish. The host front end resolves declared types into these;
anything it cannot express maps to OpaqueType.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TypeAlias

NIL_SIGNATURE = "()"


def qualify(type_name: str, module_prefix: str) -> str:
    """Qualify type name with module prefix: websub + Acknowledgement -> websub:Acknowledgement.

    Empty (or blank) prefix leaves the name unqualified.
    """
    if not module_prefix.strip():
        return type_name
    return f"{module_prefix}:{type_name}"


@dataclass(frozen=True, slots=True)
class SimpleType:
    """Named type reference.

    Attributes:
        name: Type name as declared in its module
        module: Prefix of the module defining the type ("" for local types)
    """

    name: str
    module: str = ""

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.name:
            raise ValueError("name must not be empty")

    @property
    def qualified_name(self) -> str:
        """Module-qualified name."""
        return qualify(self.name, self.module)


@dataclass(frozen=True, slots=True)
class UnionType:
    """Union of type shapes. Members may be unions themselves.

    Attributes:
        members: Member shapes in declaration order (at least two)
    """

    members: tuple[TypeShape, ...]

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if len(self.members) < 2:
            raise ValueError(f"union needs at least 2 members, got {len(self.members)}")


@dataclass(frozen=True, slots=True)
class ErrorType:
    """Error type as the host prints it.

    The qualified name is derived from the textual signature, e.g.
    signature "ballerina/websub:2.0.0:SubscriptionDeletedError" with
    module_id "ballerina/websub:2.0.0" and module_prefix "websub"
    gives "websub:SubscriptionDeletedError".

    Attributes:
        signature: Full textual signature
        module_id: Module identifier embedded in the signature ("" if none)
        module_prefix: Prefix used to qualify the derived name
    """

    signature: str
    module_id: str = ""
    module_prefix: str = ""

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.signature:
            raise ValueError("signature must not be empty")

    @property
    def qualified_name(self) -> str:
        """Signature without module id and colons, qualified with the module prefix."""
        name = self.signature.replace(self.module_id, "").replace(":", "")
        return qualify(name, self.module_prefix)


@dataclass(frozen=True, slots=True)
class NilType:
    """The nil type `()`; also what an omitted return type means."""


@dataclass(frozen=True, slots=True)
class OpaqueType:
    """Any type shape the checks do not distinguish (records, maps, primitives...).

    Attributes:
        signature: Textual signature for messages
    """

    signature: str

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.signature:
            raise ValueError("signature must not be empty")


TypeShape: TypeAlias = SimpleType | UnionType | ErrorType | NilType | OpaqueType


def describe(shape: TypeShape) -> str:
    """Human-readable, module-qualified description used in diagnostics."""
    match shape:
        case SimpleType() | ErrorType():
            return shape.qualified_name
        case UnionType(members=members):
            return "|".join(describe(member) for member in members)
        case NilType():
            return NIL_SIGNATURE
        case OpaqueType(signature=signature):
            return signature
    raise TypeError(f"not a type shape: {type(shape).__name__}")


def is_nil(shape: TypeShape) -> bool:
    """Check if shape is structurally nil."""
    return isinstance(shape, NilType)
