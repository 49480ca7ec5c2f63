"""Diagnostics emitted by the subscriber service checks."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

from websubcheck.domain.exceptions.configuration import UnknownDiagnosticCodeError
from websubcheck.domain.model.enums import Severity

if TYPE_CHECKING:
    from websubcheck.domain.model.location import Location


class DiagnosticCode(Enum):
    """Diagnostic codes with message template and severity.

    Templates use positional placeholders ({0}, {1}) filled from
    Diagnostic.arguments in order.
    """

    WEBSUB_101 = (
        "101",
        "subscriber service should be annotated with websub:SubscriberServiceConfig",
        Severity.ERROR,
    )
    WEBSUB_102 = (
        "102",
        "subscriber service should only implement remote methods",
        Severity.ERROR,
    )
    WEBSUB_103 = (
        "103",
        "subscriber service should implement onEventNotification method",
        Severity.ERROR,
    )
    WEBSUB_104 = (
        "104",
        "{0} method is not allowed in subscriber service declaration",
        Severity.ERROR,
    )
    WEBSUB_105 = (
        "105",
        "{0} type parameters not allowed for {1} method",
        Severity.ERROR,
    )
    WEBSUB_106 = (
        "106",
        "{0} method should have parameters of following types {1}",
        Severity.ERROR,
    )
    WEBSUB_107 = (
        "107",
        "return type {0} not allowed for {1} method",
        Severity.ERROR,
    )
    WEBSUB_108 = (
        "108",
        "{0} method should have return type of following types {1}",
        Severity.ERROR,
    )
    WEBSUB_109 = (
        "109",
        "websub:Listener should only take either http:Listener or websub:ListenerConfiguration",
        Severity.WARNING,
    )

    def __init__(self, number: str, template: str, severity: Severity) -> None:
        self.number = number
        self.template = template
        self.severity = severity

    @classmethod
    def parse(cls, name: str) -> DiagnosticCode:
        """Resolve code from "WEBSUB_109", "websub_109" or "109".

        Raises:
            UnknownDiagnosticCodeError: If no code matches
        """
        key = name.strip().upper()
        for code in cls:
            if key in (code.name, code.number):
                return code
        raise UnknownDiagnosticCodeError(name)


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """One reported violation.

    Attributes:
        code: Diagnostic code
        severity: Severity (defaults to the code's severity when emitted)
        location: Source location of the offending construct
        arguments: Ordered message arguments
    """

    code: DiagnosticCode
    severity: Severity
    location: Location
    arguments: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.location is None:
            raise TypeError("location must not be None")
        expected = self.code.template.count("{")
        if len(self.arguments) != expected:
            raise ValueError(
                f"{self.code.name} takes {expected} arguments, got {len(self.arguments)}"
            )

    @property
    def message(self) -> str:
        """Formatted message."""
        return self.code.template.format(*self.arguments)

    def __str__(self) -> str:
        """Format diagnostic for display."""
        return f"{self.location}: [{self.severity.name}] {self.code.name}: {self.message}"
