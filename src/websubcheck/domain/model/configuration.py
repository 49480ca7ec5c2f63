"""Checker configuration (user config).

Controls which diagnostics are kept and what counts as a failure.
The callback contract itself is fixed and not configurable here.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from websubcheck.domain.model.diagnostic import DiagnosticCode


@dataclass(frozen=True, slots=True)
class CheckerConfig:
    """Checker configuration DTO.

    Immutable configuration object with FAIL-FIRST validation.

    Attributes:
        ignored_codes: Diagnostic codes dropped from results
        fail_on_warning: Treat warnings as failures
    """

    ignored_codes: frozenset[DiagnosticCode] = frozenset()
    fail_on_warning: bool = False

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not isinstance(self.ignored_codes, frozenset):
            raise TypeError(
                f"ignored_codes must be frozenset, got {type(self.ignored_codes).__name__}"
            )
        for code in self.ignored_codes:
            if not isinstance(code, DiagnosticCode):
                raise TypeError(f"ignored_codes must contain DiagnosticCode, got {code!r}")

    @classmethod
    def from_code_names(
        cls,
        names: Iterable[str] = (),
        *,
        fail_on_warning: bool = False,
    ) -> CheckerConfig:
        """Create config from textual code names ("WEBSUB_109" or "109").

        Raises:
            UnknownDiagnosticCodeError: If a name matches no code
        """
        return cls(
            ignored_codes=frozenset(DiagnosticCode.parse(name) for name in names),
            fail_on_warning=fail_on_warning,
        )

    def is_ignored(self, code: DiagnosticCode) -> bool:
        """Check if diagnostics with this code are dropped."""
        return code in self.ignored_codes
