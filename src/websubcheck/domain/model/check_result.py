"""Check result aggregate."""

from __future__ import annotations

from dataclasses import dataclass

from websubcheck.domain.model.check_stats import CheckStats
from websubcheck.domain.model.diagnostic import Diagnostic
from websubcheck.domain.model.enums import Severity


@dataclass(frozen=True, slots=True)
class CheckResult:
    """Result of checking subscriber service declarations.

    Immutable aggregate used by ReporterProtocol.report().

    Attributes:
        diagnostics: All kept diagnostics in emission order
        stats: Check statistics
        fail_on_warning: Whether warnings make the result fail
    """

    diagnostics: tuple[Diagnostic, ...]
    stats: CheckStats
    fail_on_warning: bool = False

    @property
    def passed(self) -> bool:
        """Check if declarations were accepted."""
        if self.fail_on_warning:
            return self.error_count == 0 and self.warning_count == 0
        return self.error_count == 0

    @property
    def diagnostic_count(self) -> int:
        """Number of diagnostics."""
        return len(self.diagnostics)

    @property
    def error_count(self) -> int:
        """Number of ERROR severity diagnostics."""
        return sum(1 for d in self.diagnostics if d.severity == Severity.ERROR)

    @property
    def warning_count(self) -> int:
        """Number of WARNING severity diagnostics."""
        return sum(1 for d in self.diagnostics if d.severity == Severity.WARNING)
