"""Reporter protocol for output formatting.

Users extend websubcheck by implementing this Protocol.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from websubcheck.domain.model.check_result import CheckResult


class ReporterProtocol(Protocol):
    """Contract for reporters.

    websubcheck provides PlainTextReporter, JSONReporter and
    ConsoleReporter. Users can implement SARIF, HTML, etc.

    Example:
        class CountReporter:
            def report(self, result: CheckResult) -> None:
                print(f"{result.error_count} errors")
    """

    def report(self, result: CheckResult) -> None:
        """Report check results.

        Implementation decides output format and destination.

        Args:
            result: Complete check result with diagnostics and stats
        """
        ...
