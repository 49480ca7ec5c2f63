"""JSON reporter for machine-readable output."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, TextIO

from websubcheck.application.reporters._base import BaseReporter

if TYPE_CHECKING:
    from websubcheck.domain.model.check_result import CheckResult
    from websubcheck.domain.model.diagnostic import Diagnostic


class JSONReporter(BaseReporter):
    """JSON reporter for machine-readable output.

    Outputs check results as JSON for CI/CD integration
    or parsing by other tools.
    """

    def __init__(
        self,
        output: TextIO | None = None,
        *,
        indent: int | None = 2,
    ) -> None:
        """Initialize reporter.

        Args:
            output: Output stream (default: sys.stdout)
            indent: JSON indentation (default: 2, None for compact)
        """
        super().__init__(output)
        self._indent = indent

    def report(self, result: CheckResult) -> None:
        """Report check results as JSON.

        Args:
            result: Complete check result
        """
        data = self._result_to_dict(result)
        json.dump(data, self._output, indent=self._indent)
        self._output.write("\n")

    def _result_to_dict(self, result: CheckResult) -> dict[str, object]:
        """Convert CheckResult to JSON-serializable dict."""
        return {
            "passed": result.passed,
            "summary": {
                "diagnostic_count": result.diagnostic_count,
                "error_count": result.error_count,
                "warning_count": result.warning_count,
            },
            "diagnostics": [self._diagnostic_to_dict(d) for d in result.diagnostics],
            "stats": {
                "modules_checked": result.stats.modules_checked,
                "services_checked": result.stats.services_checked,
                "methods_checked": result.stats.methods_checked,
                "listeners_checked": result.stats.listeners_checked,
                "analysis_time_ms": result.stats.analysis_time_ms,
            },
        }

    def _diagnostic_to_dict(self, diagnostic: Diagnostic) -> dict[str, object]:
        """Convert Diagnostic to JSON-serializable dict."""
        location = diagnostic.location
        location_dict: dict[str, object] = {
            "file": str(location.file),
            "line": location.line,
            "column": location.column,
        }
        if location.is_span:
            location_dict["end_line"] = location.end_line
            location_dict["end_column"] = location.end_column
        return {
            "code": diagnostic.code.name,
            "severity": diagnostic.severity.name,
            "message": diagnostic.message,
            "arguments": list(diagnostic.arguments),
            "location": location_dict,
        }
