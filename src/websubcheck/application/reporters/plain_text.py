"""Plain text reporter using print()."""

from __future__ import annotations

from typing import TYPE_CHECKING

from websubcheck.application.reporters._base import BaseReporter

if TYPE_CHECKING:
    from websubcheck.domain.model.check_result import CheckResult
    from websubcheck.domain.model.diagnostic import Diagnostic


class PlainTextReporter(BaseReporter):
    """Plain text reporter using print().

    Stdlib-only implementation for simple text output.
    """

    def report(self, result: CheckResult) -> None:
        """Report check results as plain text.

        Args:
            result: Complete check result
        """
        self._report_header()
        self._report_summary(result)

        if result.diagnostics:
            self._report_diagnostics(result.diagnostics)

        self._report_footer(result)

    def _write(self, text: str = "") -> None:
        """Write line to output."""
        print(text, file=self._output)

    def _report_header(self) -> None:
        self._write("=" * 70)
        self._write("Subscriber Service Check Results")
        self._write("=" * 70)

    def _report_summary(self, result: CheckResult) -> None:
        self._write()
        self._write("Summary:")
        self._write(f"  Services: {result.stats.services_checked}")
        self._write(f"  Methods: {result.stats.methods_checked}")
        self._write(f"  Diagnostics: {result.diagnostic_count}")
        self._write(f"    Errors: {result.error_count}")
        self._write(f"    Warnings: {result.warning_count}")
        self._write(f"  Status: {'PASS' if result.passed else 'FAIL'}")

    def _report_diagnostics(self, diagnostics: tuple[Diagnostic, ...]) -> None:
        self._write()
        self._write("-" * 70)
        self._write(f"Diagnostics ({len(diagnostics)}):")
        self._write("-" * 70)

        for i, diagnostic in enumerate(diagnostics, start=1):
            self._write()
            self._write(f"{i}. [{diagnostic.severity.name}] {diagnostic.code.name}")
            self._write(f"   {diagnostic.message}")
            self._write(f"   at {diagnostic.location}")

    def _report_footer(self, result: CheckResult) -> None:
        self._write()
        self._write("=" * 70)
        status = "PASSED" if result.passed else "FAILED"
        self._write(f"Result: {status}")
        self._write("=" * 70)
