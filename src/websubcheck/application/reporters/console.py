"""Console reporter: CheckResult -> rich tables grouped by file."""

from __future__ import annotations

from typing import TYPE_CHECKING, TextIO

from rich.console import Console
from rich.table import Table

from websubcheck.application.reporters._base import BaseReporter
from websubcheck.domain.model.enums import Severity

if TYPE_CHECKING:
    from websubcheck.domain.model.check_result import CheckResult
    from websubcheck.domain.model.diagnostic import Diagnostic

SEVERITY_STYLES = {
    Severity.ERROR: "bold red",
    Severity.WARNING: "yellow",
}


class ConsoleReporter(BaseReporter):
    """Console reporter: outputs rich formatted text."""

    def __init__(
        self,
        output: TextIO | None = None,
        *,
        force_terminal: bool | None = None,
        width: int | None = None,
    ) -> None:
        """Initialize reporter.

        Args:
            output: Output stream (default: sys.stdout)
            force_terminal: Force color codes even if output is not a TTY
            width: Console width, None to autodetect
        """
        super().__init__(output)
        self._console = Console(file=self._output, force_terminal=force_terminal, width=width)

    def report(self, result: CheckResult) -> None:
        """Render result header, diagnostics per file and status line."""
        console = self._console
        console.print()
        console.rule("[bold]SUBSCRIBER SERVICE CHECK[/bold]")
        console.print()
        console.print(
            f"[bold]Services:[/bold] {result.stats.services_checked}  "
            f"[bold]Methods:[/bold] {result.stats.methods_checked}  "
            f"[bold]Errors:[/bold] {result.error_count}  "
            f"[bold]Warnings:[/bold] {result.warning_count}"
        )
        console.print()

        for file, diagnostics in self._group_by_file(result.diagnostics).items():
            console.print(f"[bold cyan]{file}[/bold cyan] ({len(diagnostics)})")
            console.print(self._create_table(diagnostics))
            console.print()

        if result.passed:
            console.print("[bold green]PASSED[/bold green]")
        else:
            console.print("[bold red]FAILED[/bold red]")

    def _group_by_file(self, diagnostics: tuple[Diagnostic, ...]) -> dict[str, list[Diagnostic]]:
        by_file: dict[str, list[Diagnostic]] = {}
        for diagnostic in diagnostics:
            by_file.setdefault(str(diagnostic.location.file), []).append(diagnostic)
        return by_file

    def _create_table(self, diagnostics: list[Diagnostic]) -> Table:
        table = Table(show_header=True, header_style="bold", box=None)
        table.add_column("Line", style="cyan", justify="right")
        table.add_column("Severity")
        table.add_column("Code", style="dim")
        table.add_column("Message")

        for diagnostic in diagnostics:
            severity = diagnostic.severity
            table.add_row(
                f"{diagnostic.location.line}:{diagnostic.location.column}",
                f"[{SEVERITY_STYLES[severity]}]{severity.name}[/]",
                diagnostic.code.name,
                diagnostic.message,
            )
        return table
