"""Analysis context shared by the checks of one pass."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from websubcheck.domain.model.diagnostic import Diagnostic

if TYPE_CHECKING:
    from websubcheck.domain.model.diagnostic import DiagnosticCode
    from websubcheck.domain.model.location import Location
    from websubcheck.domain.ports.diagnostic_sink import DiagnosticSink


@dataclass(frozen=True, slots=True)
class AnalysisContext:
    """Wraps the host's diagnostic sink for one validate() call."""

    sink: DiagnosticSink

    def emit(self, code: DiagnosticCode, location: Location, *arguments: str) -> None:
        """Build diagnostic with the code's severity and hand it to the sink."""
        self.sink.report(
            Diagnostic(
                code=code,
                severity=code.severity,
                location=location,
                arguments=arguments,
            )
        )
