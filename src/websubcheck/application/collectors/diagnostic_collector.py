"""In-memory diagnostic sink."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from websubcheck.domain.model.diagnostic import Diagnostic


class DiagnosticCollector:
    """DiagnosticSink that keeps diagnostics in insertion order.

    One collector per analysis pass; not shared between threads.
    """

    def __init__(self) -> None:
        """Initialize empty collector."""
        self._diagnostics: list[Diagnostic] = []

    def report(self, diagnostic: Diagnostic) -> None:
        """Append diagnostic."""
        self._diagnostics.append(diagnostic)

    @property
    def diagnostics(self) -> tuple[Diagnostic, ...]:
        """Collected diagnostics (snapshot)."""
        return tuple(self._diagnostics)

    def __len__(self) -> int:
        return len(self._diagnostics)
