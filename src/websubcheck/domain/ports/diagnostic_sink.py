"""Diagnostic sink protocol.

The host supplies a sink per analysis pass; checks only append to it.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from websubcheck.domain.model.diagnostic import Diagnostic


class DiagnosticSink(Protocol):
    """Contract for diagnostic sinks.

    Append-only for the duration of one analysis pass.
    Order of report() calls is the order of diagnostics.

    Example:
        class PrintingSink:
            def report(self, diagnostic: Diagnostic) -> None:
                print(diagnostic)
    """

    def report(self, diagnostic: Diagnostic) -> None:
        """Accept one diagnostic.

        Args:
            diagnostic: Diagnostic emitted by a check
        """
        ...
