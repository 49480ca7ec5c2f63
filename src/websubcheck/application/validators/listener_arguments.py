"""Listener construction argument inspection.

A subscriber listener takes either a port or an http:Listener, and an
optional websub:ListenerConfiguration. When the first two arguments are
both plain names or mapping literals the intent cannot be told apart.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import TYPE_CHECKING

from websubcheck.domain.model.diagnostic import DiagnosticCode
from websubcheck.domain.model.enums import ExpressionKind

if TYPE_CHECKING:
    from websubcheck.application.validators._context import AnalysisContext
    from websubcheck.domain.model.declaration import ListenerConstruction

AMBIGUOUS_EXPRESSIONS = frozenset(
    {ExpressionKind.SIMPLE_NAME_REFERENCE, ExpressionKind.MAPPING_CONSTRUCTOR}
)


class ListenerArgumentValidator:
    """Flags listener constructions with ambiguous leading arguments."""

    def validate(
        self,
        context: AnalysisContext,
        constructions: Iterable[ListenerConstruction],
    ) -> None:
        """Inspect every construction once.

        Args:
            context: Analysis context receiving diagnostics
            constructions: Explicit and implicit listener constructions
        """
        for construction in constructions:
            if construction.arguments is None:
                # implicit `new` without argument list
                continue
            if self._is_ambiguous(construction):
                context.emit(DiagnosticCode.WEBSUB_109, construction.location)

    def _is_ambiguous(self, construction: ListenerConstruction) -> bool:
        arguments = construction.arguments or ()
        if len(arguments) < 2:
            return False
        first, second = arguments[0], arguments[1]
        return (
            first.expression in AMBIGUOUS_EXPRESSIONS
            and second.expression in AMBIGUOUS_EXPRESSIONS
        )
