"""Required callback presence check."""

from __future__ import annotations

from typing import TYPE_CHECKING

from websubcheck.domain.model.contract import ON_EVENT_NOTIFICATION
from websubcheck.domain.model.diagnostic import DiagnosticCode

if TYPE_CHECKING:
    from websubcheck.application.validators._context import AnalysisContext
    from websubcheck.domain.model.declaration import ServiceDeclaration


class RequiredMethodValidator:
    """Requires the event notification callback.

    Names are compared ignoring case, unlike the allowed-name check in
    MethodContractValidator, which is case-sensitive.
    """

    def __init__(self, method_name: str = ON_EVENT_NOTIFICATION) -> None:
        if not method_name:
            raise ValueError("method_name must not be empty")
        self._method_name = method_name.lower()

    def validate(self, context: AnalysisContext, service: ServiceDeclaration) -> None:
        """Emit WEBSUB_103 at the service if no method matches."""
        implemented = any(method.name.lower() == self._method_name for method in service.methods)
        if not implemented:
            context.emit(DiagnosticCode.WEBSUB_103, service.location)
