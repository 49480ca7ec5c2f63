"""Subscriber service declaration validation entry point."""

from __future__ import annotations

from collections.abc import Iterable
from typing import TYPE_CHECKING

from websubcheck.application.validators._context import AnalysisContext
from websubcheck.application.validators.annotation import ServiceAnnotationValidator
from websubcheck.application.validators.listener_arguments import ListenerArgumentValidator
from websubcheck.application.validators.method_contract import MethodContractValidator
from websubcheck.application.validators.required_methods import RequiredMethodValidator
from websubcheck.domain.model.contract import WEBSUB_CONTRACTS

if TYPE_CHECKING:
    from websubcheck.domain.model.contract import ContractTable
    from websubcheck.domain.model.declaration import ListenerConstruction, ServiceDeclaration
    from websubcheck.domain.ports.diagnostic_sink import DiagnosticSink


class ServiceDeclarationValidator:
    """Validates a service declaration against the subscriber contract.

    Stateless apart from the immutable contract table: one instance can
    serve concurrent passes as long as each pass has its own sink.

    Example:
        collector = DiagnosticCollector()
        ServiceDeclarationValidator().validate(service, listeners, collector)
        for diagnostic in collector.diagnostics:
            print(diagnostic)
    """

    def __init__(self, contracts: ContractTable = WEBSUB_CONTRACTS) -> None:
        """Initialize validator.

        Args:
            contracts: Callback contract table (default: websub contract)
        """
        self._listener_arguments = ListenerArgumentValidator()
        self._annotation = ServiceAnnotationValidator()
        self._required_methods = RequiredMethodValidator()
        self._method_contract = MethodContractValidator(contracts)

    def validate(
        self,
        service: ServiceDeclaration,
        listeners: Iterable[ListenerConstruction],
        sink: DiagnosticSink,
    ) -> None:
        """Run every check, reporting all violations to sink.

        Args:
            service: Declaration under analysis
            listeners: Listener constructions reachable from the module
            sink: Receives diagnostics in emission order
        """
        context = AnalysisContext(sink)
        self._listener_arguments.validate(context, listeners)
        self._annotation.validate(context, service)
        self._required_methods.validate(context, service)
        for method in service.methods:
            self._method_contract.validate(context, method)


def validate(
    service: ServiceDeclaration,
    listeners: Iterable[ListenerConstruction],
    sink: DiagnosticSink,
    *,
    contracts: ContractTable = WEBSUB_CONTRACTS,
) -> None:
    """Validate one service declaration; all findings go to sink."""
    ServiceDeclarationValidator(contracts).validate(service, listeners, sink)
