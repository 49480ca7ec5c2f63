"""Per-method callback contract matching.

Every check emits independently; a method can collect several
diagnostics in one pass.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from websubcheck.domain.model.contract import WEBSUB_CONTRACTS
from websubcheck.domain.model.diagnostic import DiagnosticCode
from websubcheck.domain.model.type_shape import describe, is_nil

if TYPE_CHECKING:
    from websubcheck.application.validators._context import AnalysisContext
    from websubcheck.domain.model.contract import CallbackContract, ContractTable
    from websubcheck.domain.model.declaration import MethodDeclaration, MethodSymbol


class MethodContractValidator:
    """Matches declared methods against a ContractTable.

    Order per method: remote qualifier, allowed name, parameters,
    return type. Unknown names stop after the name check.
    """

    def __init__(self, contracts: ContractTable = WEBSUB_CONTRACTS) -> None:
        self._contracts = contracts

    def validate(self, context: AnalysisContext, method: MethodDeclaration) -> None:
        """Run all contract checks for one method.

        Methods the host could not resolve are skipped silently.
        """
        symbol = method.symbol
        if symbol is None:
            return

        self._check_remote_qualifier(context, method, symbol)

        contract = self._contracts.get(method.name)
        if contract is None:
            context.emit(DiagnosticCode.WEBSUB_104, method.location, method.name)
            return

        self._check_parameters(context, method, symbol, contract)
        self._check_return_type(context, method, symbol, contract)

    def _check_remote_qualifier(
        self,
        context: AnalysisContext,
        method: MethodDeclaration,
        symbol: MethodSymbol,
    ) -> None:
        if not symbol.is_remote:
            context.emit(DiagnosticCode.WEBSUB_102, method.location)

    def _check_parameters(
        self,
        context: AnalysisContext,
        method: MethodDeclaration,
        symbol: MethodSymbol,
        contract: CallbackContract,
    ) -> None:
        if not symbol.parameters:
            if contract.parameter_types:
                context.emit(
                    DiagnosticCode.WEBSUB_106,
                    method.location,
                    method.name,
                    "".join(contract.parameter_types),
                )
            return

        declared = [describe(parameter) for parameter in symbol.parameters]
        rejected = [name for name in declared if contract.rejects_parameter(name)]
        if rejected:
            context.emit(
                DiagnosticCode.WEBSUB_105,
                method.location,
                ",".join(rejected),
                method.name,
            )

    def _check_return_type(
        self,
        context: AnalysisContext,
        method: MethodDeclaration,
        symbol: MethodSymbol,
        contract: CallbackContract,
    ) -> None:
        return_type = symbol.return_type
        if return_type is None or is_nil(return_type):
            # omitted return type means nil
            if not contract.nil_allowed:
                context.emit(
                    DiagnosticCode.WEBSUB_108,
                    method.location,
                    method.name,
                    "|".join(contract.return_types),
                )
            return

        if contract.rejects_return(return_type):
            context.emit(
                DiagnosticCode.WEBSUB_107,
                method.location,
                describe(return_type),
                method.name,
            )
