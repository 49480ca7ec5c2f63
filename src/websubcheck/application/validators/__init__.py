"""Subscriber service validators.

- ListenerArgumentValidator: ambiguous listener construction arguments
- ServiceAnnotationValidator: marker annotation presence
- RequiredMethodValidator: event notification callback presence
- MethodContractValidator: qualifier, name, parameters, return type
- ServiceDeclarationValidator: runs all of the above in order
"""

from websubcheck.application.validators._context import AnalysisContext
from websubcheck.application.validators.annotation import ServiceAnnotationValidator
from websubcheck.application.validators.listener_arguments import ListenerArgumentValidator
from websubcheck.application.validators.method_contract import MethodContractValidator
from websubcheck.application.validators.required_methods import RequiredMethodValidator
from websubcheck.application.validators.service_declaration import (
    ServiceDeclarationValidator,
    validate,
)

__all__ = [
    "AnalysisContext",
    # Checks
    "ListenerArgumentValidator",
    "ServiceAnnotationValidator",
    "RequiredMethodValidator",
    "MethodContractValidator",
    # Entry point
    "ServiceDeclarationValidator",
    "validate",
]
