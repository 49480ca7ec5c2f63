"""Domain model entities."""

from websubcheck.domain.model.check_result import CheckResult
from websubcheck.domain.model.check_stats import CheckStats
from websubcheck.domain.model.configuration import CheckerConfig
from websubcheck.domain.model.contract import (
    ON_EVENT_NOTIFICATION,
    ON_SUBSCRIPTION_VALIDATION_DENIED,
    ON_SUBSCRIPTION_VERIFICATION,
    SERVICE_ANNOTATION_NAME,
    WEBSUB_CONTRACTS,
    CallbackContract,
    ContractTable,
)
from websubcheck.domain.model.declaration import (
    ListenerArgument,
    ListenerConstruction,
    MethodDeclaration,
    MethodSymbol,
    ModuleDeclarations,
    ServiceDeclaration,
)
from websubcheck.domain.model.diagnostic import Diagnostic, DiagnosticCode
from websubcheck.domain.model.enums import ArgumentKind, ExpressionKind, Qualifier, Severity
from websubcheck.domain.model.location import Location
from websubcheck.domain.model.type_shape import (
    ErrorType,
    NilType,
    OpaqueType,
    SimpleType,
    TypeShape,
    UnionType,
    describe,
)

__all__ = [
    # Values
    "Location",
    "Severity",
    "Qualifier",
    "ArgumentKind",
    "ExpressionKind",
    # Types
    "TypeShape",
    "SimpleType",
    "UnionType",
    "ErrorType",
    "NilType",
    "OpaqueType",
    "describe",
    # Declarations
    "MethodSymbol",
    "MethodDeclaration",
    "ServiceDeclaration",
    "ListenerArgument",
    "ListenerConstruction",
    "ModuleDeclarations",
    # Contract
    "CallbackContract",
    "ContractTable",
    "WEBSUB_CONTRACTS",
    "SERVICE_ANNOTATION_NAME",
    "ON_SUBSCRIPTION_VERIFICATION",
    "ON_SUBSCRIPTION_VALIDATION_DENIED",
    "ON_EVENT_NOTIFICATION",
    # Diagnostics
    "Diagnostic",
    "DiagnosticCode",
    # Results
    "CheckerConfig",
    "CheckResult",
    "CheckStats",
]
