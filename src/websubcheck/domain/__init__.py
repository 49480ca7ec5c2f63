"""websubcheck domain layer.

Pure domain logic with no external dependencies.
Only imports: typing, abc, dataclasses, enum, pathlib, types, collections.abc
"""

from websubcheck.domain.exceptions import (
    DeclarationLoadError,
    UnknownDiagnosticCodeError,
    WebSubCheckError,
)
from websubcheck.domain.model import (
    CheckerConfig,
    CheckResult,
    ContractTable,
    Diagnostic,
    DiagnosticCode,
    ListenerConstruction,
    Location,
    MethodDeclaration,
    ModuleDeclarations,
    ServiceDeclaration,
    Severity,
)

__all__ = [
    # Exceptions
    "WebSubCheckError",
    "DeclarationLoadError",
    "UnknownDiagnosticCodeError",
    # Model
    "CheckerConfig",
    "CheckResult",
    "ContractTable",
    "Diagnostic",
    "DiagnosticCode",
    "ListenerConstruction",
    "Location",
    "MethodDeclaration",
    "ModuleDeclarations",
    "ServiceDeclaration",
    "Severity",
]
