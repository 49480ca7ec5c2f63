"""websubcheck - static conformance checker for websub subscriber services."""

__version__ = "0.1.0"

from websubcheck.application.collectors import DiagnosticCollector
from websubcheck.application.services import ServiceChecker
from websubcheck.application.validators import ServiceDeclarationValidator, validate
from websubcheck.domain.model import CheckerConfig, CheckResult, Diagnostic, DiagnosticCode

__all__ = [
    "CheckerConfig",
    "CheckResult",
    "Diagnostic",
    "DiagnosticCode",
    "DiagnosticCollector",
    "ServiceChecker",
    "ServiceDeclarationValidator",
    "validate",
    "__version__",
]
