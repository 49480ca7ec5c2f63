"""Application layer for subscriber service checking.

- validators: Contract checks and the validate() entry point
- collectors: Diagnostic sinks
- reporters: Output formatting (PlainText, JSON, Console)
- services: Main facade (ServiceChecker)
"""

from websubcheck.application.collectors import DiagnosticCollector
from websubcheck.application.reporters import (
    BaseReporter,
    ConsoleReporter,
    JSONReporter,
    PlainTextReporter,
)
from websubcheck.application.services import ServiceChecker
from websubcheck.application.validators import ServiceDeclarationValidator, validate

__all__ = [
    "DiagnosticCollector",
    "BaseReporter",
    "ConsoleReporter",
    "JSONReporter",
    "PlainTextReporter",
    "ServiceChecker",
    "ServiceDeclarationValidator",
    "validate",
]
