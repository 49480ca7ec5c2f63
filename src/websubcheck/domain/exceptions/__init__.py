"""Domain exceptions."""

from websubcheck.domain.exceptions.base import WebSubCheckError
from websubcheck.domain.exceptions.configuration import UnknownDiagnosticCodeError
from websubcheck.domain.exceptions.loading import DeclarationLoadError

__all__ = [
    "WebSubCheckError",
    "DeclarationLoadError",
    "UnknownDiagnosticCodeError",
]
