"""Domain ports (interfaces/protocols)."""

from websubcheck.domain.ports.declaration_source import DeclarationSourcePort
from websubcheck.domain.ports.diagnostic_sink import DiagnosticSink
from websubcheck.domain.ports.reporter import ReporterProtocol

__all__ = [
    "DeclarationSourcePort",
    "DiagnosticSink",
    "ReporterProtocol",
]
