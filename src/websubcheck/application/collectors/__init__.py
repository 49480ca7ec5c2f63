"""Diagnostic sinks."""

from websubcheck.application.collectors.diagnostic_collector import DiagnosticCollector

__all__ = ["DiagnosticCollector"]
