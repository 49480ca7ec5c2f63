"""Application services."""

from websubcheck.application.services.checker import ServiceChecker

__all__ = ["ServiceChecker"]
