"""Infrastructure layer: declaration sources and logging."""

from websubcheck.infrastructure.adapters import JSONDeclarationSource
from websubcheck.infrastructure.logging import configure_logging, get_logger

__all__ = [
    "JSONDeclarationSource",
    "configure_logging",
    "get_logger",
]
