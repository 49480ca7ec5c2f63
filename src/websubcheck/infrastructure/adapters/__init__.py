"""Infrastructure adapters."""

from websubcheck.infrastructure.adapters.json_source import JSONDeclarationSource

__all__ = ["JSONDeclarationSource"]
