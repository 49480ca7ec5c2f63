"""pytest plugin for websubcheck.

Provides fixtures:
    websub_config: Checker configuration (override in conftest.py)
    websub_checker: ServiceChecker built from websub_config
    websub_modules: Declarations loaded from websub_declarations

Configuration (pytest.ini or pyproject.toml):
    websub_declarations: JSON declaration documents, one per line
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from websubcheck.presentation.pytest_plugin.fixtures import (
    websub_checker,
    websub_config,
    websub_modules,
)

if TYPE_CHECKING:
    import pytest

__all__ = [
    "websub_checker",
    "websub_config",
    "websub_modules",
]


def pytest_addoption(parser: pytest.Parser) -> None:
    """Register ini options."""
    parser.addini(
        "websub_declarations",
        type="linelist",
        help="JSON declaration documents checked by the websub fixtures",
        default=[],
    )


def pytest_configure(config: pytest.Config) -> None:
    """Register websub marker."""
    config.addinivalue_line(
        "markers",
        "websub: mark test as subscriber service contract test",
    )
