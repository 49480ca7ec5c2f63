"""pytest fixtures for subscriber service checks.

User overrides websub_config in their conftest.py.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import pytest

from websubcheck.application.services import ServiceChecker
from websubcheck.domain.model.configuration import CheckerConfig
from websubcheck.infrastructure.adapters import JSONDeclarationSource

if TYPE_CHECKING:
    from websubcheck.domain.model.declaration import ModuleDeclarations


@pytest.fixture(scope="session")
def websub_config() -> CheckerConfig:
    """Default checker configuration.

    User overrides this fixture in their conftest.py.

    Returns:
        Empty CheckerConfig (keep all diagnostics)
    """
    return CheckerConfig()


@pytest.fixture(scope="session")
def websub_checker(websub_config: CheckerConfig) -> ServiceChecker:
    """ServiceChecker built from websub_config, without reporter."""
    return ServiceChecker(websub_config)


@pytest.fixture(scope="session")
def websub_modules(request: pytest.FixtureRequest) -> tuple[ModuleDeclarations, ...]:
    """Load documents listed in the websub_declarations ini option.

    Paths are relative to the pytest rootdir.

    Raises:
        pytest.UsageError: If the option is empty
    """
    # Note: rootdir exists on pytest.Config but type stubs may not include it
    root_dir = Path(str(getattr(request.config, "rootdir", ".")))
    entries = request.config.getini("websub_declarations")
    if not entries:
        raise pytest.UsageError(
            "websub_declarations is empty. "
            "List declaration documents in pytest.ini or pyproject.toml."
        )
    paths = tuple(root_dir / str(entry) for entry in entries)
    return JSONDeclarationSource().load_all(paths)
