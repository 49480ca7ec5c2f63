"""Declaration source port (interface)."""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from websubcheck.domain.model.declaration import ModuleDeclarations


class DeclarationSourcePort(ABC):
    """Port for loading host declaration views.

    Infrastructure layer must provide implementation.
    """

    @abstractmethod
    def load(self, path: Path) -> ModuleDeclarations:
        """Load declarations of one module.

        Args:
            path: Path to the serialized host view

        Returns:
            Declarations of the module

        Raises:
            DeclarationLoadError: If the document cannot be loaded
        """
        ...

    def load_all(self, paths: tuple[Path, ...]) -> tuple[ModuleDeclarations, ...]:
        """Load several documents in order.

        Raises:
            DeclarationLoadError: On the first document that cannot be loaded
        """
        return tuple(self.load(path) for path in paths)
