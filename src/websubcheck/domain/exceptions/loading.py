"""Declaration loading exceptions."""

from __future__ import annotations

from typing import TYPE_CHECKING

from websubcheck.domain.exceptions.base import WebSubCheckError

if TYPE_CHECKING:
    from pathlib import Path


class DeclarationLoadError(WebSubCheckError):
    """Error while loading a host declaration document.

    Attributes:
        path: Document that failed to load
        reason: Why loading failed
    """

    def __init__(self, path: Path, reason: str) -> None:
        # FAIL-FIRST: validate required parameters
        if path is None:
            raise TypeError("path must not be None")
        if not reason:
            raise ValueError("reason must be non-empty string")

        self.path = path
        self.reason = reason
        super().__init__(f"Failed to load {path}: {reason}")
