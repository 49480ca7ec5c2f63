"""Configuration exceptions."""

from websubcheck.domain.exceptions.base import WebSubCheckError


class UnknownDiagnosticCodeError(WebSubCheckError, ValueError):
    """Diagnostic code name does not exist.

    Inherits ValueError for semantic correctness (bad value).

    Attributes:
        name: The unresolved code name.
    """

    def __init__(self, name: str) -> None:
        """Initialize with the unresolved name."""
        self.name = name
        super().__init__(f"unknown diagnostic code: {name!r}")
