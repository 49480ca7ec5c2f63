"""Base reporter class for output formatting.

Provides default implementation of ReporterProtocol.
Concrete reporters inherit from this.
"""

from __future__ import annotations

import sys
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, TextIO

if TYPE_CHECKING:
    from websubcheck.domain.model.check_result import CheckResult


class BaseReporter(ABC):
    """Base class for reporters implementing ReporterProtocol.

    Concrete reporters must implement the report() method.
    Output goes to a text stream, stdout by default.

    Example:
        class MyReporter(BaseReporter):
            def report(self, result: CheckResult) -> None:
                self._output.write(f"Errors: {result.error_count}\\n")
    """

    def __init__(self, output: TextIO | None = None) -> None:
        """Initialize reporter.

        Args:
            output: Output stream (default: sys.stdout)
        """
        self._output = output if output is not None else sys.stdout

    @abstractmethod
    def report(self, result: CheckResult) -> None:
        """Report check results.

        Args:
            result: Complete check result with diagnostics and stats
        """
