"""Position of a declaration in host source code."""

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True, slots=True)
class Location:
    """Where a diagnostic points: a position or a span in one file.

    Attributes:
        file: Source file the host compiled
        line: First line (1-based)
        column: First column (0-based)
        end_line: Last line of the span, None for a bare position
        end_column: Column the span ends at, needs end_line
    """

    file: Path
    line: int
    column: int
    end_line: int | None = None
    end_column: int | None = None

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.file is None:
            raise TypeError("file must not be None")
        if self.line <= 0:
            raise ValueError(f"line must be > 0, got {self.line}")
        if self.column < 0:
            raise ValueError(f"column must be >= 0, got {self.column}")
        if self.end_line is None:
            if self.end_column is not None:
                raise ValueError("end_column requires end_line")
            return
        if self.end_line < self.line:
            raise ValueError(f"end_line ({self.end_line}) must be >= line ({self.line})")
        if self.end_column is not None:
            if self.end_column < 0:
                raise ValueError(f"end_column must be >= 0, got {self.end_column}")
            if self.end_line == self.line and self.end_column < self.column:
                raise ValueError(
                    f"end_column ({self.end_column}) must be >= column ({self.column}) on one line"
                )

    @property
    def is_span(self) -> bool:
        """True when an end position is known."""
        return self.end_line is not None

    def __str__(self) -> str:
        """Format as file:line:column, with -end_line[:end_column] for spans."""
        start = f"{self.file}:{self.line}:{self.column}"
        if self.end_line is None:
            return start
        if self.end_column is None:
            return f"{start}-{self.end_line}"
        return f"{start}-{self.end_line}:{self.end_column}"
