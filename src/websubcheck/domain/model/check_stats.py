"""Statistics of a check run."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class CheckStats:
    """Counters collected while checking.

    Attributes:
        modules_checked: Number of modules analysed
        services_checked: Number of service declarations validated
        methods_checked: Number of declared methods visited
        listeners_checked: Number of listener constructions inspected
        analysis_time_ms: Wall time spent validating
    """

    modules_checked: int
    services_checked: int
    methods_checked: int
    listeners_checked: int
    analysis_time_ms: float

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        for name in ("modules_checked", "services_checked", "methods_checked", "listeners_checked"):
            value = getattr(self, name)
            if value < 0:
                raise ValueError(f"{name} must be >= 0, got {value}")
        if self.analysis_time_ms < 0:
            raise ValueError(f"analysis_time_ms must be >= 0, got {self.analysis_time_ms}")

    @classmethod
    def empty(cls) -> CheckStats:
        """Create stats for a run that checked nothing."""
        return cls(
            modules_checked=0,
            services_checked=0,
            methods_checked=0,
            listeners_checked=0,
            analysis_time_ms=0.0,
        )
