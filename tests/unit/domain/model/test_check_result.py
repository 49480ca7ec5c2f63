"""Tests for domain/model/check_result.py and check_stats.py."""

import pytest

from websubcheck.domain.model.check_result import CheckResult
from websubcheck.domain.model.check_stats import CheckStats
from websubcheck.domain.model.diagnostic import Diagnostic, DiagnosticCode
from tests.factories import make_location


def make_diagnostic(code: DiagnosticCode) -> Diagnostic:
    return Diagnostic(code=code, severity=code.severity, location=make_location())


class TestCheckResult:
    """Tests for CheckResult."""

    def test_empty_passes(self) -> None:
        result = CheckResult((), CheckStats.empty())
        assert result.passed
        assert result.diagnostic_count == 0
        assert result.stats == CheckStats.empty()

    def test_error_fails(self) -> None:
        result = CheckResult((make_diagnostic(DiagnosticCode.WEBSUB_101),), CheckStats.empty())
        assert not result.passed
        assert result.error_count == 1
        assert result.warning_count == 0

    def test_warning_passes_by_default(self) -> None:
        result = CheckResult((make_diagnostic(DiagnosticCode.WEBSUB_109),), CheckStats.empty())
        assert result.passed
        assert result.warning_count == 1

    def test_warning_fails_when_configured(self) -> None:
        result = CheckResult(
            (make_diagnostic(DiagnosticCode.WEBSUB_109),),
            CheckStats.empty(),
            fail_on_warning=True,
        )
        assert not result.passed


class TestCheckStats:
    """Tests for CheckStats FAIL-FIRST."""

    def test_negative_count_raises(self) -> None:
        with pytest.raises(ValueError, match="services_checked must be >= 0"):
            CheckStats(
                modules_checked=0,
                services_checked=-1,
                methods_checked=0,
                listeners_checked=0,
                analysis_time_ms=0.0,
            )

    def test_negative_time_raises(self) -> None:
        with pytest.raises(ValueError, match="analysis_time_ms must be >= 0"):
            CheckStats(
                modules_checked=0,
                services_checked=0,
                methods_checked=0,
                listeners_checked=0,
                analysis_time_ms=-1.0,
            )
