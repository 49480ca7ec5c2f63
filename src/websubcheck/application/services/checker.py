"""Main facade for subscriber service checking.

ServiceChecker runs the declaration validator over whole modules and
aggregates diagnostics into a CheckResult.
"""

from __future__ import annotations

import time
from collections.abc import Iterable
from typing import TYPE_CHECKING

from websubcheck.application.collectors import DiagnosticCollector
from websubcheck.application.validators import ServiceDeclarationValidator
from websubcheck.domain.model.check_result import CheckResult
from websubcheck.domain.model.check_stats import CheckStats
from websubcheck.domain.model.configuration import CheckerConfig
from websubcheck.domain.model.contract import WEBSUB_CONTRACTS
from websubcheck.infrastructure.logging import get_logger

if TYPE_CHECKING:
    from websubcheck.domain.model.contract import ContractTable
    from websubcheck.domain.model.declaration import ModuleDeclarations
    from websubcheck.domain.model.diagnostic import Diagnostic
    from websubcheck.domain.ports.reporter import ReporterProtocol

logger = get_logger(__name__)


class ServiceChecker:
    """Main facade for checking subscriber service declarations.

    Composition-based: accepts config, reporter and contract table.

    Example:
        modules = JSONDeclarationSource().load_all(paths)
        result = ServiceChecker().check(modules)
        if not result.passed:
            print(f"Errors: {result.error_count}")
    """

    def __init__(
        self,
        config: CheckerConfig | None = None,
        *,
        reporter: ReporterProtocol | None = None,
        contracts: ContractTable = WEBSUB_CONTRACTS,
    ) -> None:
        """Initialize checker with dependencies.

        Args:
            config: Checker configuration (default: keep everything)
            reporter: Optional reporter for output
            contracts: Callback contract table
        """
        self._config = config or CheckerConfig()
        self._reporter = reporter
        self._validator = ServiceDeclarationValidator(contracts)

    @property
    def config(self) -> CheckerConfig:
        """Active configuration."""
        return self._config

    def check(self, modules: Iterable[ModuleDeclarations]) -> CheckResult:
        """Validate every service of every module and return result.

        Reports result if reporter is configured.

        Args:
            modules: Module declarations to check

        Returns:
            CheckResult with kept diagnostics and stats
        """
        start_time = time.perf_counter()

        diagnostics: list[Diagnostic] = []
        module_count = service_count = method_count = listener_count = 0

        for module in modules:
            module_diagnostics = self._check_module(module)
            diagnostics.extend(module_diagnostics)

            module_count += 1
            service_count += len(module.services)
            method_count += module.method_count
            if module.services:
                listener_count += len(module.listeners)
            logger.debug(
                "module_checked",
                module=module.name,
                services=len(module.services),
                diagnostics=len(module_diagnostics),
            )

        stats = CheckStats(
            modules_checked=module_count,
            services_checked=service_count,
            methods_checked=method_count,
            listeners_checked=listener_count,
            analysis_time_ms=(time.perf_counter() - start_time) * 1000,
        )
        result = CheckResult(
            diagnostics=tuple(diagnostics),
            stats=stats,
            fail_on_warning=self._config.fail_on_warning,
        )
        logger.info(
            "check_completed",
            modules=module_count,
            services=service_count,
            errors=result.error_count,
            warnings=result.warning_count,
            passed=result.passed,
        )

        if self._reporter is not None:
            self._reporter.report(result)

        return result

    def _check_module(self, module: ModuleDeclarations) -> tuple[Diagnostic, ...]:
        """Validate module services, each with a fresh sink."""
        kept: list[Diagnostic] = []
        for service in module.services:
            collector = DiagnosticCollector()
            self._validator.validate(service, module.listeners, collector)
            logger.debug(
                "service_checked",
                module=module.name,
                service=service.name or str(service.location),
                diagnostics=len(collector.diagnostics),
            )
            kept.extend(d for d in collector.diagnostics if not self._config.is_ignored(d.code))
        return tuple(kept)
