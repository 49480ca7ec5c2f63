"""Tests for validators/service_declaration.py."""

from concurrent.futures import ThreadPoolExecutor

from websubcheck.application.collectors import DiagnosticCollector
from websubcheck.application.validators import ServiceDeclarationValidator, validate
from websubcheck.domain.model.contract import ON_EVENT_NOTIFICATION, ON_SUBSCRIPTION_VERIFICATION
from websubcheck.domain.model.declaration import ListenerConstruction, ServiceDeclaration
from websubcheck.domain.model.diagnostic import Diagnostic, DiagnosticCode
from websubcheck.domain.model.enums import ExpressionKind
from tests.factories import (
    make_event_notification,
    make_listener,
    make_method,
    make_service,
    optional,
    websub_type,
)


def run(
    service: ServiceDeclaration,
    listeners: tuple[ListenerConstruction, ...] = (),
) -> tuple[Diagnostic, ...]:
    collector = DiagnosticCollector()
    validate(service, listeners, collector)
    return collector.diagnostics


class TestScenarios:
    """End-to-end scenarios for one declaration."""

    def test_valid_service_has_no_diagnostics(self) -> None:
        method = make_method(
            ON_EVENT_NOTIFICATION,
            parameters=(websub_type("ContentDistributionMessage"),),
            return_type=optional(websub_type("Acknowledgement")),
        )
        assert run(make_service(method)) == ()

    def test_omitted_return_type_accepted(self) -> None:
        method = make_method(ON_EVENT_NOTIFICATION, return_type=None)
        assert run(make_service(method)) == ()

    def test_verification_without_remote_emits_only_qualifier(self) -> None:
        method = make_method(
            ON_SUBSCRIPTION_VERIFICATION,
            qualifiers=frozenset(),
            parameters=(websub_type("SubscriptionVerification"),),
            return_type=websub_type("SubscriptionVerificationSuccess"),
        )
        service = make_service(make_event_notification(), method)

        diagnostics = run(service)

        assert [d.code for d in diagnostics] == [DiagnosticCode.WEBSUB_102]
        assert diagnostics[0].location == method.location


class TestOrdering:
    """Diagnostics come out in check order."""

    def test_check_order(self) -> None:
        service = make_service(
            make_method("onPing", qualifiers=frozenset(), line=5),
            make_method(ON_SUBSCRIPTION_VERIFICATION, parameters=(), line=9),
            annotations=(),
        )
        listener = make_listener(
            ExpressionKind.SIMPLE_NAME_REFERENCE, ExpressionKind.MAPPING_CONSTRUCTOR
        )

        diagnostics = run(service, (listener,))

        assert [d.code for d in diagnostics] == [
            DiagnosticCode.WEBSUB_109,
            DiagnosticCode.WEBSUB_101,
            DiagnosticCode.WEBSUB_103,
            DiagnosticCode.WEBSUB_102,
            DiagnosticCode.WEBSUB_104,
            DiagnosticCode.WEBSUB_106,
            DiagnosticCode.WEBSUB_108,
        ]

    def test_idempotent(self) -> None:
        service = make_service(make_method("onPing"), annotations=())
        listeners = (make_listener(ExpressionKind.MAPPING_CONSTRUCTOR, ExpressionKind.MAPPING_CONSTRUCTOR),)

        assert run(service, listeners) == run(service, listeners)


class TestServiceDeclarationValidator:
    """Tests for the reusable validator value."""

    def test_shared_between_threads(self) -> None:
        validator = ServiceDeclarationValidator()
        services = [make_service(make_method("onPing", line=n + 1)) for n in range(8)]

        def check(service: ServiceDeclaration) -> tuple[Diagnostic, ...]:
            collector = DiagnosticCollector()
            validator.validate(service, (), collector)
            return collector.diagnostics

        with ThreadPoolExecutor(max_workers=4) as pool:
            results = list(pool.map(check, services))

        for n, diagnostics in enumerate(results):
            assert [d.code for d in diagnostics] == [
                DiagnosticCode.WEBSUB_103,
                DiagnosticCode.WEBSUB_104,
            ]
            assert diagnostics[1].location.line == n + 1

    def test_accepts_listener_iterator(self) -> None:
        listeners = iter(
            [make_listener(ExpressionKind.SIMPLE_NAME_REFERENCE, ExpressionKind.SIMPLE_NAME_REFERENCE)]
        )
        collector = DiagnosticCollector()

        ServiceDeclarationValidator().validate(make_service(), listeners, collector)

        assert [d.code for d in collector.diagnostics] == [DiagnosticCode.WEBSUB_109]
