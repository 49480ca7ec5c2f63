"""Tests for validators/required_methods.py."""

import pytest

from websubcheck.application.collectors import DiagnosticCollector
from websubcheck.application.validators import AnalysisContext, RequiredMethodValidator
from websubcheck.domain.model.declaration import ServiceDeclaration
from websubcheck.domain.model.diagnostic import DiagnosticCode
from tests.factories import make_location, make_method, make_service


def run(service: ServiceDeclaration) -> DiagnosticCollector:
    collector = DiagnosticCollector()
    RequiredMethodValidator().validate(AnalysisContext(collector), service)
    return collector


class TestRequiredMethodValidator:
    """Tests for RequiredMethodValidator."""

    @pytest.mark.parametrize(
        "name",
        ["onEventNotification", "ONEVENTNOTIFICATION", "OnEventNotification", "oneventnotification"],
    )
    def test_any_casing_satisfies(self, name: str) -> None:
        assert run(make_service(make_method(name))).diagnostics == ()

    def test_missing_method(self) -> None:
        service = make_service(make_method("onSubscriptionVerification"))

        diagnostics = run(service).diagnostics

        assert [d.code for d in diagnostics] == [DiagnosticCode.WEBSUB_103]
        assert diagnostics[0].location == service.location

    def test_no_methods(self) -> None:
        service = ServiceDeclaration(location=make_location(), methods=())
        assert len(run(service)) == 1

    def test_unresolved_method_still_counts(self) -> None:
        assert run(make_service(make_method(resolved=False))).diagnostics == ()

    def test_similar_name_does_not_count(self) -> None:
        assert len(run(make_service(make_method("on_event_notification")))) == 1

    def test_empty_method_name_raises(self) -> None:
        with pytest.raises(ValueError, match="method_name must not be empty"):
            RequiredMethodValidator("")
