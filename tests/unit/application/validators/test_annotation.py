"""Tests for validators/annotation.py."""

import pytest

from websubcheck.application.collectors import DiagnosticCollector
from websubcheck.application.validators import AnalysisContext, ServiceAnnotationValidator
from websubcheck.domain.model.diagnostic import DiagnosticCode
from tests.factories import make_service


class TestServiceAnnotationValidator:
    """Tests for ServiceAnnotationValidator."""

    def test_annotated_service_passes(self) -> None:
        collector = DiagnosticCollector()
        ServiceAnnotationValidator().validate(AnalysisContext(collector), make_service())
        assert collector.diagnostics == ()

    @pytest.mark.parametrize(
        "annotations",
        [(), ("ServiceConfig",), ("subscriberServiceConfig",), ("websub:SubscriberServiceConfig",)],
    )
    def test_missing_annotation(self, annotations: tuple[str, ...]) -> None:
        service = make_service(annotations=annotations)
        collector = DiagnosticCollector()

        ServiceAnnotationValidator().validate(AnalysisContext(collector), service)

        assert [d.code for d in collector.diagnostics] == [DiagnosticCode.WEBSUB_101]
        assert collector.diagnostics[0].location == service.location

    def test_empty_annotation_name_raises(self) -> None:
        with pytest.raises(ValueError, match="annotation_name must not be empty"):
            ServiceAnnotationValidator("")
