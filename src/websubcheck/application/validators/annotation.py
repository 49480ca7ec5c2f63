"""Service annotation presence check."""

from __future__ import annotations

from typing import TYPE_CHECKING

from websubcheck.domain.model.contract import SERVICE_ANNOTATION_NAME
from websubcheck.domain.model.diagnostic import DiagnosticCode

if TYPE_CHECKING:
    from websubcheck.application.validators._context import AnalysisContext
    from websubcheck.domain.model.declaration import ServiceDeclaration


class ServiceAnnotationValidator:
    """Requires the marker annotation, matched by exact name."""

    def __init__(self, annotation_name: str = SERVICE_ANNOTATION_NAME) -> None:
        if not annotation_name:
            raise ValueError("annotation_name must not be empty")
        self._annotation_name = annotation_name

    def validate(self, context: AnalysisContext, service: ServiceDeclaration) -> None:
        """Emit WEBSUB_101 at the service if the annotation is missing."""
        if not service.has_annotation(self._annotation_name):
            context.emit(DiagnosticCode.WEBSUB_101, service.location)
