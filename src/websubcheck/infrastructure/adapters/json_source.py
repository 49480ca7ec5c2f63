"""JSON declaration source adapter.

Implements DeclarationSourcePort for host views serialized as JSON.
One document describes one module: its services and listener
constructions.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from websubcheck.domain.exceptions.loading import DeclarationLoadError
from websubcheck.domain.model.declaration import (
    ListenerArgument,
    ListenerConstruction,
    MethodDeclaration,
    MethodSymbol,
    ModuleDeclarations,
    ServiceDeclaration,
)
from websubcheck.domain.model.enums import ArgumentKind, ExpressionKind, Qualifier
from websubcheck.domain.model.location import Location
from websubcheck.domain.model.type_shape import (
    ErrorType,
    NilType,
    OpaqueType,
    SimpleType,
    TypeShape,
    UnionType,
)
from websubcheck.domain.ports.declaration_source import DeclarationSourcePort
from websubcheck.infrastructure.logging import get_logger

logger = get_logger(__name__)


class JSONDeclarationSource(DeclarationSourcePort):
    """Loads ModuleDeclarations from JSON documents.

    Stateless between load() calls.

    FAIL-FIRST: raises DeclarationLoadError on any loading issue.
    """

    def load(self, path: Path) -> ModuleDeclarations:
        """Load one JSON document.

        Args:
            path: Path to .json document

        Returns:
            Declarations of the described module

        Raises:
            DeclarationLoadError: If file cannot be read, parsed or converted
        """
        try:
            text = path.read_text(encoding="utf-8")
        except FileNotFoundError as e:
            raise DeclarationLoadError(path, "file not found") from e
        except PermissionError as e:
            raise DeclarationLoadError(path, "permission denied") from e
        except UnicodeDecodeError as e:
            raise DeclarationLoadError(path, f"encoding error: {e}") from e
        except OSError as e:
            raise DeclarationLoadError(path, f"cannot read: {e.strerror or e}") from e

        try:
            data = json.loads(text)
        except json.JSONDecodeError as e:
            raise DeclarationLoadError(path, f"invalid JSON: {e}") from e

        module = self.load_data(data, path)
        logger.debug(
            "declarations_loaded",
            path=str(path),
            module=module.name,
            services=len(module.services),
            listeners=len(module.listeners),
        )
        return module

    def load_data(self, data: object, path: Path) -> ModuleDeclarations:
        """Convert an already decoded document.

        Args:
            data: Decoded JSON value
            path: Document path, used for errors and default locations

        Raises:
            DeclarationLoadError: If the document shape is invalid
        """
        try:
            return _Converter(path).module(data)
        except (KeyError, TypeError, ValueError) as e:
            raise DeclarationLoadError(path, _describe_error(e)) from e


def _describe_error(error: Exception) -> str:
    if isinstance(error, KeyError):
        return f"missing field {error.args[0]!r}"
    return str(error) or type(error).__name__


class _Converter:
    """Document -> domain objects. Raises KeyError/TypeError/ValueError."""

    def __init__(self, path: Path) -> None:
        self._path = path
        self._file = path

    def module(self, data: object) -> ModuleDeclarations:
        doc = _mapping(data, "document")
        if "file" in doc:
            self._file = Path(_string(doc["file"], "file"))
        return ModuleDeclarations(
            name=_string(doc.get("module", self._path.stem), "module"),
            services=tuple(self.service(s) for s in _sequence(doc.get("services", []), "services")),
            listeners=tuple(
                self.listener(item) for item in _sequence(doc.get("listeners", []), "listeners")
            ),
        )

    def service(self, data: object) -> ServiceDeclaration:
        doc = _mapping(data, "service")
        name = doc.get("name")
        return ServiceDeclaration(
            location=self.location(doc["location"]),
            annotations=tuple(
                _string(a, "annotation") for a in _sequence(doc.get("annotations", []), "annotations")
            ),
            methods=tuple(self.method(m) for m in _sequence(doc.get("methods", []), "methods")),
            name=None if name is None else _string(name, "name"),
        )

    def method(self, data: object) -> MethodDeclaration:
        doc = _mapping(data, "method")
        symbol = doc.get("symbol")
        return MethodDeclaration(
            name=_string(doc["name"], "name"),
            location=self.location(doc["location"]),
            symbol=None if symbol is None else self.symbol(symbol),
        )

    def symbol(self, data: object) -> MethodSymbol:
        doc = _mapping(data, "symbol")
        return_type = doc.get("return_type")
        return MethodSymbol(
            qualifiers=frozenset(
                Qualifier(_string(q, "qualifier"))
                for q in _sequence(doc.get("qualifiers", []), "qualifiers")
            ),
            parameters=tuple(
                self.type_shape(p) for p in _sequence(doc.get("parameters", []), "parameters")
            ),
            return_type=None if return_type is None else self.type_shape(return_type),
        )

    def type_shape(self, data: object) -> TypeShape:
        doc = _mapping(data, "type")
        kind = _string(doc["kind"], "kind")
        match kind:
            case "simple":
                return SimpleType(
                    name=_string(doc["name"], "name"),
                    module=_string(doc.get("module", ""), "module"),
                )
            case "union":
                return UnionType(
                    members=tuple(self.type_shape(m) for m in _sequence(doc["members"], "members"))
                )
            case "error":
                return ErrorType(
                    signature=_string(doc["signature"], "signature"),
                    module_id=_string(doc.get("module_id", ""), "module_id"),
                    module_prefix=_string(doc.get("module_prefix", ""), "module_prefix"),
                )
            case "nil":
                return NilType()
            case "opaque":
                return OpaqueType(signature=_string(doc["signature"], "signature"))
        raise ValueError(f"unknown type kind: {kind!r}")

    def listener(self, data: object) -> ListenerConstruction:
        doc = _mapping(data, "listener")
        arguments = doc.get("arguments", [])
        return ListenerConstruction(
            location=self.location(doc["location"]),
            arguments=None
            if arguments is None
            else tuple(self.argument(a) for a in _sequence(arguments, "arguments")),
            explicit=_boolean(doc.get("explicit", True), "explicit"),
        )

    def argument(self, data: object) -> ListenerArgument:
        doc = _mapping(data, "argument")
        return ListenerArgument(
            kind=ArgumentKind(_string(doc.get("kind", "positional"), "kind")),
            expression=ExpressionKind(_string(doc["expression"], "expression")),
        )

    def location(self, data: object) -> Location:
        doc = _mapping(data, "location")
        file = doc.get("file")
        return Location(
            file=self._file if file is None else Path(_string(file, "file")),
            line=_integer(doc["line"], "line"),
            column=_integer(doc.get("column", 0), "column"),
            end_line=None if doc.get("end_line") is None else _integer(doc["end_line"], "end_line"),
            end_column=None
            if doc.get("end_column") is None
            else _integer(doc["end_column"], "end_column"),
        )


def _mapping(value: object, what: str) -> dict[str, Any]:
    if not isinstance(value, dict):
        raise TypeError(f"{what} must be an object, got {type(value).__name__}")
    return value


def _sequence(value: object, what: str) -> list[Any]:
    if not isinstance(value, list):
        raise TypeError(f"{what} must be an array, got {type(value).__name__}")
    return value


def _string(value: object, what: str) -> str:
    if not isinstance(value, str):
        raise TypeError(f"{what} must be a string, got {type(value).__name__}")
    return value


def _integer(value: object, what: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{what} must be an integer, got {type(value).__name__}")
    return value


def _boolean(value: object, what: str) -> bool:
    if not isinstance(value, bool):
        raise TypeError(f"{what} must be a boolean, got {type(value).__name__}")
    return value
