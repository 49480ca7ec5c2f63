"""Integration: JSON host view -> checker -> reporters."""

import io
import json
from pathlib import Path

from websubcheck.application.reporters import JSONReporter
from websubcheck.application.services import ServiceChecker
from websubcheck.infrastructure.adapters import JSONDeclarationSource


def simple(name: str) -> dict[str, str]:
    return {"kind": "simple", "module": "websub", "name": name}


def websub_error(name: str) -> dict[str, str]:
    return {
        "kind": "error",
        "signature": f"ballerina/websub:2.1.0:{name}",
        "module_id": "ballerina/websub:2.1.0",
        "module_prefix": "websub",
    }


GOOD_MODULE = {
    "module": "news",
    "file": "news.bal",
    "services": [
        {
            "name": "/news",
            "location": {"line": 4},
            "annotations": ["SubscriberServiceConfig"],
            "methods": [
                {
                    "name": "onSubscriptionVerification",
                    "location": {"line": 6, "column": 4},
                    "symbol": {
                        "qualifiers": ["remote", "isolated"],
                        "parameters": [simple("SubscriptionVerification")],
                        "return_type": {
                            "kind": "union",
                            "members": [
                                simple("SubscriptionVerificationSuccess"),
                                websub_error("SubscriptionVerificationError"),
                            ],
                        },
                    },
                },
                {
                    "name": "onSubscriptionValidationDenied",
                    "location": {"line": 10, "column": 4},
                    "symbol": {
                        "qualifiers": ["remote"],
                        "parameters": [websub_error("SubscriptionDeniedError")],
                    },
                },
                {
                    "name": "onEventNotification",
                    "location": {"line": 14, "column": 4},
                    "symbol": {
                        "qualifiers": ["remote"],
                        "parameters": [simple("ContentDistributionMessage")],
                        "return_type": {
                            "kind": "union",
                            "members": [
                                simple("Acknowledgement"),
                                websub_error("SubscriptionDeletedError"),
                                {"kind": "nil"},
                            ],
                        },
                    },
                },
            ],
        }
    ],
    "listeners": [
        {
            "location": {"line": 1},
            "arguments": [{"kind": "positional", "expression": "numeric_literal"}],
        }
    ],
}

BAD_MODULE = {
    "module": "orders",
    "file": "orders.bal",
    "services": [
        {
            "location": {"line": 3},
            "annotations": [],
            "methods": [
                {
                    "name": "onSubscriptionVerification",
                    "location": {"line": 5, "column": 4},
                    "symbol": {
                        "parameters": [simple("SubscriptionVerification")],
                        "return_type": {
                            "kind": "union",
                            "members": [simple("SubscriptionVerificationSuccess"), {"kind": "nil"}],
                        },
                    },
                },
                {
                    "name": "onEventNotificaton",
                    "location": {"line": 9, "column": 4},
                    "symbol": {"qualifiers": ["remote"]},
                },
            ],
        }
    ],
    "listeners": [
        {
            "location": {"line": 1},
            "arguments": [
                {"kind": "positional", "expression": "simple_name_reference"},
                {"kind": "named", "expression": "mapping_constructor"},
            ],
        }
    ],
}


def write(tmp_path: Path, data: object, name: str) -> Path:
    path = tmp_path / name
    path.write_text(json.dumps(data), encoding="utf-8")
    return path


class TestSubscriberServices:
    """Full pipeline over realistic declarations."""

    def test_conforming_module(self, tmp_path: Path) -> None:
        modules = JSONDeclarationSource().load_all((write(tmp_path, GOOD_MODULE, "news.json"),))

        result = ServiceChecker().check(modules)

        assert result.diagnostics == ()
        assert result.stats.methods_checked == 3
        assert result.stats.listeners_checked == 1

    def test_violating_module_report(self, tmp_path: Path) -> None:
        paths = (
            write(tmp_path, GOOD_MODULE, "news.json"),
            write(tmp_path, BAD_MODULE, "orders.json"),
        )
        output = io.StringIO()

        result = ServiceChecker(reporter=JSONReporter(output)).check(
            JSONDeclarationSource().load_all(paths)
        )

        report = json.loads(output.getvalue())
        assert not result.passed
        assert [(d["code"], d["location"]["line"]) for d in report["diagnostics"]] == [
            ("WEBSUB_109", 1),
            ("WEBSUB_101", 3),
            ("WEBSUB_103", 3),
            ("WEBSUB_102", 5),
            ("WEBSUB_107", 5),
            ("WEBSUB_104", 9),
        ]
        assert report["diagnostics"][4]["message"] == (
            "return type websub:SubscriptionVerificationSuccess|() "
            "not allowed for onSubscriptionVerification method"
        )
        assert all(d["location"]["file"] == "orders.bal" for d in report["diagnostics"])
        assert report["summary"] == {"diagnostic_count": 6, "error_count": 5, "warning_count": 1}
