"""Reporters for subscriber service check results."""

from websubcheck.application.reporters._base import BaseReporter
from websubcheck.application.reporters.console import ConsoleReporter
from websubcheck.application.reporters.json_reporter import JSONReporter
from websubcheck.application.reporters.plain_text import PlainTextReporter

__all__ = [
    "BaseReporter",
    "ConsoleReporter",
    "JSONReporter",
    "PlainTextReporter",
]
