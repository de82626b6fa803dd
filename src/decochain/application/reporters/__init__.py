"""Reporters for evaluated chains.

All reporters write to a stream (default: sys.stdout).
ConsoleReporter.render() also returns its rich table as a string.
"""

from decochain.application.reporters._base import BaseReporter
from decochain.application.reporters.console import ConsoleConfig, ConsoleReporter
from decochain.application.reporters.json_reporter import JSONReporter
from decochain.application.reporters.plain_text import PlainTextReporter

__all__ = [
    "BaseReporter",
    "PlainTextReporter",
    "JSONReporter",
    "ConsoleConfig",
    "ConsoleReporter",
]
