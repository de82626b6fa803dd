"""Application layer for decorator chains.

Components:
- chain: Chain builder (decorate, Chain)
- evaluator: Chain evaluation with per-layer breakdown
- catalog: Named bases and decorations (characters, coffee)
- reporters: Output formatting (PlainText, JSON, Console)
- services: Main facade (DecorationService)
"""

from decochain.application.catalog import Catalog, characters, coffee
from decochain.application.chain import Chain, decorate
from decochain.application.evaluator import evaluate, unwind
from decochain.application.reporters import (
    BaseReporter,
    ConsoleConfig,
    ConsoleReporter,
    JSONReporter,
    PlainTextReporter,
)
from decochain.application.services import DecorationService

__all__ = [
    # Building
    "Chain",
    "decorate",
    # Evaluation
    "evaluate",
    "unwind",
    # Catalogs
    "Catalog",
    "characters",
    "coffee",
    # Reporters
    "BaseReporter",
    "PlainTextReporter",
    "JSONReporter",
    "ConsoleConfig",
    "ConsoleReporter",
    # Services
    "DecorationService",
]
