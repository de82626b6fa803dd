"""decochain - value decoration chains: base components wrapped by fixed-delta decorators."""

__version__ = "0.1.0"

from decochain.application.chain import Chain, decorate
from decochain.application.evaluator import evaluate
from decochain.application.services import DecorationService
from decochain.domain.exceptions import DecoChainError
from decochain.domain.model import BaseComponent, Decoration, Decorator, ValueComponent

__all__ = [
    "BaseComponent",
    "Chain",
    "DecoChainError",
    "Decoration",
    "DecorationService",
    "Decorator",
    "ValueComponent",
    "__version__",
    "decorate",
    "evaluate",
]
