"""decochain domain layer.

Pure domain logic with no external dependencies.
Only imports: typing, dataclasses, decimal, collections.abc
"""

from decochain.domain.exceptions import (
    ChainDepthError,
    DecoChainError,
    DuplicateEntryError,
    MissingComponentError,
    MixedNumericError,
    NoActionError,
    UnknownEntryError,
)
from decochain.domain.model import (
    BaseComponent,
    ChainConfig,
    Decoration,
    Decorator,
    Evaluation,
    EvaluationStep,
    Number,
    ValueComponent,
    unwind,
)
from decochain.domain.ports import ReporterProtocol

__all__ = [
    # Exceptions
    "DecoChainError",
    "MissingComponentError",
    "MixedNumericError",
    "ChainDepthError",
    "NoActionError",
    "UnknownEntryError",
    "DuplicateEntryError",
    # Contract
    "Number",
    "ValueComponent",
    # Entities
    "BaseComponent",
    "Decoration",
    "Decorator",
    "unwind",
    # Results
    "Evaluation",
    "EvaluationStep",
    # Configuration
    "ChainConfig",
    # Ports
    "ReporterProtocol",
]
