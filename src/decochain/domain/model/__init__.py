"""Domain model: components, decorators, evaluation results."""

from decochain.domain.model.component import BaseComponent, Number, ValueComponent, is_number
from decochain.domain.model.configuration import ChainConfig
from decochain.domain.model.decoration import Decoration
from decochain.domain.model.decorator import Decorator, unwind
from decochain.domain.model.evaluation import Evaluation, EvaluationStep

__all__ = [
    # Contract
    "Number",
    "ValueComponent",
    "is_number",
    # Components
    "BaseComponent",
    "Decoration",
    "Decorator",
    "unwind",
    # Results
    "Evaluation",
    "EvaluationStep",
    # Configuration
    "ChainConfig",
]
