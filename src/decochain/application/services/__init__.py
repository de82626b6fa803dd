"""Application services.

DecorationService is the main facade for building and evaluating chains.
"""

from decochain.application.services.decoration_service import DecorationService

__all__ = [
    "DecorationService",
]
