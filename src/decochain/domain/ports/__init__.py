"""Domain ports: Protocols users implement to extend decochain."""

from decochain.domain.ports.reporter import ReporterProtocol

__all__ = ["ReporterProtocol"]
