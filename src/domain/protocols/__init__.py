"""Domain protocols (ports) package.

Infrastructure adapters implement these protocols without inheritance.

Usage:
    from src.domain.protocols import LoggerProtocol, TransportProtocol
"""

from src.domain.protocols.logger_protocol import LoggerProtocol
from src.domain.protocols.transport_protocol import TransportProtocol

__all__ = [
    "LoggerProtocol",
    "TransportProtocol",
]
