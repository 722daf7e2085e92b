"""Core shared kernel.

This module provides foundational utilities used across all layers:
- Result types for railway-oriented programming
- Base error class and error codes

The core module has NO dependencies on other application layers.
"""

from src.core.errors import DomainError
from src.core.enums import ErrorCode
from src.core.result import Failure, Result, Success

__all__ = [
    "DomainError",
    "ErrorCode",
    "Failure",
    "Result",
    "Success",
]
