"""Result types for railway-oriented programming.

Every operation that can fail for a configuration or credential reason
returns a Result instead of raising. Transport failures are the exception:
they propagate unchanged from the transport adapter.

Usage:
    result = client.search("customers", 'name = "Alice"')
    match result:
        case Success(value=response):
            handle(response)
        case Failure(error=error):
            print(f"Request not sent: {error}")
"""

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")  # Success type
E = TypeVar("E")  # Error type


@dataclass(frozen=True, slots=True, kw_only=True)
class Success(Generic[T]):
    """Represents a successful operation result.

    Attributes:
        value: The successful result value.
    """

    value: T


@dataclass(frozen=True, slots=True, kw_only=True)
class Failure(Generic[E]):
    """Represents a failed operation result.

    Attributes:
        error: The error that occurred.
    """

    error: E


# Type alias for Result union
type Result[T, E] = Success[T] | Failure[E]
