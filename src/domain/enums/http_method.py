"""HTTP methods used by the records resource."""

from enum import Enum


class HttpMethod(str, Enum):
    """HTTP method of a request descriptor."""

    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    DELETE = "DELETE"
