"""
Search client errors - one exception class per failure category.

Every way a find-users call can fail maps to exactly one class below, so
callers can tell a local validation problem from an auth rejection, a
query-shape rejection, a server fault or a transport failure.
"""

from typing import Optional


class SearchError(Exception):
    """Base class for every find-users failure."""

    pass


class RequestValidationError(SearchError):
    """Request rejected locally, no network call was made."""

    pass


class InvalidLimit(RequestValidationError):
    def __init__(self) -> None:
        super().__init__("limit must be non-negative")


class InvalidOffset(RequestValidationError):
    def __init__(self) -> None:
        super().__init__("offset must be non-negative")


class BadAccessToken(SearchError):
    """Server answered 401."""

    def __init__(self) -> None:
        super().__init__("bad access token")


class OrderFieldInvalid(SearchError):
    """Server answered 400 with the bad order field tag."""

    def __init__(self, order_field: str) -> None:
        super().__init__("order field invalid")
        self.order_field = order_field


class UnknownBadRequest(SearchError):
    """Server answered 400 with an unknown tag or an unreadable body."""

    def __init__(self, tag: Optional[str] = None) -> None:
        super().__init__("unknown bad request error")
        self.tag = tag


class SearchServerError(SearchError):
    """Server answered 500."""

    def __init__(self) -> None:
        super().__init__("search server fatal error")


class UnexpectedStatus(SearchError):
    def __init__(self, status_code: int) -> None:
        super().__init__(f"unknown status code: {status_code}")
        self.status_code = status_code


class TransportFailure(SearchError):
    """
    The call never produced an HTTP response.

    Connection refused, DNS failure, unsupported scheme or malformed URL.
    The underlying httpx error is available as ``__cause__``.
    """

    def __init__(self, message: str = "unknown error") -> None:
        super().__init__(message)


class SearchTimeout(TransportFailure):
    def __init__(self, timeout: float) -> None:
        super().__init__(f"timeout after {timeout}s")
        self.timeout = timeout


class ResultDecodeError(SearchError):
    """Server answered 200 but the body is not a JSON list of users."""

    def __init__(self) -> None:
        super().__init__("cannot unpack result JSON")
