"""Exceptions raised inside model pipelines.

Every failure a pipeline stage can report is a ``LangException``. Stages raise
them and let them propagate; only the exception handler turns them into a
client response.
"""

from enum import Enum
from typing import Any, Optional

from modelgateway.core.error_types import (
    ERROR_TYPE_API,
    ERROR_TYPE_CONNECTION,
    ERROR_TYPE_INVALID_REQUEST,
    ERROR_TYPE_NOT_IMPLEMENTED,
    ERROR_TYPE_PROVIDER,
)


class ErrorKind(str, Enum):
    """Internal failure categories."""

    NOT_IMPLEMENTED = "not_implemented"
    VALIDATION = "validation"
    NETWORK = "network"
    PROVIDER = "provider"
    INTERNAL = "internal"

    @property
    def error_type(self) -> str:
        """Client-facing error type string for this kind."""
        return _ERROR_TYPES[self]

    @property
    def status_code(self) -> int:
        """Default HTTP status for this kind."""
        return _STATUS_CODES[self]


_ERROR_TYPES = {
    ErrorKind.NOT_IMPLEMENTED: ERROR_TYPE_NOT_IMPLEMENTED,
    ErrorKind.VALIDATION: ERROR_TYPE_INVALID_REQUEST,
    ErrorKind.NETWORK: ERROR_TYPE_CONNECTION,
    ErrorKind.PROVIDER: ERROR_TYPE_PROVIDER,
    ErrorKind.INTERNAL: ERROR_TYPE_API,
}

_STATUS_CODES = {
    ErrorKind.NOT_IMPLEMENTED: 501,
    ErrorKind.VALIDATION: 400,
    ErrorKind.NETWORK: 502,
    ErrorKind.PROVIDER: 502,
    ErrorKind.INTERNAL: 500,
}


class LangException(Exception):
    """Uniform internal failure carrying a kind, a message and optional upstream detail."""

    def __init__(
        self,
        kind: ErrorKind,
        message: str,
        detail: Optional[Any] = None,
    ):
        self.kind = kind
        self.message = message
        self.detail = detail
        super().__init__(message)

    @property
    def status_code(self) -> int:
        return self.kind.status_code

    @property
    def error_type(self) -> str:
        return self.kind.error_type

    def __repr__(self) -> str:
        return f"{type(self).__name__}(kind={self.kind.value!r}, message={self.message!r})"


class NotImplementedException(LangException):
    """Raised when a default pipeline stage was invoked without being overridden"""

    def __init__(self, owner: str, stage: str):
        self.owner = owner
        self.stage = stage
        super().__init__(
            ErrorKind.NOT_IMPLEMENTED,
            f"{owner}.{stage} is not implemented",
        )


class ValidationException(LangException):
    """Raised when an inbound request cannot be turned into typed parameters"""

    def __init__(self, message: str, detail: Optional[Any] = None):
        super().__init__(ErrorKind.VALIDATION, message, detail)


class NetworkException(LangException):
    """Raised when a remote fetch or provider call did not complete"""

    def __init__(self, message: str, detail: Optional[Any] = None):
        super().__init__(ErrorKind.NETWORK, message, detail)


class ProviderException(LangException):
    """Raised when a provider answered but reported an application-level failure"""

    def __init__(
        self,
        message: str,
        detail: Optional[Any] = None,
        upstream_status: Optional[int] = None,
    ):
        self.upstream_status = upstream_status
        super().__init__(ErrorKind.PROVIDER, message, detail)

    @property
    def status_code(self) -> int:
        # Client errors reported upstream are passed through as-is
        if self.upstream_status is not None and 400 <= self.upstream_status < 500:
            return self.upstream_status
        return super().status_code
