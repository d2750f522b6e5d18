"""Exceptions raised by the NetOrca SDK."""

from __future__ import annotations

import httpx


class NetOrcaError(Exception):
    """Base class for every error raised by this package."""


class InvalidArgumentError(NetOrcaError, ValueError):
    """Raised when the client is constructed with invalid configuration."""


class ConfigError(NetOrcaError):
    """Raised when settings cannot be loaded or fail validation."""


class RequestTimeoutError(NetOrcaError):
    """Raised when no response arrived before the request deadline."""


class TransportError(NetOrcaError):
    """Raised when the request failed before any HTTP status was received."""


class DecodeError(NetOrcaError):
    """Raised when a response body is not valid JSON of the expected shape."""


class RequestFailedError(NetOrcaError):
    """Raised when the NetOrca API answers with an unexpected status.

    List failures only report the status line; update failures also carry
    the response body so that field validation messages are not lost.
    """

    def __init__(
        self, message: str, status_code: int, reason: str, body: str = ""
    ) -> None:
        self.status_code = status_code
        self.reason = reason
        self.body = body
        super().__init__(message)

    @property
    def status(self) -> str:
        return f"{self.status_code} {self.reason}"

    @classmethod
    def for_list(cls, resp: httpx.Response, what: str) -> RequestFailedError:
        reason = resp.reason_phrase or "Unknown error"
        return cls(
            f"failed to get {what}: {resp.status_code} {reason}",
            status_code=resp.status_code,
            reason=reason,
        )

    @classmethod
    def for_update(cls, resp: httpx.Response, what: str) -> RequestFailedError:
        reason = resp.reason_phrase or "Unknown error"
        return cls(
            f"failed to update {what} state. Details: "
            f"{resp.status_code} {reason}, {resp.text}",
            status_code=resp.status_code,
            reason=reason,
            body=resp.text,
        )
