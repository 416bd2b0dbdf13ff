"""SDK exception hierarchy.

Every failure a call can produce is a :class:`GiphyError`, tagged with the
operation that failed.
"""

from __future__ import annotations

import httpx

from giphy_sdk.models.errors import ErrorResponse


class GiphyError(Exception):
    """Base error carrying the operation name, status and message text."""

    def __init__(
        self,
        operation: str,
        status: int | None = None,
        reason: str = "",
        message: str | None = None,
    ) -> None:
        self.operation = operation
        self.status = status
        self.reason = reason
        self.message = message
        super().__init__(self._format())

    def _format(self) -> str:
        where = f"{self.operation}"
        if self.status is not None:
            where += f" [{self.status}]"
        detail = self.message or self.reason or "request failed"
        return f"{where}: {detail}"


class GiphyHTTPError(GiphyError):
    """Raised when the GIPHY API returns a non-2xx response."""

    def __init__(
        self,
        operation: str,
        status: int,
        error: ErrorResponse | None = None,
        response: httpx.Response | None = None,
        reason: str = "",
    ) -> None:
        self.error = error
        self.response = response
        super().__init__(
            operation,
            status=status,
            reason=reason,
            message=error.text if error else None,
        )

    @classmethod
    def from_response(cls, operation: str, response: httpx.Response) -> GiphyHTTPError:
        """Build from an httpx response, attempting to parse the error body."""
        error: ErrorResponse | None = None
        try:
            body = response.json()
            if isinstance(body, dict):
                error = ErrorResponse.model_validate(body)
        except ValueError:
            pass
        return cls(
            operation,
            status=response.status_code,
            error=error,
            response=response,
            reason=response.reason_phrase,
        )

    @property
    def meta(self) -> dict | None:
        if self.error is None or self.error.meta is None:
            return None
        return self.error.meta.model_dump(exclude_none=True)


class GiphyNetworkError(GiphyError):
    """Raised when a transport-level error occurs (DNS, connection refused, reset, ...)."""

    def __init__(self, operation: str, reason: str) -> None:
        super().__init__(operation, reason=reason)


class GiphyDecodeError(GiphyError):
    """Raised when a response body cannot be decoded into JSON."""

    def __init__(self, operation: str, status: int | None, reason: str) -> None:
        super().__init__(operation, status=status, reason=reason)
