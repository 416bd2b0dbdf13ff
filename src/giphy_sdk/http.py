"""HTTP executor wrapping httpx, with error normalization and callback dispatch."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Callable
from typing import Any

import httpx

from giphy_sdk.errors import GiphyDecodeError, GiphyError, GiphyHTTPError, GiphyNetworkError
from giphy_sdk.request import RequestDescriptor

log = logging.getLogger(__name__)

Callback = Callable[[GiphyError | None, Any], None]


class HTTPClient:
    """Async HTTP client for the GIPHY REST API.

    :meth:`execute` is the only code path that talks to the network.
    :meth:`dispatch` layers the error-first callback convention on top of it.
    """

    def __init__(
        self,
        base_url: str,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self._client = httpx.AsyncClient(transport=transport)
        self._pending: set[asyncio.Task[Any]] = set()

    async def execute(self, request: RequestDescriptor, operation: str) -> Any:
        """Send *request* and return the decoded JSON body.

        Raises a :class:`GiphyError` subclass on any failure. Nothing is retried.
        """
        log.debug("%s: %s %s", operation, request.method, request.path)
        try:
            response = await self._client.request(
                request.method,
                request.url,
                params=dict(request.params),
            )
        except httpx.DecodingError as exc:
            log.debug("%s: undecodable body: %s", operation, exc)
            raise GiphyDecodeError(operation, None, f"undecodable body: {exc}") from exc
        except httpx.RequestError as exc:
            log.debug("%s: transport error: %s", operation, exc)
            raise GiphyNetworkError(operation, str(exc) or type(exc).__name__) from exc

        if not response.is_success:
            log.debug("%s: HTTP %d", operation, response.status_code)
            raise GiphyHTTPError.from_response(operation, response)

        if not response.content:
            raise GiphyDecodeError(operation, response.status_code, "empty response body")
        try:
            return response.json()
        except ValueError as exc:
            raise GiphyDecodeError(operation, response.status_code, f"invalid JSON body: {exc}") from exc

    def dispatch(
        self,
        request: RequestDescriptor,
        operation: str,
        callback: Callback | None = None,
    ) -> Awaitable[Any] | None:
        """Run *request* as an awaitable, or report it through *callback*.

        With a callback the request is scheduled on the running loop, ``None``
        is returned, and ``callback(error, result)`` fires once on settlement.
        """
        if callback is None:
            return self.execute(request, operation)

        loop = asyncio.get_running_loop()
        task = loop.create_task(self.execute(request, operation))
        self._pending.add(task)
        task.add_done_callback(self._pending.discard)
        task.add_done_callback(lambda t: _settle(t, operation, callback))
        return None

    async def close(self) -> None:
        """Cancel callback-mode requests still in flight, then close the pool."""
        pending = list(self._pending)
        for task in pending:
            task.cancel()
        if pending:
            await asyncio.gather(*pending, return_exceptions=True)
        await self._client.aclose()


def _settle(task: asyncio.Task[Any], operation: str, callback: Callback) -> None:
    if task.cancelled():
        callback(GiphyNetworkError(operation, "request cancelled"), None)
        return
    exc = task.exception()
    if exc is None:
        callback(None, task.result())
    elif isinstance(exc, GiphyError):
        callback(exc, None)
    else:
        # Anything escaping execute() still reaches the caller in the error shape.
        err = GiphyError(operation, reason=f"{type(exc).__name__}: {exc}")
        err.__cause__ = exc
        callback(err, None)
