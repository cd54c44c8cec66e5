"""
Async HTTP Transport for ghrepo.

Same contract as HTTPTransport using the httpx async client. The in-flight
request is raced against the caller's context so cancelling it aborts the
round-trip instead of waiting for the server.
"""

import asyncio
import contextlib
import time
from typing import Any

import httpx

from ghrepo.config import ClientConfig
from ghrepo.context import RequestContext
from ghrepo.exceptions import TransportError
from ghrepo.logging import log_http_request, log_http_response
from ghrepo.transport import (
    CANCEL_POLL_INTERVAL,
    default_headers,
    effective_timeout,
    encode_body,
)


class AsyncHTTPTransport:
    """Async HTTP transport layer shared by all repository operations."""

    def __init__(
        self,
        config: ClientConfig,
        http_transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """
        Initialize async HTTP transport.

        Args:
            config: Immutable client configuration
            http_transport: Optional httpx async transport (e.g. httpx.MockTransport in tests)
        """
        self.config = config
        self.base_url = config.base_url.rstrip("/")

        self._client = httpx.AsyncClient(
            base_url=self.base_url,
            timeout=config.timeout,
            headers=default_headers(config),
            transport=http_transport,
        )

    async def close(self) -> None:
        """Close the HTTP client."""
        await self._client.aclose()

    async def __aenter__(self) -> "AsyncHTTPTransport":
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self.close()

    async def request(
        self,
        method: str,
        path: str,
        body: dict[str, Any] | None = None,
        context: RequestContext | None = None,
    ) -> httpx.Response:
        """
        Perform one HTTP round-trip.

        Returns:
            The response, already read and closed

        Raises:
            TransportError: If the context is done or no response was obtained
        """
        context = context or RequestContext.background()
        context.check()

        content, extra_headers = encode_body(body)
        timeout = effective_timeout(self.config, context)

        log_http_request(
            method,
            f"{self.base_url}{path}",
            headers={**self._client.headers, **extra_headers},
            body=body,
        )

        start = time.monotonic()
        task = asyncio.ensure_future(
            self._send(method, path, content, extra_headers, timeout)
        )
        try:
            while True:
                done, _ = await asyncio.wait({task}, timeout=CANCEL_POLL_INTERVAL)
                if done:
                    break
                if context.cancelled:
                    await self._abort(task)
                    raise TransportError("context cancelled", code="CANCELLED")
        except asyncio.CancelledError:
            await self._abort(task)
            raise

        response = task.result()

        log_http_response(
            response.status_code,
            f"{self.base_url}{path}",
            elapsed_ms=(time.monotonic() - start) * 1000,
        )

        context.check()
        return response

    async def _send(
        self,
        method: str,
        path: str,
        content: bytes | None,
        headers: dict[str, str],
        timeout: float,
    ) -> httpx.Response:
        try:
            async with self._client.stream(
                method, path, content=content, headers=headers, timeout=timeout
            ) as response:
                await response.aread()
        except httpx.TimeoutException as e:
            raise TransportError(f"request timed out: {e}", code="TIMEOUT") from e
        except httpx.RequestError as e:
            raise TransportError(f"failed to send request: {e}") from e
        return response

    @staticmethod
    async def _abort(task: "asyncio.Future[httpx.Response]") -> None:
        task.cancel()
        with contextlib.suppress(asyncio.CancelledError, TransportError):
            await task
