"""
HTTP Transport for ghrepo.

Every API call goes through HTTPTransport.request: it attaches the auth and
version headers, encodes the body, applies the timeout/cancellation policy and
returns the fully read response. The round-trip runs on a worker thread so
the caller stops waiting the moment its context is cancelled. No retries
happen here.
"""

import json
import time
from concurrent import futures
from typing import Any

import httpx

from ghrepo.config import ClientConfig
from ghrepo.context import RequestContext
from ghrepo.exceptions import TransportError
from ghrepo.logging import log_http_request, log_http_response

# How often an in-flight request checks for cancellation, in seconds
CANCEL_POLL_INTERVAL = 0.05


def default_headers(config: ClientConfig) -> dict[str, str]:
    """Headers sent with every request."""
    return {
        "Authorization": f"Bearer {config.token}",
        "Accept": config.api_accept,
        "User-Agent": config.user_agent,
    }


def encode_body(body: dict[str, Any] | None) -> tuple[bytes | None, dict[str, str]]:
    """
    Encode a request body to JSON bytes.

    Returns:
        (content, extra headers); both empty when there is no body
    """
    if body is None:
        return None, {}
    return json.dumps(body).encode("utf-8"), {"Content-Type": "application/json"}


def effective_timeout(config: ClientConfig, context: RequestContext) -> float:
    """Configured timeout, shortened to the context's remaining deadline."""
    remaining = context.remaining()
    if remaining is None:
        return config.timeout
    return min(config.timeout, remaining)


class HTTPTransport:
    """
    HTTP transport layer shared by all repository operations.

    Handles:
    - Bearer authentication and API version headers
    - JSON body encoding
    - Per-request timeout bounded by the caller's context
    - Mapping connection, TLS and timeout failures to TransportError
    - Abandoning the round-trip as soon as the context is cancelled
    """

    def __init__(
        self,
        config: ClientConfig,
        http_transport: httpx.BaseTransport | None = None,
    ) -> None:
        """
        Initialize HTTP transport.

        Args:
            config: Immutable client configuration
            http_transport: Optional httpx transport (e.g. httpx.MockTransport in tests)
        """
        self.config = config
        self.base_url = config.base_url.rstrip("/")

        self._client = httpx.Client(
            base_url=self.base_url,
            timeout=config.timeout,
            headers=default_headers(config),
            transport=http_transport,
        )
        self._executor = futures.ThreadPoolExecutor(thread_name_prefix="ghrepo-http")

    def close(self) -> None:
        """Close the HTTP client."""
        self._executor.shutdown(wait=False, cancel_futures=True)
        self._client.close()

    def __enter__(self) -> "HTTPTransport":
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()

    def request(
        self,
        method: str,
        path: str,
        body: dict[str, Any] | None = None,
        context: RequestContext | None = None,
    ) -> httpx.Response:
        """
        Perform one HTTP round-trip.

        Args:
            method: HTTP method (GET, POST, PATCH, DELETE)
            path: API path (e.g., "/repos/alice/demo")
            body: JSON-serializable request body
            context: Cancellable execution context

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
        future = self._executor.submit(
            self._send, method, path, content, extra_headers, timeout
        )
        while True:
            done, _ = futures.wait([future], timeout=CANCEL_POLL_INTERVAL)
            if done:
                break
            if context.cancelled or context.expired:
                # The worker finishes on its own once httpx gives up; its
                # response is never handed back.
                future.cancel()
                context.check()

        response = future.result()

        log_http_response(
            response.status_code,
            f"{self.base_url}{path}",
            elapsed_ms=(time.monotonic() - start) * 1000,
        )

        # A context cancelled mid-flight never yields a result.
        context.check()
        return response

    def _send(
        self,
        method: str,
        path: str,
        content: bytes | None,
        headers: dict[str, str],
        timeout: float,
    ) -> httpx.Response:
        try:
            with self._client.stream(
                method, path, content=content, headers=headers, timeout=timeout
            ) as response:
                response.read()
        except httpx.TimeoutException as e:
            raise TransportError(f"request timed out: {e}", code="TIMEOUT") from e
        except httpx.RequestError as e:
            raise TransportError(f"failed to send request: {e}") from e
        return response
