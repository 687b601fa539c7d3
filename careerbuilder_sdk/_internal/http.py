"""Shared HTTP client configuration and the default httpx transport."""

import asyncio
import contextlib
from typing import Any, Protocol, runtime_checkable

import httpx

from careerbuilder_sdk._version import __version__
from careerbuilder_sdk.exceptions import (
    CareerBuilderCancelledError,
    CareerBuilderTransportError,
)
from careerbuilder_sdk.models import BodyEncoding, ResponseType, WebRequest

DEFAULT_TIMEOUT = 30.0
FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"
JSON_CONTENT_TYPE = "application/json"


def create_http_client(
    *,
    timeout: float = DEFAULT_TIMEOUT,
) -> httpx.AsyncClient:
    """Create configured async HTTP client.

    Args:
        timeout: Request timeout in seconds.

    Returns:
        Configured httpx.AsyncClient instance.
    """
    return httpx.AsyncClient(
        timeout=timeout,
        headers={"User-Agent": f"careerbuilder-sdk/{__version__}"},
    )


@runtime_checkable
class Transport(Protocol):
    """Executes a built WebRequest and returns the raw response."""

    async def send(
        self, request: WebRequest, cancel: asyncio.Event | None = None
    ) -> httpx.Response:
        ...

    async def aclose(self) -> None:
        ...


class HttpxTransport:
    """Transport backed by an httpx.AsyncClient.

    Responses are returned untouched whatever their status code. Only hard
    failures (connection errors, timeouts, cancellation) raise.

    If no client is given, one is created with `create_http_client()` and
    closed by `aclose()`. A caller-supplied client is left open.
    """

    def __init__(
        self,
        client: httpx.AsyncClient | None = None,
        *,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        self._owns_client = client is None
        self._client = client if client is not None else create_http_client(timeout=timeout)

    async def send(
        self, request: WebRequest, cancel: asyncio.Event | None = None
    ) -> httpx.Response:
        """Send the request, aborting it if `cancel` is set before it completes.

        Raises:
            CareerBuilderCancelledError: The cancellation event fired first.
            CareerBuilderTransportError: The request failed at the network level.
        """
        if cancel is None:
            return await self._send(request)
        if cancel.is_set():
            raise CareerBuilderCancelledError(
                "Request cancelled before dispatch", request_url=request.url
            )

        send_task = asyncio.ensure_future(self._send(request))
        cancel_task = asyncio.ensure_future(cancel.wait())
        try:
            done, _ = await asyncio.wait(
                {send_task, cancel_task}, return_when=asyncio.FIRST_COMPLETED
            )
        except asyncio.CancelledError:
            send_task.cancel()
            cancel_task.cancel()
            raise

        if send_task in done:
            cancel_task.cancel()
            return send_task.result()

        send_task.cancel()
        with contextlib.suppress(asyncio.CancelledError):
            await send_task
        raise CareerBuilderCancelledError("Request cancelled", request_url=request.url)

    async def _send(self, request: WebRequest) -> httpx.Response:
        headers = dict(request.headers)
        kwargs: dict[str, Any] = {}
        if request.has_body:
            if request.body_encoding is BodyEncoding.FORM:
                _set_content_type(headers, FORM_CONTENT_TYPE)
                kwargs["content"] = request.body
            elif isinstance(request.body, (str, bytes)):
                # Pre-serialized JSON goes on the wire as-is
                _set_content_type(headers, JSON_CONTENT_TYPE)
                kwargs["content"] = request.body
            else:
                kwargs["json"] = request.body

        try:
            return await self._client.request(
                request.method.value,
                request.url,
                headers=headers,
                **kwargs,
            )
        except httpx.TimeoutException as e:
            raise CareerBuilderTransportError(
                f"Request timed out: {e}", request_url=request.url
            ) from e
        except httpx.HTTPError as e:
            raise CareerBuilderTransportError(
                f"Request failed: {e}", request_url=request.url
            ) from e

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()


def _set_content_type(headers: dict[str, str], content_type: str) -> None:
    """Set Content-Type unless the caller already supplied one."""
    if not any(key.lower() == "content-type" for key in headers):
        headers["Content-Type"] = content_type


def decode_response(response: httpx.Response, response_type: ResponseType | None) -> Any:
    """Decode a response body according to the request's expected encoding.

    JSON is parsed, TEXT is returned as a string. With no expectation the
    body is parsed as JSON when possible and returned as text otherwise.
    """
    if response_type is ResponseType.TEXT:
        return response.text
    if response_type is ResponseType.JSON:
        return response.json()
    try:
        return response.json()
    except ValueError:
        return response.text
