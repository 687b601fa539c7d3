"""Async client for the CareerBuilder REST API.

Example usage:
    from careerbuilder_sdk import StaticTokenProvider, WebServiceClient

    async with WebServiceClient(
        developer_key="your-developer-key",
        token_provider=StaticTokenProvider("access-token"),
    ) as client:
        response = await client.get("/jobs", {"q": "engineer", "page": 2})
"""

import asyncio
import os
from typing import Any

import httpx

from careerbuilder_sdk._internal import builders
from careerbuilder_sdk._internal.auth import StaticTokenProvider, TokenProvider
from careerbuilder_sdk._internal.http import DEFAULT_TIMEOUT, HttpxTransport, Transport
from careerbuilder_sdk._internal.redaction import redact_headers, redact_url
from careerbuilder_sdk.exceptions import CareerBuilderConfigError, CareerBuilderTokenError
from careerbuilder_sdk.models import HttpMethod, RequestOptions, WebRequest

DEFAULT_API_URL = "https://api.careerbuilder.com"
DEFAULT_HOST_SITE = "US"
DEFAULT_TIMEOUT_MS = int(DEFAULT_TIMEOUT * 1000)


class WebServiceClient:
    """Request builder and dispatcher for the CareerBuilder API.

    Every first-party request carries the developer key as a query parameter,
    a bearer token and the HostSite header. Entries in `extra_headers` are
    added to every request and override those defaults on collision.

    Responses are returned exactly as the transport produced them. Status
    codes are not inspected and nothing is retried.

    Use `WebServiceClient.from_env()` to configure the client from
    environment variables.
    """

    def __init__(
        self,
        *,
        developer_key: str,
        token_provider: TokenProvider,
        transport: Transport | None = None,
        api_url: str = DEFAULT_API_URL,
        host_site: str = DEFAULT_HOST_SITE,
        timeout_ms: int = DEFAULT_TIMEOUT_MS,
        debug: bool = False,
    ) -> None:
        """Initialize the client.

        Args:
            developer_key: API developer key, sent on every first-party request.
            token_provider: Supplies the OAuth bearer token.
            transport: Executes requests. Defaults to an httpx-backed transport.
            api_url: Base URL prefixed to first-party paths.
            host_site: Value of the HostSite header.
            timeout_ms: Timeout for the default transport in milliseconds.
            debug: Enable debug logging to stderr.

        Raises:
            CareerBuilderConfigError: If developer_key is empty.
        """
        if not developer_key:
            raise CareerBuilderConfigError("A developer key is required")

        self.api_url = api_url
        self.extra_headers: dict[str, str] = {}
        self._developer_key = developer_key
        self._token_provider = token_provider
        self._host_site = host_site
        self._timeout_ms = timeout_ms
        self._debug = debug
        self._transport = transport or HttpxTransport(timeout=timeout_ms / 1000)

    @classmethod
    def from_env(
        cls,
        *,
        token_provider: TokenProvider | None = None,
        transport: Transport | None = None,
    ) -> "WebServiceClient":
        """Create a client from environment variables.

        Required environment variables:
            CAREERBUILDER_DEVELOPER_KEY: The API developer key.

        Optional environment variables:
            CAREERBUILDER_ACCESS_TOKEN: Static access token, used when no
                token_provider is passed.
            CAREERBUILDER_API_URL: Override the API base URL.
            CAREERBUILDER_HOST_SITE: Value of the HostSite header.
            CAREERBUILDER_TIMEOUT_MS: Request timeout in milliseconds.
            CAREERBUILDER_DEBUG: Set to "1" to enable debug logging.

        Raises:
            CareerBuilderConfigError: If the developer key or a token source
                is missing.
            ValueError: If CAREERBUILDER_TIMEOUT_MS is not an integer.
        """
        developer_key = os.environ.get("CAREERBUILDER_DEVELOPER_KEY")
        if not developer_key:
            raise CareerBuilderConfigError("CAREERBUILDER_DEVELOPER_KEY is not set")

        if token_provider is None:
            access_token = os.environ.get("CAREERBUILDER_ACCESS_TOKEN")
            if not access_token:
                raise CareerBuilderConfigError(
                    "Pass a token_provider or set CAREERBUILDER_ACCESS_TOKEN"
                )
            token_provider = StaticTokenProvider(access_token)

        debug = os.environ.get("CAREERBUILDER_DEBUG", "") == "1"
        timeout_ms = int(os.environ.get("CAREERBUILDER_TIMEOUT_MS", str(DEFAULT_TIMEOUT_MS)))

        return cls(
            developer_key=developer_key,
            token_provider=token_provider,
            transport=transport,
            api_url=os.environ.get("CAREERBUILDER_API_URL") or DEFAULT_API_URL,
            host_site=os.environ.get("CAREERBUILDER_HOST_SITE") or DEFAULT_HOST_SITE,
            timeout_ms=timeout_ms,
            debug=debug,
        )

    async def __aenter__(self) -> "WebServiceClient":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        """Close the underlying transport."""
        await self._transport.aclose()

    def _log_debug(self, message: str) -> None:
        """Log a debug message to stderr if debug mode is enabled."""
        if self._debug:
            import sys

            print(f"[careerbuilder-sdk] {message}", file=sys.stderr)

    # =========================================================================
    # Request Building
    # =========================================================================

    def _default_headers(self) -> dict[str, str]:
        token = self._token_provider.current_token
        if not token:
            raise CareerBuilderTokenError("Token provider has no current token")
        return {
            "Authorization": f"Bearer {token}",
            "HostSite": self._host_site,
        }

    def build_request(
        self, path: str, method: HttpMethod, options: RequestOptions
    ) -> WebRequest:
        """Build a first-party request without sending it.

        The URL is the API base URL plus path with the developer key
        appended. Headers are the bearer token and HostSite, overlaid with a
        snapshot of `extra_headers`.

        Raises:
            CareerBuilderTokenError: If the token provider has no current token.
        """
        request = builders.build(method, f"{self.api_url}{path}", options, self._developer_key)
        request.headers = {**self._default_headers(), **self.extra_headers}
        return request

    def build_external_request(
        self, url: str, method: HttpMethod, options: RequestOptions
    ) -> WebRequest:
        """Build a request to a third-party URL without sending it.

        The URL is used verbatim, no developer key is added and only
        `extra_headers` are sent.
        """
        request = builders.build(method, url, options, None)
        request.headers = dict(self.extra_headers)
        return request

    # =========================================================================
    # Dispatch
    # =========================================================================

    async def _dispatch(
        self, request: WebRequest, cancel: asyncio.Event | None
    ) -> httpx.Response:
        self._log_debug(
            f"{request.method.value} {redact_url(request.url)} "
            f"headers={redact_headers(request.headers)}"
        )
        response = await self._transport.send(request, cancel)
        self._log_debug(f"{request.method.value} {redact_url(request.url)} -> {response.status_code}")
        return response

    async def _call(
        self,
        path: str,
        method: HttpMethod,
        options: RequestOptions,
        cancel: asyncio.Event | None = None,
    ) -> httpx.Response:
        await self._token_provider.ensure_token_loaded()
        request = self.build_request(path, method, options)
        return await self._dispatch(request, cancel)

    async def get(
        self,
        path: str,
        params: Any | None = None,
        *,
        cancel: asyncio.Event | None = None,
    ) -> httpx.Response:
        """Send a GET request.

        Args:
            path: API path, appended to the base URL.
            params: Optional mapping form-encoded after the developer key.
            cancel: Optional event that aborts the request when set.

        Returns:
            The raw httpx.Response.
        """
        return await self._call(path, HttpMethod.GET, RequestOptions(params=params), cancel)

    async def delete(
        self,
        path: str,
        params: Any | None = None,
        *,
        cancel: asyncio.Event | None = None,
    ) -> httpx.Response:
        """Send a DELETE request. Params are handled exactly as for GET."""
        return await self._call(path, HttpMethod.DELETE, RequestOptions(params=params), cancel)

    async def put(
        self,
        path: str,
        body: Any | None = None,
        *,
        json_body: bool = True,
    ) -> httpx.Response:
        """Send a PUT request.

        Args:
            path: API path, appended to the base URL.
            body: Optional payload. Omitted entirely when None.
            json_body: Send the body as JSON, or form-encoded when False.

        Returns:
            The raw httpx.Response. A JSON response is expected.
        """
        options = RequestOptions(body=body, json_body=json_body)
        return await self._call(path, HttpMethod.PUT, options)

    async def post(
        self,
        path: str,
        body: Any | None = None,
        *,
        json_body: bool = True,
        expect_xml_response: bool = False,
        add_output_json_flag: bool = False,
    ) -> httpx.Response:
        """Send a POST request.

        Args:
            path: API path, appended to the base URL.
            body: Optional payload. Omitted entirely when None.
            json_body: Send the body as JSON, or form-encoded when False.
            expect_xml_response: Expect a raw text (XML) response instead of JSON.
            add_output_json_flag: Append Outputjson=true to the query string.

        Returns:
            The raw httpx.Response.
        """
        options = RequestOptions(
            body=body,
            json_body=json_body,
            expect_xml_response=expect_xml_response,
            add_output_json_flag=add_output_json_flag,
        )
        return await self._call(path, HttpMethod.POST, options)

    async def call_external(
        self,
        url: str,
        method: HttpMethod,
        body: Any | None = None,
        *,
        json_body: bool = True,
        cancel: asyncio.Event | None = None,
    ) -> httpx.Response:
        """Send a request to a URL outside the CareerBuilder API.

        No credentials are attached. For GET and DELETE, body is treated as
        query params; for PUT and POST it is the request body.

        The token provider is still awaited first so external calls are
        ordered the same way as first-party ones.
        """
        method = HttpMethod(method)
        if method in (HttpMethod.GET, HttpMethod.DELETE):
            options = RequestOptions(params=body)
        else:
            options = RequestOptions(body=body, json_body=json_body)

        await self._token_provider.ensure_token_loaded()
        request = self.build_external_request(url, method, options)
        return await self._dispatch(request, cancel)
