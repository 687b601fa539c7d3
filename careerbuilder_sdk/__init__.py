"""CareerBuilder SDK for Python.

Async client for the CareerBuilder REST API.

Public API:
    WebServiceClient - Request builder and dispatcher
    StaticTokenProvider - Token provider for an out-of-band access token

Internal (not for direct use):
    _internal.builders - Verb-specific request builders
    _internal.http - httpx transport
"""

from careerbuilder_sdk._internal.auth import StaticTokenProvider, TokenProvider
from careerbuilder_sdk._internal.http import HttpxTransport, Transport, decode_response
from careerbuilder_sdk._version import __version__
from careerbuilder_sdk.client import WebServiceClient
from careerbuilder_sdk.models import (
    BodyEncoding,
    HttpMethod,
    RequestOptions,
    ResponseType,
    WebRequest,
)

__all__ = [
    "__version__",
    "BodyEncoding",
    "HttpMethod",
    "HttpxTransport",
    "RequestOptions",
    "ResponseType",
    "StaticTokenProvider",
    "TokenProvider",
    "Transport",
    "WebRequest",
    "WebServiceClient",
    "decode_response",
]
