"""Pydantic models describing outbound CareerBuilder API requests."""

from enum import Enum
from typing import Any

from pydantic import BaseModel, Field

# =============================================================================
# Enums
# =============================================================================


class HttpMethod(str, Enum):
    """HTTP verbs supported by the web service client."""

    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    DELETE = "DELETE"


class BodyEncoding(str, Enum):
    """How a request body is serialized on the wire."""

    JSON = "json"
    FORM = "form"


class ResponseType(str, Enum):
    """Expected encoding of the response body."""

    JSON = "json"
    TEXT = "text"


# =============================================================================
# Request Models
# =============================================================================


class WebRequest(BaseModel):
    """A fully-formed outbound request, built fresh for every call.

    Fields:
        method: HTTP verb
        url: Absolute URL including the query string
        headers: Header mapping sent with the request
        body: Payload, or None when the request has no body at all.
              JSON bodies are kept verbatim; form bodies are the encoded string.
        body_encoding: How the body is serialized (default: JSON)
        response_type: Expected response encoding, None for the transport default
    """

    method: HttpMethod
    url: str
    headers: dict[str, str] = Field(default_factory=dict)
    body: Any | None = None
    body_encoding: BodyEncoding = BodyEncoding.JSON
    response_type: ResponseType | None = None

    @property
    def has_body(self) -> bool:
        return self.body is not None


class RequestOptions(BaseModel):
    """Per-call options consumed by the request builders.

    `params` and `body` default to None, which means "omit entirely". An empty
    mapping is a real value and is not the same as None.
    """

    params: Any | None = None
    body: Any | None = None
    json_body: bool = True
    expect_xml_response: bool = False
    add_output_json_flag: bool = False

    model_config = {"frozen": True}


__all__ = [
    "BodyEncoding",
    "HttpMethod",
    "RequestOptions",
    "ResponseType",
    "WebRequest",
]
