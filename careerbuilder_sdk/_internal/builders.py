"""Verb-specific request builders.

Each builder turns a target URL and a RequestOptions into a WebRequest.
Passing developer_key=None builds the external variant, which leaves the
URL's query string alone apart from caller params.
"""

from collections.abc import Callable

from careerbuilder_sdk._internal.encoding import encode_form, to_plain
from careerbuilder_sdk.models import (
    BodyEncoding,
    HttpMethod,
    RequestOptions,
    ResponseType,
    WebRequest,
)

DEVELOPER_KEY_PARAM = "DeveloperKey"
OUTPUT_JSON_PARAM = "Outputjson=true"

Builder = Callable[[str, RequestOptions, str | None], WebRequest]


def _with_query(url: str, developer_key: str | None, *segments: str) -> str:
    """Append the developer key and any non-empty segments to url.

    First-party URLs always open their query with the developer key. External
    URLs may already carry a query string, in which case segments join it.
    """
    if developer_key is not None:
        segments = (f"{DEVELOPER_KEY_PARAM}={developer_key}", *segments)
        separator = "?"
    else:
        separator = "&" if "?" in url else "?"
    query = "&".join(segment for segment in segments if segment)
    if not query:
        return url
    return f"{url}{separator}{query}"


def _apply_body(request: WebRequest, options: RequestOptions) -> WebRequest:
    if options.body is None:
        return request
    if options.json_body:
        request.body = to_plain(options.body)
        request.body_encoding = BodyEncoding.JSON
    else:
        request.body = encode_form(options.body)
        request.body_encoding = BodyEncoding.FORM
    return request


def _query_url(url: str, options: RequestOptions, developer_key: str | None) -> str:
    params = "" if options.params is None else encode_form(options.params)
    return _with_query(url, developer_key, params)


def build_get(url: str, options: RequestOptions, developer_key: str | None) -> WebRequest:
    return WebRequest(method=HttpMethod.GET, url=_query_url(url, options, developer_key))


def build_delete(url: str, options: RequestOptions, developer_key: str | None) -> WebRequest:
    return WebRequest(method=HttpMethod.DELETE, url=_query_url(url, options, developer_key))


def build_put(url: str, options: RequestOptions, developer_key: str | None) -> WebRequest:
    # PUT never carries params in the URL
    request = WebRequest(
        method=HttpMethod.PUT,
        url=_with_query(url, developer_key),
        response_type=ResponseType.JSON,
    )
    return _apply_body(request, options)


def build_post(url: str, options: RequestOptions, developer_key: str | None) -> WebRequest:
    # Outputjson is a first-party flag; external URLs never get it
    output_json = ""
    if options.add_output_json_flag and developer_key is not None:
        output_json = OUTPUT_JSON_PARAM
    request = WebRequest(
        method=HttpMethod.POST,
        url=_with_query(url, developer_key, output_json),
        response_type=ResponseType.TEXT if options.expect_xml_response else ResponseType.JSON,
    )
    return _apply_body(request, options)


BUILDERS: dict[HttpMethod, Builder] = {
    HttpMethod.GET: build_get,
    HttpMethod.DELETE: build_delete,
    HttpMethod.PUT: build_put,
    HttpMethod.POST: build_post,
}


def build(
    method: HttpMethod,
    url: str,
    options: RequestOptions,
    developer_key: str | None,
) -> WebRequest:
    """Build a request using the builder registered for method."""
    return BUILDERS[HttpMethod(method)](url, options, developer_key)
