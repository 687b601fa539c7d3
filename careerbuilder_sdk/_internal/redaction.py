"""Redaction of credentials in request details written to debug output."""

from urllib.parse import parse_qsl, urlencode, urlsplit, urlunsplit

REDACT_HEADERS: frozenset[str] = frozenset({
    "authorization",
    "proxy-authorization",
    "cookie",
    "x-api-key",
})

REDACT_PARAMS: frozenset[str] = frozenset({
    "developerkey",
    "access_token",
    "token",
    "api_key",
})

REDACTED_VALUE = "[REDACTED]"


def redact_headers(headers: dict[str, str]) -> dict[str, str]:
    """Return a copy of headers with sensitive values replaced.

    Header names are matched case-insensitively. The input is never mutated.
    """
    return {
        key: REDACTED_VALUE if key.lower() in REDACT_HEADERS else value
        for key, value in headers.items()
    }


def redact_url(url: str) -> str:
    """Return url with the values of sensitive query parameters replaced."""
    parts = urlsplit(url)
    if not parts.query:
        return url
    pairs = [
        (key, REDACTED_VALUE if key.lower() in REDACT_PARAMS else value)
        for key, value in parse_qsl(parts.query, keep_blank_values=True)
    ]
    return urlunsplit(parts._replace(query=urlencode(pairs, safe="[]")))
