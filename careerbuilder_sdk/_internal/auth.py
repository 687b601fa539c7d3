"""Token provider contract used by the web service client."""

from typing import Protocol, runtime_checkable

from careerbuilder_sdk.exceptions import CareerBuilderTokenError


@runtime_checkable
class TokenProvider(Protocol):
    """Source of the OAuth bearer token.

    The client awaits `ensure_token_loaded()` before every request and then
    reads `current_token`. Acquiring and refreshing the token is entirely the
    provider's job; the client never caches it.
    """

    @property
    def current_token(self) -> str | None:
        """The currently valid access token."""
        ...

    async def ensure_token_loaded(self) -> None:
        """Make sure `current_token` holds a valid token."""
        ...


class StaticTokenProvider:
    """Token provider for a token obtained out of band (scripts, tests)."""

    def __init__(self, token: str | None) -> None:
        self._token = token

    @property
    def current_token(self) -> str | None:
        return self._token

    async def ensure_token_loaded(self) -> None:
        if not self._token:
            raise CareerBuilderTokenError("No access token configured")
