"""Public exceptions for the CareerBuilder SDK."""


class CareerBuilderError(Exception):
    """Base exception for all CareerBuilder SDK errors."""


class CareerBuilderConfigError(CareerBuilderError):
    """Configuration error (missing env vars, invalid config)."""


class CareerBuilderTokenError(CareerBuilderError):
    """The token provider could not produce a valid OAuth token."""


class CareerBuilderTransportError(CareerBuilderError):
    """Hard transport failure (connection refused, DNS, timeout).

    HTTP error statuses are not transport errors; those responses are
    returned to the caller as-is.
    """

    def __init__(self, message: str, request_url: str | None = None) -> None:
        super().__init__(message)
        self.request_url = request_url


class CareerBuilderCancelledError(CareerBuilderTransportError):
    """The caller's cancellation signal fired while a request was in flight."""
