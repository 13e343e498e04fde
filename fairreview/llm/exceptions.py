class ModelInvocationError(Exception):
    """Base exception for failed calls to the completion endpoint."""


class ModelTransportError(ModelInvocationError):
    """Raised when the request did not complete at the transport level."""


class ModelTimeoutError(ModelTransportError):
    """Raised when the provider did not answer within the timeout."""


class ModelNetworkError(ModelTransportError):
    """Raised on connection resets, DNS failures and similar network errors."""


class ModelAuthError(ModelInvocationError):
    """Raised when the provider rejects the API key (HTTP 401)."""


class ModelRateLimitError(ModelInvocationError):
    """Raised when the provider throttles the request (HTTP 429)."""


class MalformedResponseError(ModelInvocationError):
    """Raised when a 2xx reply is not a usable chat completion."""


class UpstreamError(ModelInvocationError):
    """Raised for any other non-2xx reply from the provider."""

    def __init__(self, status_code: int, body: str) -> None:
        super().__init__(f"Provider returned HTTP {status_code}: {body}")
        self.status_code = status_code
        self.body = body
