"""Exception hierarchy for the ClickUp client.

Every error raised by the library derives from ClickUpError. Service methods
prepend a short operation tag ("get task", "merge tasks", ...) to transport
failures via ``add_context`` and re-raise the same object, so the message
reads like a chain while ``isinstance`` still sees the underlying kind.
"""

from __future__ import annotations


class ClickUpError(Exception):
    """Base class for all ClickUp client errors."""

    def __init__(self, message: str = "") -> None:
        self.message = message
        super().__init__(message)

    def add_context(self, op: str) -> "ClickUpError":
        """Prefix the message with an operation tag and return self."""
        self.message = f"{op}: {self.message}" if self.message else op
        self.args = (self.message,)
        return self

    def __str__(self) -> str:
        return self.message


# ---------------------------------------------------------------------------
# Local validation (raised before any network I/O)
# ---------------------------------------------------------------------------

class ClickUpValidationError(ClickUpError, ValueError):
    """A required argument was missing or empty."""

    default_message = "invalid argument"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.default_message)


class IDRequiredError(ClickUpValidationError):
    default_message = "id is required"


class NameRequiredError(ClickUpValidationError):
    default_message = "name is required"


class TextRequiredError(ClickUpValidationError):
    default_message = "comment text is required"


class SourceTasksRequiredError(ClickUpValidationError):
    default_message = "at least one source task ID is required"


class TaskIDsRequiredError(ClickUpValidationError):
    default_message = "at least one task ID is required"


class EmailRequiredError(ClickUpValidationError):
    default_message = "email is required"


class OAuthFieldsRequiredError(ClickUpValidationError):
    default_message = "client_id, client_secret, and code are required"


class EndpointRequiredError(ClickUpValidationError):
    default_message = "endpoint URL is required"


class EventsRequiredError(ClickUpValidationError):
    default_message = "at least one event is required"


class KeyResultTypeRequiredError(ClickUpValidationError):
    default_message = "key result type is required"


class AttachmentFileError(ClickUpValidationError):
    default_message = "attachment file could not be read"


class WorkspaceIDRequiredError(ClickUpError):
    """A v3 endpoint was called without a configured workspace ID."""

    def __init__(self, message: str | None = None) -> None:
        super().__init__(
            message
            or "workspace ID required for v3 API; set CLICKUP_WORKSPACE_ID or use --workspace"
        )


# ---------------------------------------------------------------------------
# Secret store
# ---------------------------------------------------------------------------

class SecretStoreError(ClickUpError):
    """Reading or writing the credential store failed."""


class InvalidBackendError(SecretStoreError):
    """The requested keyring backend is not one of auto, keychain, file."""


class NoTTYError(SecretStoreError):
    """The file backend needs a password but no terminal is available."""


class KeyringTimeoutError(SecretStoreError):
    """Opening the system keyring did not finish in time."""


class SecretNotFoundError(SecretStoreError):
    """The requested secret does not exist in the store."""


class MissingAPIKeyError(SecretStoreError):
    """An empty API key was passed to the store."""

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or "missing API key")


# ---------------------------------------------------------------------------
# Transport
# ---------------------------------------------------------------------------

class TransportError(ClickUpError):
    """The request could not be sent or its payload could not be handled."""


class HTTPRequestError(TransportError):
    """Network-level failure talking to the API."""


class RequestCancelledError(TransportError):
    """The caller's deadline expired while the request was in flight."""


class EncodeError(TransportError):
    """The request body could not be serialized to JSON."""


class DecodeError(TransportError):
    """The response body could not be decoded into the expected shape."""


class ClickUpAPIError(ClickUpError):
    """Raised when the ClickUp API returns a non-2xx status.

    ``code`` and ``error_message`` come from the ``{"err": ..., "ECODE": ...}``
    envelope when the API supplies one; either may be empty.
    """

    def __init__(
        self,
        status_code: int,
        code: str = "",
        error_message: str = "",
        body: str = "",
    ) -> None:
        self.status_code = status_code
        self.code = code
        self.error_message = error_message
        self.body = body
        detail = error_message or body.strip() or f"HTTP {status_code}"
        if code:
            detail = f"{detail} ({code})"
        super().__init__(f"ClickUp API error {status_code}: {detail}")


class UnauthorizedError(ClickUpAPIError):
    """401 from the API."""


class ForbiddenError(ClickUpAPIError):
    """403 from the API."""


class NotFoundError(ClickUpAPIError):
    """404 from the API."""


class RateLimitedError(ClickUpAPIError):
    """429 from the API."""


class ServerError(ClickUpAPIError):
    """5xx from the API."""


class RequestError(ClickUpAPIError):
    """Any other non-2xx status."""


def api_error_class(status_code: int) -> type[ClickUpAPIError]:
    """Map an HTTP status to its error kind."""
    if status_code == 401:
        return UnauthorizedError
    if status_code == 403:
        return ForbiddenError
    if status_code == 404:
        return NotFoundError
    if status_code == 429:
        return RateLimitedError
    if 500 <= status_code <= 599:
        return ServerError
    return RequestError


# ---------------------------------------------------------------------------
# Local configuration
# ---------------------------------------------------------------------------

class ConfigError(ClickUpError):
    """The config file could not be read, parsed or written."""
