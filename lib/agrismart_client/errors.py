from __future__ import annotations


class AgriSmartClientError(Exception):
    """Base client error."""


class ApiError(AgriSmartClientError):
    """An operation failed; ``status_code`` is None when no response arrived."""

    def __init__(
            self,
            status_code: int | None,
            message: str,
            details: str | None = None,
            server_message: str | None = None,
    ):
        super().__init__(message)
        self.status_code = status_code
        self.message = message
        self.details = details
        self.server_message = server_message

    def with_message(self, message: str) -> ApiError:
        return type(self)(self.status_code, message, self.details, self.server_message)


class NetworkError(ApiError):
    """Transport/network layer error."""


class AuthError(ApiError):
    """Auth-related API error."""


class StorageError(AgriSmartClientError):
    """Token storage could not be read or written."""
