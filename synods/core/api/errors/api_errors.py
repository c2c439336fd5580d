"""Synology API error codes and exceptions."""
from typing import Any, Dict, Optional


# Session id not found / expired. Triggers a single re-login.
SESSION_EXPIRED_CODE = 119


class APIErrorCodes:
    """Synology Web API error codes."""

    COMMON_CODES: Dict[int, str] = {
        100: 'Unknown error',
        101: 'Invalid parameter',
        102: 'The requested API does not exist',
        103: 'The requested method does not exist',
        104: 'The requested version does not support the functionality',
        105: 'The logged in session does not have permission',
        106: 'Session timeout',
        107: 'Session interrupted by duplicate login',
        119: 'Invalid or expired session, please relogin',
    }

    AUTH_CODES: Dict[int, str] = {
        400: 'No such account or incorrect password',
        401: 'Account disabled',
        402: 'Permission denied',
        403: '2-step verification code required',
        404: 'Failed to authenticate 2-step verification code',
    }

    TASK_CODES: Dict[int, str] = {
        400: 'File upload failed',
        401: 'Max number of tasks reached',
        402: 'Destination denied',
        403: 'Destination does not exist',
        404: 'Invalid task id',
        405: 'Invalid task action',
        406: 'No default destination',
        407: 'Set destination failed',
        408: 'File does not exist',
    }

    @classmethod
    def get_message(cls, code: int, api: Optional[str] = None) -> str:
        """
        Gets error message for error code.

        Codes above 399 are namespace specific, so the API name decides
        which catalogue is consulted.
        """
        if code in cls.COMMON_CODES:
            return cls.COMMON_CODES[code]
        if api == 'SYNO.API.Auth':
            table = cls.AUTH_CODES
        else:
            table = cls.TASK_CODES
        return table.get(code, f"Unknown error: {code}")


class SynoError(Exception):
    """Base exception for all Download Station client errors."""

    def __init__(self, message: str, error_code: Optional[int] = None) -> None:
        """
        Initialize the exception.

        Args:
            message: Error message
            error_code: Numeric error code (if available)
        """
        self.error_code = error_code
        super().__init__(message)


class ConfigurationError(SynoError):
    """Raised for invalid client configuration."""


class SynoTransportError(SynoError):
    """Raised when the HTTP round trip itself fails."""

    def __init__(self, message: str, status: Optional[int] = None) -> None:
        self.status = status
        super().__init__(message, status)


class SynoDecodeError(SynoError):
    """Raised when a response does not match the expected envelope or payload."""

    def __init__(self, message: str, body: Any = None) -> None:
        self.body = body
        super().__init__(message)


class SynoAPIError(SynoError):
    """Exception raised for structured Synology API failures."""

    def __init__(self, code: int, errors: Any = None, api: Optional[str] = None):
        self.code = code
        self.errors = errors
        self.api = api
        self.message = APIErrorCodes.get_message(code, api)
        super().__init__(f"Synology API error {code}: {self.message}", code)

    @property
    def is_session_expired(self) -> bool:
        """Whether the server rejected the session token."""
        return self.code == SESSION_EXPIRED_CODE


class SynoAuthError(SynoError):
    """
    Exception raised when login fails.

    The underlying failure is chained as ``__cause__``. When the server
    rejected the credentials, ``error_code`` holds its code.
    """
