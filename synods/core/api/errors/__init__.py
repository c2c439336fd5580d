"""Synology API errors and exceptions."""
from .api_errors import (
    SESSION_EXPIRED_CODE,
    APIErrorCodes,
    ConfigurationError,
    SynoAPIError,
    SynoAuthError,
    SynoDecodeError,
    SynoError,
    SynoTransportError,
)

__all__ = [
    'SESSION_EXPIRED_CODE',
    'APIErrorCodes',
    'ConfigurationError',
    'SynoAPIError',
    'SynoAuthError',
    'SynoDecodeError',
    'SynoError',
    'SynoTransportError',
]
