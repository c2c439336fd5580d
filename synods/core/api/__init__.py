"""Synology Web API session, request and retry layer."""
from .config import API_PATH, ProxyConfig, RetryConfig, SSLConfig, SynoConfig, TimeoutConfig
from .errors import (
    SESSION_EXPIRED_CODE,
    APIErrorCodes,
    ConfigurationError,
    SynoAPIError,
    SynoAuthError,
    SynoDecodeError,
    SynoError,
    SynoTransportError,
)
from .request import ApiRequest, FilePart, RequestBuilder, RequestHandler, ResponseHandler
from .retry import ReloginOnceStrategy, RetryState, RetryStrategy
from .session import AuthData, SessionManager
from .transport import AiohttpTransport, Transport

__all__ = [
    # Configuration
    'API_PATH',
    'SynoConfig',
    'ProxyConfig',
    'SSLConfig',
    'TimeoutConfig',
    'RetryConfig',

    # Transport and requests
    'Transport',
    'AiohttpTransport',
    'ApiRequest',
    'FilePart',
    'RequestBuilder',
    'RequestHandler',
    'ResponseHandler',

    # Session
    'AuthData',
    'SessionManager',
    'RetryState',
    'RetryStrategy',
    'ReloginOnceStrategy',

    # Errors
    'SESSION_EXPIRED_CODE',
    'APIErrorCodes',
    'ConfigurationError',
    'SynoError',
    'SynoAPIError',
    'SynoAuthError',
    'SynoDecodeError',
    'SynoTransportError',
]
