"""Authentication session and HTTP session creation."""
from .session_factory import SessionFactory
from .session_manager import AUTH_API, AUTH_VERSION, AuthData, SessionManager

__all__ = [
    'AUTH_API',
    'AUTH_VERSION',
    'AuthData',
    'SessionFactory',
    'SessionManager',
]
