"""
synods - Async Python client for Synology Download Station.

Usage:
    >>> from synods import DownloadStation
    >>>
    >>> async with DownloadStation("https://nas:5001", "admin", "secret") as ds:
    ...     tasks = await ds.list_tasks()
    ...     await ds.clear_completed()
"""
import logging
from .client import DownloadStation
from .core.logging import set_level

from .core.api import (
    SESSION_EXPIRED_CODE,
    APIErrorCodes,
    AuthData,
    ConfigurationError,
    ProxyConfig,
    RetryConfig,
    SSLConfig,
    SynoAPIError,
    SynoAuthError,
    SynoConfig,
    SynoDecodeError,
    SynoError,
    SynoTransportError,
    TimeoutConfig,
)

from .core.tasks import (
    Task,
    TaskCompleted,
    TaskCreated,
    TaskInfo,
    TaskList,
    TaskOperation,
    TaskStatus,
)

__version__ = '0.2.0'


def setup_logging(level=logging.INFO):
    """
    Configure logging for synods modules.

    Args:
        level: Logging level (default: logging.INFO)
    """
    set_level(level)


__all__ = [
    'DownloadStation',
    'SynoConfig',
    'ProxyConfig',
    'SSLConfig',
    'TimeoutConfig',
    'RetryConfig',
    'AuthData',
    'Task',
    'TaskStatus',
    'TaskList',
    'TaskInfo',
    'TaskCreated',
    'TaskCompleted',
    'TaskOperation',
    'SESSION_EXPIRED_CODE',
    'APIErrorCodes',
    'ConfigurationError',
    'SynoError',
    'SynoAPIError',
    'SynoAuthError',
    'SynoDecodeError',
    'SynoTransportError',
    'setup_logging',
]
