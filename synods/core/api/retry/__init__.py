"""Retry strategies using Strategy Pattern."""
from .retry_strategy import RetryStrategy, RetryState, ReloginOnceStrategy

__all__ = [
    'RetryStrategy',
    'RetryState',
    'ReloginOnceStrategy',
]
