"""Retry strategies using Strategy Pattern."""
from abc import ABC, abstractmethod
from enum import Enum
from typing import Iterable

from ..errors import SESSION_EXPIRED_CODE


class RetryState(Enum):
    """Progress of one logical call through the re-login cycle."""
    NOT_ATTEMPTED = 'not_attempted'
    AFTER_LOGIN = 'after_login'
    AFTER_RETRY = 'after_retry'


class RetryStrategy(ABC):
    """Abstract retry strategy."""

    @abstractmethod
    def should_relogin(self, error_code: int, state: RetryState) -> bool:
        """Determines if a failed call should re-authenticate and replay."""
        pass


class ReloginOnceStrategy(RetryStrategy):
    """
    Re-login on session expiry, at most once per logical call.

    Only the primary attempt may trigger a re-login; a replay that fails
    again is surfaced to the caller.
    """

    def __init__(self, relogin_on_codes: Iterable[int] = (SESSION_EXPIRED_CODE,)):
        self.relogin_on_codes = frozenset(relogin_on_codes)

    def should_relogin(self, error_code: int, state: RetryState) -> bool:
        return state is RetryState.NOT_ATTEMPTED and error_code in self.relogin_on_codes
