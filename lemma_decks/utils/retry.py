"""Capped exponential backoff retry policy."""

import logging
import time
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import TypeVar

from tenacity import (
    RetryCallState,
    Retrying,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass(frozen=True)
class RetryPolicy:
    """Retry a callable with exponentially growing delays.

    The wait after failed attempt ``n`` is
    ``min(base_delay * 2 ** (n - 1), max_delay)``, so the first retry waits
    ``base_delay``. No delay precedes the first attempt.

    Example:
        policy = RetryPolicy(max_attempts=5, base_delay=0.5)
        response = policy.call(lambda: requests.get(url, timeout=10))
    """

    max_attempts: int = 15
    base_delay: float = 0.5
    max_delay: float = 30.0
    retry_on: tuple[type[BaseException], ...] = (Exception,)
    sleep: Callable[[float], None] = field(default=time.sleep, compare=False, repr=False)

    def __post_init__(self):
        if self.max_attempts < 1:
            raise ValueError("max_attempts must be at least 1")

    def retrying(self, description: str = "") -> Retrying:
        """Build a tenacity controller for one call."""

        def log_failure(retry_state: RetryCallState) -> None:
            error = retry_state.outcome.exception() if retry_state.outcome else None
            logger.debug(
                f"Attempt {retry_state.attempt_number}/{self.max_attempts} "
                f"failed for {description or 'call'}: {error}"
            )

        return Retrying(
            stop=stop_after_attempt(self.max_attempts),
            wait=wait_exponential(multiplier=self.base_delay, max=self.max_delay),
            retry=retry_if_exception_type(self.retry_on),
            before_sleep=log_failure,
            sleep=self.sleep,
            reraise=True,
        )

    def call(self, func: Callable[[], T], description: str = "") -> T:
        """Call ``func`` until it succeeds or attempts run out.

        Args:
            func: Zero-argument callable to invoke
            description: Label used in retry log messages

        Returns:
            The first successful return value of ``func``

        Raises:
            The last exception raised by ``func`` when every attempt fails.
        """
        return self.retrying(description)(func)
