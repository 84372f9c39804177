"""Bounded retry with linear backoff."""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field
from typing import Callable, Generic, TypeVar

from pydantic import BaseModel, Field

from webhook_solver.config import BACKOFF_STEP_SECONDS, MAX_ATTEMPTS

logger = logging.getLogger(__name__)

T = TypeVar("T")


class AttemptFailed(Exception):
    """Raised by a retried operation when the attempt should be retried."""


class RetryPolicy(BaseModel):
    max_attempts: int = Field(default=MAX_ATTEMPTS, ge=1, le=10)
    delay: float = Field(default=BACKOFF_STEP_SECONDS, ge=0)

    def backoff(self, attempt: int) -> float:
        """Seconds to wait after the given (1-based) failed attempt."""
        return attempt * self.delay


@dataclass
class RetryResult(Generic[T]):
    value: T | None = None
    succeeded: bool = False
    attempts: int = 0
    delays: list[float] = field(default_factory=list)
    interrupted: bool = False
    last_error: str | None = None


def call_with_retry(
    operation: Callable[[int], T],
    policy: RetryPolicy | None = None,
    sleep: Callable[[float], None] = time.sleep,
    label: str = "Operation",
) -> RetryResult[T]:
    """Call ``operation(attempt)`` until it returns or the policy is exhausted.

    Only ``AttemptFailed`` is retried; any other exception propagates. A
    ``KeyboardInterrupt`` while sleeping between attempts stops retrying and
    marks the result as interrupted.
    """
    policy = policy or RetryPolicy()
    result: RetryResult[T] = RetryResult()

    for attempt in range(1, policy.max_attempts + 1):
        result.attempts = attempt
        try:
            result.value = operation(attempt)
            result.succeeded = True
            return result
        except AttemptFailed as e:
            result.last_error = str(e)
            logger.error(f"{label} failed on attempt {attempt}/{policy.max_attempts}: {e}")

        if attempt < policy.max_attempts:
            delay = policy.backoff(attempt)
            logger.info(f"Backing off for {int(delay * 1000)} ms before retry...")
            result.delays.append(delay)
            try:
                sleep(delay)
            except KeyboardInterrupt:
                logger.warning(f"{label} retry interrupted during backoff")
                result.interrupted = True
                return result

    return result
