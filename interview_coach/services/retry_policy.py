from dataclasses import dataclass
from typing import List

from tenacity import RetryCallState, stop_after_attempt


@dataclass(frozen=True)
class RetryPolicy:
    """
    Bounded retry policy for completion calls.

    max_attempts counts the initial call, so 3 means one call plus two retries.
    The delay after the n-th failed attempt (0-based) is 2**n * base_delay seconds.
    """
    max_attempts: int = 3
    base_delay: float = 1.0

    def __post_init__(self):
        if self.max_attempts < 1:
            raise ValueError("max_attempts must be at least 1")
        if self.base_delay < 0:
            raise ValueError("base_delay cannot be negative")

    def backoff(self, attempt: int) -> float:
        return (2 ** attempt) * self.base_delay

    def delays(self) -> List[float]:
        """All delays a fully failing call sequence sleeps through."""
        return [self.backoff(attempt) for attempt in range(self.max_attempts - 1)]

    def stop(self):
        return stop_after_attempt(self.max_attempts)

    def wait(self, retry_state: RetryCallState) -> float:
        # tenacity numbers attempts from 1
        return self.backoff(retry_state.attempt_number - 1)
