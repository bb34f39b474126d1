from unittest.mock import MagicMock

import pytest
from tenacity import stop_after_attempt

from interview_coach.services.retry_policy import RetryPolicy


def test_defaults():
    tested = RetryPolicy()
    assert tested.max_attempts == 3
    assert tested.base_delay == 1.0


def test_backoff():
    tested = RetryPolicy()
    assert tested.backoff(0) == 1.0
    assert tested.backoff(1) == 2.0
    assert tested.backoff(2) == 4.0

    tested = RetryPolicy(max_attempts=5, base_delay=0.5)
    assert tested.backoff(3) == 4.0


def test_delays():
    assert RetryPolicy().delays() == [1.0, 2.0]
    assert RetryPolicy(max_attempts=1).delays() == []
    assert RetryPolicy(max_attempts=4, base_delay=0.25).delays() == [0.25, 0.5, 1.0]


def test_wait():
    tested = RetryPolicy()
    retry_state = MagicMock()

    retry_state.attempt_number = 1
    assert tested.wait(retry_state) == 1.0
    retry_state.attempt_number = 2
    assert tested.wait(retry_state) == 2.0


def test_stop():
    result = RetryPolicy(max_attempts=3).stop()
    assert isinstance(result, stop_after_attempt)
    assert result.max_attempt_number == 3


def test_invalid_values():
    with pytest.raises(ValueError):
        RetryPolicy(max_attempts=0)
    with pytest.raises(ValueError):
        RetryPolicy(base_delay=-1)
