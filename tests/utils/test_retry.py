"""Tests for retry_on_transient_error."""

import pytest

from utils import retry
from utils.retry import retry_on_transient_error


@pytest.fixture(autouse=True)
def no_sleep(monkeypatch):
    monkeypatch.setattr(retry.time, "sleep", lambda delay: None)


class TestRetry:
    """Tests for the retry decorator."""
    
    def test_retries_until_success(self):
        attempts = []
        
        @retry_on_transient_error(is_retryable=lambda e: True, max_retries=3)
        def flaky():
            attempts.append(1)
            if len(attempts) < 3:
                raise ConnectionError("reset")
            return "ok"
        
        assert flaky() == "ok"
        assert len(attempts) == 3
    
    def test_gives_up_after_max_retries(self):
        attempts = []
        
        @retry_on_transient_error(is_retryable=lambda e: True, max_retries=2)
        def always_fails():
            attempts.append(1)
            raise TimeoutError("slow")
        
        with pytest.raises(TimeoutError):
            always_fails()
        assert len(attempts) == 3
    
    def test_non_retryable_raises_immediately(self):
        attempts = []
        
        @retry_on_transient_error(is_retryable=lambda e: False)
        def broken():
            attempts.append(1)
            raise ValueError("bad input")
        
        with pytest.raises(ValueError):
            broken()
        assert len(attempts) == 1
    
    def test_on_retry_callback(self):
        seen = []
        
        @retry_on_transient_error(
            is_retryable=lambda e: True,
            max_retries=1,
            base_delay=2.0,
            on_retry=lambda exc, attempt, delay: seen.append((attempt, delay)),
        )
        def fails_once():
            if not seen:
                raise ConnectionError("reset")
            return "done"
        
        assert fails_once() == "done"
        assert seen[0][0] == 1
        assert 1.0 <= seen[0][1] <= 3.0
