"""
Retry utilities with exponential backoff for transient API errors.

LLM APIs fail temporarily on rate limits (HTTP 429), overloaded servers
(HTTP 5xx) and network hiccups. Retrying immediately tends to hit the same
wall, so the delay doubles after every failed attempt (capped at max_delay)
and is multiplied by a random factor between 0.5 and 1.5 so that parallel
clients do not retry in lockstep.

USAGE:
------
    from utils.retry import retry_on_transient_error
    
    def is_retryable(exc):
        return getattr(exc, "status_code", None) in {429, 503}
    
    @retry_on_transient_error(is_retryable=is_retryable, max_retries=3)
    def call_my_api():
        return api.do_something()
"""

import time
import random
from functools import wraps
from typing import Callable, Optional


def retry_on_transient_error(
    is_retryable: Callable[[Exception], bool],
    max_retries: int = 5,
    base_delay: float = 1.0,
    max_delay: float = 60.0,
    on_retry: Optional[Callable[[Exception, int, float], None]] = None,
):
    """
    Decorator that retries a function on transient errors with exponential backoff.
    
    Args:
        is_retryable: Returns True if an exception is transient and the call
                      should be retried.
        max_retries: Retry attempts after the initial try (so up to
                     max_retries + 1 calls in total).
        base_delay: Delay in seconds before the first retry; doubled for
                    each subsequent retry.
        max_delay: Upper bound for the delay before jitter is applied.
        on_retry: Optional callback receiving (exception, failed attempt
                  number starting at 1, delay) before each wait.
    
    Raises:
        The last exception once retries are exhausted, or immediately if
        the exception is not retryable.
    """
    
    def decorator(func: Callable) -> Callable:
        @wraps(func)
        def wrapper(*args, **kwargs):
            last_exception = None
            
            for attempt in range(max_retries + 1):
                try:
                    return func(*args, **kwargs)
                except Exception as exc:
                    if not is_retryable(exc):
                        raise
                    last_exception = exc
                    
                    if attempt < max_retries:
                        delay = min(base_delay * (2 ** attempt), max_delay)
                        delay *= 0.5 + random.random()
                        if on_retry:
                            on_retry(exc, attempt + 1, delay)
                        time.sleep(delay)
            
            raise last_exception
            
        return wrapper
    return decorator


# Standard HTTP status codes that indicate transient server issues
TRANSIENT_HTTP_STATUS_CODES = {
    429,  # Too Many Requests (rate limited)
    500,  # Internal Server Error
    502,  # Bad Gateway
    503,  # Service Unavailable
    504,  # Gateway Timeout
}

# Standard network exception types that are typically transient
TRANSIENT_NETWORK_EXCEPTIONS = (
    ConnectionError,
    TimeoutError,
)


def is_transient_network_error(exc: Exception) -> bool:
    """Check if an exception is a transient network error."""
    return isinstance(exc, TRANSIENT_NETWORK_EXCEPTIONS)
