"""
HTTP Session Factory

Builds `requests` sessions for gateway lookups with a fixed timeout.
The timeout is validated when the session is built so a bad value
fails at startup rather than on the first request.
"""

from numbers import Real
from typing import Tuple, Union

import requests

Timeout = Union[float, Tuple[float, float]]


def _check_seconds(value, what: str) -> None:
    # bool is a Real subclass, but True is not a timeout
    if isinstance(value, bool) or not isinstance(value, Real):
        raise ValueError(f"{what} must be a number of seconds, got {value!r}")
    if not value > 0:
        raise ValueError(f"{what} must be positive, got {value!r}")


def validate_timeout(timeout: Timeout) -> Timeout:
    """
    Check a timeout the way requests accepts it.
    
    Args:
        timeout: Seconds, or a (connect, read) pair of seconds
        
    Returns:
        The timeout, unchanged
        
    Raises:
        ValueError: If the value is not a positive number or pair of them
    """
    if isinstance(timeout, tuple):
        if len(timeout) != 2:
            raise ValueError(
                f"timeout tuple must be (connect, read), got {timeout!r}"
            )
        _check_seconds(timeout[0], 'connect timeout')
        _check_seconds(timeout[1], 'read timeout')
    else:
        _check_seconds(timeout, 'timeout')
    return timeout


class TimeoutSession(requests.Session):
    """A requests session that applies a default timeout to every call."""

    def __init__(self, timeout: Timeout):
        super().__init__()
        self.timeout = validate_timeout(timeout)

    def request(self, method, url, **kwargs):
        kwargs.setdefault('timeout', self.timeout)
        return super().request(method, url, **kwargs)


def build_session(timeout: Timeout) -> TimeoutSession:
    """
    Build an HTTP session for gateway requests.
    
    Args:
        timeout: Seconds, or a (connect, read) pair of seconds
        
    Returns:
        A configured session; a per-call ``timeout=`` still wins
        
    Raises:
        ValueError: If the timeout is invalid
    """
    return TimeoutSession(timeout)
