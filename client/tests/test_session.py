"""
Unit tests for the session module.

Tests timeout validation at construction and default timeouts on requests.
No network access is made; requests.Session.request is patched.
"""

import pytest
import sys
from pathlib import Path

import requests

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from ccipnames.session import build_session, validate_timeout, TimeoutSession


@pytest.fixture
def captured(monkeypatch):
    """Record the keyword arguments each request is sent with."""
    calls = []
    
    def fake_request(self, method, url, **kwargs):
        calls.append((method, url, kwargs))
        return None
    
    monkeypatch.setattr(requests.Session, 'request', fake_request)
    return calls


class TestBuildSession:
    """Tests for build_session function."""
    
    def test_returns_session(self):
        """Result is a requests session."""
        session = build_session(5.0)
        assert isinstance(session, TimeoutSession)
        assert isinstance(session, requests.Session)
        assert session.timeout == 5.0
    
    def test_default_timeout_applied(self, captured):
        """Requests without a timeout get the session's one."""
        session = build_session(3)
        session.get('https://gateway.example/lookup')
        method, url, kwargs = captured[0]
        assert method == 'GET'
        assert kwargs['timeout'] == 3
    
    def test_explicit_timeout_wins(self, captured):
        """A per-call timeout overrides the default."""
        session = build_session(3)
        session.post('https://gateway.example/lookup', json={}, timeout=10)
        assert captured[0][2]['timeout'] == 10
    
    def test_tuple_timeout(self, captured):
        """A (connect, read) pair is passed through."""
        session = build_session((1.5, 10))
        session.get('https://gateway.example/lookup')
        assert captured[0][2]['timeout'] == (1.5, 10)
    
    @pytest.mark.parametrize('timeout', [
        0, -1, 'soon', None, True, (1,), (1, 0), (1, 2, 3), (1, None), (None, 5),
    ])
    def test_invalid_timeout_fails_at_construction(self, timeout):
        """Bad timeouts raise before any request is made."""
        with pytest.raises(ValueError):
            build_session(timeout)


class TestValidateTimeout:
    """Tests for validate_timeout function."""
    
    def test_returns_value(self):
        """Valid timeouts are returned unchanged."""
        assert validate_timeout(2.5) == 2.5
        assert validate_timeout((1, 2)) == (1, 2)
    
    def test_message_names_field(self):
        """The error says which part of the pair is wrong."""
        with pytest.raises(ValueError, match='read timeout'):
            validate_timeout((1, -2))
