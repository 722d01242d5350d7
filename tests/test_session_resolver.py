from datetime import timedelta
from unittest.mock import patch

from starlette.requests import Request

from cms.core.auth import resolve_identity
from cms.core.config import settings
from cms.core.security import create_access_token


def make_request(cookie: str = None) -> Request:
    headers = []
    if cookie is not None:
        headers.append((b"cookie", cookie.encode()))
    return Request({"type": "http", "method": "GET", "path": "/", "headers": headers})


def test_missing_cookie_resolves_to_none_without_decoding():
    with patch("cms.core.auth.verify_token") as verify:
        assert resolve_identity(make_request()) is None
        verify.assert_not_called()


def test_empty_cookie_resolves_to_none_without_decoding():
    with patch("cms.core.auth.verify_token") as verify:
        assert resolve_identity(make_request(f"{settings.session_cookie_name}=")) is None
        verify.assert_not_called()


def test_valid_cookie_resolves_identity():
    token = create_access_token("u-7", "u7@example.com")

    identity = resolve_identity(make_request(f"{settings.session_cookie_name}={token}"))

    assert identity.user_id == "u-7"
    assert identity.email == "u7@example.com"


def test_invalid_cookie_resolves_to_none():
    assert resolve_identity(make_request(f"{settings.session_cookie_name}=garbage")) is None


def test_expired_cookie_resolves_to_none():
    token = create_access_token("u-7", "u7@example.com", expires_delta=timedelta(minutes=-1))

    assert resolve_identity(make_request(f"{settings.session_cookie_name}={token}")) is None


def test_other_cookie_names_are_ignored():
    token = create_access_token("u-7", "u7@example.com")

    assert resolve_identity(make_request(f"token={token}")) is None
