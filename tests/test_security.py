from datetime import timedelta

import pytest
from jose import jwt

from cms.core.config import settings
from cms.core.security import InvalidToken, create_access_token, decode_access_token, verify_token
from cms.core.security import IdentityClaim


def test_token_round_trip():
    token = create_access_token("u-1", "u1@example.com")

    assert decode_access_token(token) == IdentityClaim(user_id="u-1", email="u1@example.com")


def test_token_contains_expiry_and_issued_at():
    token = create_access_token("u-1", "u1@example.com")
    payload = jwt.get_unverified_claims(token)

    assert payload["sub"] == "u-1"
    assert payload["exp"] - payload["iat"] == settings.access_token_expire_minutes * 60


def test_expired_token_is_rejected():
    token = create_access_token("u-1", "u1@example.com", expires_delta=timedelta(seconds=-10))

    with pytest.raises(InvalidToken):
        decode_access_token(token)


def test_token_signed_with_other_secret_is_rejected():
    token = jwt.encode({"sub": "u-1", "email": "u1@example.com"}, "other-secret", algorithm="HS256")

    with pytest.raises(InvalidToken):
        decode_access_token(token)


def test_tampered_token_is_rejected():
    header, payload, signature = create_access_token("u-1", "u1@example.com").split(".")
    forged = jwt.encode({"sub": "admin", "email": "a@example.com"}, "x", algorithm="HS256")
    forged_payload = forged.split(".")[1]

    with pytest.raises(InvalidToken):
        decode_access_token(".".join([header, forged_payload, signature]))


@pytest.mark.parametrize("claims", [
    {"email": "u1@example.com"},
    {"sub": "u-1"},
    {"sub": "", "email": "u1@example.com"},
    {"sub": "u-1", "email": 42},
])
def test_missing_or_ill_typed_claims_are_rejected(claims):
    token = jwt.encode(claims, settings.jwt_secret, algorithm=settings.jwt_algorithm)

    with pytest.raises(InvalidToken):
        decode_access_token(token)


@pytest.mark.parametrize("garbage", ["", "not-a-token", "a.b.c"])
def test_malformed_token_is_rejected(garbage):
    with pytest.raises(InvalidToken):
        decode_access_token(garbage)


def test_verify_token_collapses_failures_to_none():
    assert verify_token("not-a-token") is None
    assert verify_token(create_access_token("u-1", "u1@example.com")).user_id == "u-1"


def test_subject_longer_than_owner_column_is_rejected():
    assert decode_access_token(create_access_token("u" * 64, "u@example.com")).user_id == "u" * 64

    with pytest.raises(InvalidToken):
        decode_access_token(create_access_token("u" * 65, "u@example.com"))
