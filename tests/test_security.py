from datetime import datetime, timedelta, timezone

import jwt
import pytest
from app.core.config import settings
from app.core.exceptions import AuthError, InvalidTokenError
from app.core.security import (
    create_access_token, decode_access_token, get_password_hash, verify_password
)


def test_token_resolves_to_issuing_user():
    token = create_access_token(42)
    assert decode_access_token(token) == 42


def test_token_expires_one_hour_after_issuance():
    issued_at = datetime(2025, 3, 10, 9, 0, tzinfo=timezone.utc)
    token = create_access_token(7, now=issued_at)
    payload = jwt.decode(
        token, settings.JWT_SECRET, algorithms=["HS256"], options={"verify_exp": False}
    )
    assert payload["sub"] == "7"
    assert payload["exp"] - payload["iat"] == 3600


def test_expired_token_is_rejected():
    token = create_access_token(1, now=datetime.now(timezone.utc) - timedelta(hours=2))
    with pytest.raises(InvalidTokenError) as exc_info:
        decode_access_token(token)
    assert isinstance(exc_info.value, AuthError)


def test_token_signed_with_another_secret_is_rejected():
    token = jwt.encode(
        {"sub": "1", "exp": datetime.now(timezone.utc) + timedelta(hours=1)},
        "some-other-secret-that-is-also-long-enough",
        algorithm="HS256",
    )
    with pytest.raises(InvalidTokenError):
        decode_access_token(token)


def test_tampered_token_is_rejected():
    header, _, signature = create_access_token(1).split(".")
    _, forged_payload, _ = create_access_token(2).split(".")
    with pytest.raises(InvalidTokenError):
        decode_access_token(".".join([header, forged_payload, signature]))


@pytest.mark.parametrize("token", ["", "not-a-token", "a.b.c"])
def test_malformed_token_is_rejected(token):
    with pytest.raises(InvalidTokenError):
        decode_access_token(token)


def test_token_without_numeric_subject_is_rejected():
    token = jwt.encode(
        {"sub": "someone", "exp": datetime.now(timezone.utc) + timedelta(hours=1)},
        settings.JWT_SECRET,
        algorithm="HS256",
    )
    with pytest.raises(InvalidTokenError):
        decode_access_token(token)


def test_every_login_gets_an_independent_token():
    first = create_access_token(3, now=datetime.now(timezone.utc) - timedelta(minutes=5))
    second = create_access_token(3)
    assert first != second
    assert decode_access_token(first) == decode_access_token(second) == 3


def test_password_hash_round_trip():
    hashed = get_password_hash("123456")
    assert hashed != "123456"
    assert verify_password("123456", hashed)
    assert not verify_password("654321", hashed)


def test_verify_password_with_garbage_hash():
    assert verify_password("123456", "not-a-bcrypt-hash") is False
