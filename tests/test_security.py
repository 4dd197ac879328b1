from datetime import timedelta

import pytest
from jose import jwt

from app.config import settings
from app.core.exceptions import AuthError
from app.core.security import (
    BAD_TOKEN_MESSAGE,
    create_access_token,
    decode_token,
    get_password_hash,
    verify_password,
)


@pytest.mark.unit
def test_password_hash_round_trip():
    hashed = get_password_hash("student123")
    assert hashed != "student123"
    assert verify_password("student123", hashed)
    assert not verify_password("student124", hashed)


@pytest.mark.unit
def test_verify_password_handles_missing_or_malformed_hash():
    assert not verify_password("anything", None)
    assert not verify_password("anything", "not-a-bcrypt-hash")


@pytest.mark.unit
def test_access_token_carries_subject():
    token = create_access_token({"sub": "65f0c0ffee0000000000abcd"})
    payload = decode_token(token)
    assert payload["sub"] == "65f0c0ffee0000000000abcd"
    assert payload["type"] == "access"


@pytest.mark.unit
def test_expired_token_is_rejected():
    token = create_access_token({"sub": "x"}, expires_delta=timedelta(seconds=-5))
    with pytest.raises(AuthError) as exc_info:
        decode_token(token)
    assert exc_info.value.message == BAD_TOKEN_MESSAGE


@pytest.mark.unit
def test_token_signed_with_other_key_is_rejected():
    token = jwt.encode({"sub": "x", "type": "access"}, "some-other-key", algorithm=settings.ALGORITHM)
    with pytest.raises(AuthError):
        decode_token(token)


@pytest.mark.unit
def test_non_access_token_is_rejected():
    token = jwt.encode({"sub": "x", "type": "refresh"}, settings.SECRET_KEY, algorithm=settings.ALGORITHM)
    with pytest.raises(AuthError):
        decode_token(token)
