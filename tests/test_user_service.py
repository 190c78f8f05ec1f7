from datetime import timedelta

import jwt
import pytest
from fastapi import HTTPException

from moodplaylist.config import settings
from moodplaylist.core.exceptions import StoreError, ValidationError
from moodplaylist.core.security import (
    create_access_token,
    decode_access_token,
    get_password_hash,
    verify_password,
)
from moodplaylist.db.base import utcnow
from moodplaylist.schemas.user import UserCreate
from moodplaylist.services.user_service import user_service


@pytest.fixture
def carol(db):
    return user_service.create_user(
        db, UserCreate(username="carol", email="Carol@Example.com", password="s3cret")
    )


def test_password_hash_roundtrip():
    hashed = get_password_hash("hunter2")
    assert hashed != "hunter2"
    assert verify_password("hunter2", hashed)
    assert not verify_password("wrong", hashed)
    assert not verify_password("hunter2", "not-a-hash")


def test_access_token_carries_subject():
    token = create_access_token({"sub": "carol"})
    assert decode_access_token(token)["sub"] == "carol"


def test_expired_token_rejected():
    token = create_access_token({"sub": "carol"}, expires_delta=timedelta(minutes=-5))
    with pytest.raises(HTTPException) as exc:
        decode_access_token(token)
    assert exc.value.status_code == 401


def test_token_signed_with_configured_secret():
    token = create_access_token({"sub": "carol"})
    payload = jwt.decode(token, settings.SECRET_KEY, algorithms=[settings.ALGORITHM])
    assert payload["sub"] == "carol"


def test_create_user_normalizes_email(db, carol):
    assert carol.email == "carol@example.com"
    assert user_service.get_user_by_email(db, "CAROL@example.com").id == carol.id
    assert user_service.get_user_by_id(db, carol.id).username == "carol"


def test_duplicate_username_is_store_error(db, carol):
    with pytest.raises(StoreError) as exc:
        user_service.create_user(
            db, UserCreate(username="carol", email="other@example.com", password="x")
        )
    # driver text such as table and column names stays out of the message
    assert "users.username" not in str(exc.value)
    assert "UNIQUE" not in str(exc.value)


def test_create_user_strips_username(db):
    user = user_service.create_user(
        db, UserCreate(username="  erin ", email="erin@example.com", password="pw")
    )
    assert user.username == "erin"
    assert user_service.get_user_by_username(db, "erin").id == user.id


@pytest.mark.parametrize("username,password", [
    ("", "pw"),
    ("   ", "pw"),
    ("frank", ""),
    ("frank", "   "),
])
def test_blank_credentials_rejected(db, username, password):
    with pytest.raises(ValidationError):
        user_service.create_user(
            db, UserCreate(username=username, email="frank@example.com", password=password)
        )
    assert user_service.get_user_by_email(db, "frank@example.com") is None


def test_authenticate_stamps_last_login(db, carol):
    assert carol.last_login_at is None
    assert user_service.authenticate_user(db, "carol", "wrong") is None
    assert user_service.authenticate_user(db, "nobody", "s3cret") is None

    user = user_service.authenticate_user(db, "carol", "s3cret")
    assert user.id == carol.id
    assert user.last_login_at is not None


def test_password_reset_flow(db, carol):
    assert user_service.create_password_reset_token(db, "missing@example.com") is None

    token = user_service.create_password_reset_token(db, "carol@example.com")
    assert token
    assert user_service.reset_password(db, "bogus", "newpass") is False
    assert user_service.reset_password(db, token, "newpass") is True
    # token is single use
    assert user_service.reset_password(db, token, "again") is False

    assert user_service.authenticate_user(db, "carol", "newpass") is not None
    assert user_service.authenticate_user(db, "carol", "s3cret") is None


def test_expired_reset_token_rejected(db, carol):
    token = user_service.create_password_reset_token(db, carol.email)
    carol.password_reset_expires_at = utcnow() - timedelta(minutes=1)
    db.commit()

    assert user_service.reset_password(db, token, "newpass") is False
