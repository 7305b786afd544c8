"""Tests for password hashing and JWT helpers."""

import uuid
from datetime import timedelta

import pytest

from app.core.security import (
    create_access_token, get_password_hash, verify_password, verify_token
)

pytestmark = pytest.mark.unit


def test_password_hash_round_trip() -> None:
    hashed = get_password_hash("secret")

    assert hashed != "secret"
    assert verify_password("secret", hashed)
    assert not verify_password("Secret", hashed)


def test_long_password_is_truncated_consistently() -> None:
    password = "x" * 100
    hashed = get_password_hash(password)

    assert verify_password(password, hashed)
    assert verify_password("x" * 72, hashed)


def test_token_carries_subject() -> None:
    subject = str(uuid.uuid4())
    token = create_access_token({"sub": subject})

    payload = verify_token(token)
    assert payload is not None
    assert payload["sub"] == subject
    assert "exp" in payload


def test_expired_token_is_rejected() -> None:
    token = create_access_token({"sub": "someone"}, expires_delta=timedelta(seconds=-10))
    assert verify_token(token) is None


def test_tampered_token_is_rejected() -> None:
    header, _, signature = create_access_token({"sub": "someone"}).split(".")
    other_payload = create_access_token({"sub": "someone-else"}).split(".")[1]

    assert verify_token(".".join([header, other_payload, signature])) is None
