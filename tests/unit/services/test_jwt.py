from uuid import uuid4

from jose import jwt

from config import ApplicationConfig
from src.api.utils.jwt import generate_jwt, verify_jwt


def test_token_carries_id_and_username():
    user_id = uuid4()

    payload = verify_jwt(generate_jwt(user_id, "alice"))

    assert payload["id"] == str(user_id)
    assert payload["username"] == "alice"


def test_token_expires_after_24_hours():
    payload = verify_jwt(generate_jwt(uuid4(), "alice"))

    assert payload["exp"] - payload["iat"] == 24 * 60 * 60


def test_token_signed_with_other_secret_is_rejected():
    forged = jwt.encode(
        {"id": str(uuid4()), "username": "alice"}, "not-the-secret", algorithm="HS256"
    )

    assert verify_jwt(forged) is None


def test_expired_token_is_rejected():
    expired = jwt.encode(
        {"id": str(uuid4()), "username": "alice", "exp": 1},
        ApplicationConfig.JWT_SECRET,
        algorithm="HS256",
    )

    assert verify_jwt(expired) is None


def test_garbage_token_is_rejected():
    assert verify_jwt("invalid_token_here") is None
