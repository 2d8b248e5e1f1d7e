from datetime import UTC, datetime, timedelta
from typing import Optional
from uuid import UUID

from jose import JWTError, jwt

from config import ApplicationConfig


def generate_jwt(user_id: UUID, username: str) -> str:
    """
    Generate JWT identity token

    Args:
        user_id: User UUID
        username: Account username

    Returns:
        JWT token string (HS256, fixed expiry of JWT_EXPIRY_HOURS, 24h by default)
    """
    now = datetime.now(UTC)
    payload = {
        "id": str(user_id),
        "username": username,
        "exp": now + timedelta(hours=ApplicationConfig.JWT_EXPIRY_HOURS),
        "iat": now,
    }
    return jwt.encode(
        payload, ApplicationConfig.JWT_SECRET, algorithm=ApplicationConfig.JWT_ALGORITHM
    )


def verify_jwt(token: str) -> Optional[dict]:
    """
    Verify and decode JWT token

    Args:
        token: JWT token string

    Returns:
        Decoded payload dict or None if invalid
    """
    try:
        payload = jwt.decode(
            token,
            ApplicationConfig.JWT_SECRET,
            algorithms=[ApplicationConfig.JWT_ALGORITHM],
        )
        return payload
    except JWTError:
        return None
