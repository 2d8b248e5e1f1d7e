"""
User Entity

Represents a registered account and its password-reset state.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, SQLModel

from src.domain.base import utc_now


class User(SQLModel, table=True):
    """
    User entity - a registered account.

    Business Rules:
    - Username and email are each unique across all users
    - Password stored as bcrypt hash, never plaintext
    - reset_code_fingerprint and reset_code_expires_at are set and cleared together
    - Issuing a new reset code overwrites the previous one
    - otp_verified is set only by a successful code verification and
      cleared by the password reset it unlocks
    """

    __tablename__ = "users"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    username: str = Field(unique=True, index=True, max_length=255)
    email: str = Field(unique=True, index=True, max_length=255)
    password_hash: str = Field(max_length=60)  # Bcrypt output is 60 chars

    # Hosted profile image URL
    profile: Optional[str] = Field(default=None, max_length=2048)

    # Password reset state
    reset_code_fingerprint: Optional[str] = Field(default=None, max_length=64)
    reset_code_expires_at: Optional[datetime] = Field(
        default=None, sa_column=Column(DateTime, nullable=True)
    )
    otp_verified: bool = Field(default=False)

    created_at: datetime = Field(default_factory=utc_now, sa_column=Column(DateTime))

    def issue_reset_code(self, fingerprint: str, expires_at: datetime) -> None:
        self.reset_code_fingerprint = fingerprint
        self.reset_code_expires_at = expires_at

    def clear_reset_code(self) -> None:
        self.reset_code_fingerprint = None
        self.reset_code_expires_at = None
