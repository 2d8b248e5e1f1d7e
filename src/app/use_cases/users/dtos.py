"""
User Profile DTOs
"""

from typing import Optional
from pydantic import BaseModel

from src.domain.entities import User


class UserProfile(BaseModel):
    """Public projection of an account: no credential, no reset state"""

    username: str
    profile: Optional[str] = None
    email: str

    @classmethod
    def from_user(cls, user: User) -> "UserProfile":
        return cls(username=user.username, profile=user.profile, email=user.email)


class UserLookupResponse(BaseModel):
    """Response for lookup by email"""

    user: UserProfile


class CurrentUserResponse(BaseModel):
    """Response for lookup by token identity"""

    user: UserProfile
    message: str
