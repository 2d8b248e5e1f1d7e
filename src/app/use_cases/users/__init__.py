"""
User Profile Use Cases
"""

from .get_user_by_email_use_case import GetUserByEmailUseCase
from .get_current_user_use_case import GetCurrentUserUseCase
from .dtos import UserProfile, UserLookupResponse, CurrentUserResponse

__all__ = [
    "GetUserByEmailUseCase",
    "GetCurrentUserUseCase",
    "UserProfile",
    "UserLookupResponse",
    "CurrentUserResponse",
]
