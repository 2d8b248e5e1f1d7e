"""
Get User By Email Use Case
"""

import logging

from libs.result import Error, Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.app.services.validation import validation_error
from .dtos import UserLookupResponse, UserProfile

logger = logging.getLogger(__name__)


class GetUserByEmailUseCase:
    """Looks up the public profile of the account registered under an email."""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, email: str) -> Result[UserLookupResponse]:
        if not email:
            return Return.err(validation_error("Email is required"))

        async with self.uow:
            try:
                user = await self.uow.users.get_by_email(email)
            except Exception:
                logger.exception("User lookup by email failed")
                return Return.err(
                    Error("USER_LOOKUP_FAILED", "Error fetching user information")
                )

            if user is None:
                return Return.err(Error("USER_NOT_FOUND", "User not found"))

            return Return.ok(UserLookupResponse(user=UserProfile.from_user(user)))
