"""
Get Current User Use Case

Loads the profile of the account named by a verified identity token.
"""

import logging
from typing import Any, Dict

from libs.result import Error, Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.app.services.validation import validation_error
from .dtos import CurrentUserResponse, UserProfile

logger = logging.getLogger(__name__)


class GetCurrentUserUseCase:
    """
    Use case for loading the caller's own profile.

    Business Rules:
    - Identity comes from already-verified JWT claims
    - Claims must carry a username
    - Account is looked up by that username
    - Only username, profile and email are returned
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, identity: Dict[str, Any]) -> Result[CurrentUserResponse]:
        """
        Execute get current user use case.

        Args:
            identity: Decoded JWT payload

        Returns:
            Result with CurrentUserResponse, or Error
        """
        username = identity.get("username")
        if not username:
            return Return.err(validation_error("Username is required"))

        async with self.uow:
            try:
                user = await self.uow.users.get_by_username(username)
            except Exception:
                logger.exception("User lookup by identity failed")
                return Return.err(
                    Error("USER_LOOKUP_FAILED", "Error while fetching user Info.")
                )

            if user is None:
                return Return.err(Error("USER_NOT_FOUND", "User not found"))

            return Return.ok(
                CurrentUserResponse(
                    user=UserProfile.from_user(user), message="User Info fetched"
                )
            )
