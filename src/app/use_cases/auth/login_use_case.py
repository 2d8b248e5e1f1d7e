"""
Login Use Case

Handles credential verification and returns an identity token.
"""

import asyncio
import logging

from libs.result import Error, Result, Return
from src.app.services.password_hasher import verify_password
from src.app.services.unit_of_work import UnitOfWork
from src.app.services.validation import validation_error
from src.api.utils.jwt import generate_jwt
from .dtos import LoginResponse

logger = logging.getLogger(__name__)


class LoginUseCase:
    """
    Use case for user login and JWT issuance.

    Business Rules:
    - Email and password are both required
    - Unknown email is reported as not found
    - Password checked against the bcrypt hash (constant-time)
    - No lockout and no attempt counting
    - Token carries id and username, expires after 24 hours
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, email: str, password: str) -> Result[LoginResponse]:
        """
        Execute login use case.

        Args:
            email: User email
            password: Plain text password

        Returns:
            Result with LoginResponse containing the token, or Error
        """
        if not email or not password:
            return Return.err(validation_error("Email and password are required"))

        async with self.uow:
            try:
                user = await self.uow.users.get_by_email(email)
                if user is None:
                    return Return.err(Error("USER_NOT_FOUND", "User not found"))

                password_valid = await asyncio.to_thread(
                    verify_password, password, user.password_hash
                )
                if not password_valid:
                    return Return.err(Error("INVALID_CREDENTIALS", "Incorrect password"))

                token = generate_jwt(user.id, user.username)
            except Exception:
                logger.exception("Login failed")
                return Return.err(Error("LOGIN_FAILED", "Error while Logging in user."))

            logger.info(f"User {user.id} logged in")

            return Return.ok(LoginResponse(message="Login successful", token=token))
