"""
Reset Password Use Case

Final step of the password reset flow: replace the credential.
"""

import asyncio
import logging

from libs.result import Error, Result, Return
from src.app.services.password_hasher import hash_password
from src.app.services.unit_of_work import UnitOfWork
from src.app.services.validation import validation_error
from .dtos import ResetPasswordResponse

logger = logging.getLogger(__name__)


class ResetPasswordUseCase:
    """
    Use case for resetting a password after code verification.

    Business Rules:
    - Account must have otp_verified set by a successful code verification
    - Password is re-hashed with bcrypt and a freshly drawn salt
    - otp_verified is cleared, so each reset needs a new verification
    - No identity token is issued; the caller logs in again
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, email: str, new_password: str) -> Result[ResetPasswordResponse]:
        """
        Execute reset password use case.

        Args:
            email: Account email address
            new_password: Replacement password

        Returns:
            Result with ResetPasswordResponse, or Error:
            - VALIDATION_ERROR: email or new password missing
            - USER_NOT_FOUND: no account with that email
            - OTP_NOT_VERIFIED: no successful verification precedes this reset
            - PASSWORD_RESET_FAILED: unexpected store failure
        """
        if not email or not new_password:
            return Return.err(validation_error("Email and new password are required"))

        async with self.uow:
            try:
                return await self._reset(email, new_password)
            except Exception:
                logger.exception("Password reset failed")
                return Return.err(
                    Error("PASSWORD_RESET_FAILED", "Error resetting password")
                )

    async def _reset(self, email: str, new_password: str) -> Result[ResetPasswordResponse]:
        user = await self.uow.users.get_by_email(email)
        if user is None:
            return Return.err(Error("USER_NOT_FOUND", "User not found"))

        if not user.otp_verified:
            return Return.err(Error("OTP_NOT_VERIFIED", "OTP not verified"))

        user.password_hash = await asyncio.to_thread(hash_password, new_password)
        user.otp_verified = False
        await self.uow.users.update(user)
        await self.uow.commit()

        logger.info(f"Password reset for user {user.id}")
        return Return.ok(ResetPasswordResponse(message="Password reset successfully."))
