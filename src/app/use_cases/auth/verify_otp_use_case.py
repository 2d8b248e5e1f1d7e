"""
Verify OTP Use Case

Second step of the password reset flow: consume the emailed code.
"""

import logging

from libs.result import Error, Result, Return
from src.app.services.otp_codec import fingerprint_matches
from src.app.services.unit_of_work import UnitOfWork
from src.app.services.validation import validation_error
from src.domain.base import utc_now
from .dtos import VerifyOtpResponse

logger = logging.getLogger(__name__)


class VerifyOtpUseCase:
    """
    Use case for verifying a password reset code.

    Business Rules:
    - Submitted code is fingerprinted and compared with the stored fingerprint
    - Wrong code and expired code produce the same INVALID_OR_EXPIRED_OTP error
    - A failed attempt leaves the issued code in place
    - On match the code is consumed (fingerprint and expiry cleared) and
      otp_verified is set, unlocking the password reset step
    - Verification does not authenticate the caller
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, email: str, otp: str) -> Result[VerifyOtpResponse]:
        """
        Execute verify OTP use case.

        Args:
            email: Account email address
            otp: Code received by email

        Returns:
            Result with VerifyOtpResponse, or Error:
            - VALIDATION_ERROR: email or code missing
            - USER_NOT_FOUND: no account with that email
            - INVALID_OR_EXPIRED_OTP: code does not match or has expired
            - OTP_VERIFICATION_FAILED: unexpected store failure
        """
        if not email or not otp:
            return Return.err(validation_error("Email and OTP are required"))

        async with self.uow:
            try:
                return await self._verify(email, otp)
            except Exception:
                logger.exception("Reset code verification failed")
                return Return.err(Error("OTP_VERIFICATION_FAILED", "Error verifying OTP"))

    async def _verify(self, email: str, otp: str) -> Result[VerifyOtpResponse]:
        user = await self.uow.users.get_by_email(email)
        if user is None:
            return Return.err(Error("USER_NOT_FOUND", "User not found"))

        expires_at = user.reset_code_expires_at
        code_matches = fingerprint_matches(otp, user.reset_code_fingerprint)
        expired = expires_at is None or utc_now() > expires_at
        if not code_matches or expired:
            return Return.err(Error("INVALID_OR_EXPIRED_OTP", "Invalid or expired OTP"))

        user.clear_reset_code()
        user.otp_verified = True
        await self.uow.users.update(user)
        await self.uow.commit()

        logger.info(f"Reset code verified for user {user.id}")
        return Return.ok(VerifyOtpResponse(message="OTP verified"))
