"""
Send OTP Use Case

First step of the password reset flow: issue a one-time code and email it.
"""

import logging
from datetime import timedelta

from config import ApplicationConfig
from libs.result import Error, Result, Return
from src.app.services.gateways import IEmailSender
from src.app.services.otp_codec import fingerprint_otp, generate_otp
from src.app.services.reset_email import RESET_PASSWORD_SUBJECT, render_reset_email
from src.app.services.unit_of_work import UnitOfWork
from src.app.services.validation import validation_error
from src.domain.base import utc_now
from src.domain.entities import User
from .dtos import SendOtpResponse

logger = logging.getLogger(__name__)


class SendOtpUseCase:
    """
    Use case for issuing a password reset code.

    Business Rules:
    - 6-digit code, uniformly drawn from 100000..999999
    - Only the SHA-256 fingerprint is stored, with expiry now + 10 minutes
    - A new code overwrites any previous one for the account
    - The plaintext code leaves the service only inside the email
    - Email names the browser and OS parsed from the request User-Agent
    - If storing, rendering or delivery fails, the stored code is cleared
      so no undelivered code stays usable
    """

    def __init__(self, uow: UnitOfWork, email_sender: IEmailSender):
        self.uow = uow
        self.email_sender = email_sender

    async def execute(self, email: str, user_agent: str = "") -> Result[SendOtpResponse]:
        """
        Execute send OTP use case.

        Args:
            email: Account email address
            user_agent: Raw User-Agent header of the requesting client

        Returns:
            Result with SendOtpResponse, or Error:
            - VALIDATION_ERROR: email missing
            - USER_NOT_FOUND: no account with that email
            - OTP_DELIVERY_FAILED: code could not be stored or delivered
        """
        if not email:
            return Return.err(validation_error("Email is required"))

        async with self.uow:
            try:
                user = await self.uow.users.get_by_email(email)
            except Exception:
                logger.exception("Reset code lookup failed")
                return Return.err(Error("OTP_DELIVERY_FAILED", "Error sending email"))

            if user is None:
                return Return.err(Error("USER_NOT_FOUND", "User not found"))

            user_id = user.id
            try:
                await self._issue_and_send(user, user_agent or "")
            except Exception:
                logger.exception(f"Failed to issue reset code for user {user_id}")
                await self._discard_reset_code(email, user_id)
                return Return.err(Error("OTP_DELIVERY_FAILED", "Error sending email"))

        logger.info(f"Reset code sent to user {user_id}")
        return Return.ok(SendOtpResponse(message="Email sent"))

    async def _issue_and_send(self, user: User, user_agent: str) -> None:
        otp = generate_otp()
        expires_at = utc_now() + timedelta(minutes=ApplicationConfig.OTP_EXPIRY_MINUTES)
        user.issue_reset_code(fingerprint_otp(otp), expires_at)
        await self.uow.users.update(user)
        await self.uow.commit()

        html = render_reset_email(user.username, otp, user_agent)
        await self.email_sender.send(user.email, RESET_PASSWORD_SUBJECT, html)

    async def _discard_reset_code(self, email: str, user_id) -> None:
        """Best-effort compensation: clear fingerprint and expiry together."""
        try:
            await self.uow.rollback()
            user = await self.uow.users.get_by_email(email)
            if user is None:
                return
            user.clear_reset_code()
            await self.uow.users.update(user)
            await self.uow.commit()
        except Exception:
            logger.exception(f"Could not clear reset code for user {user_id}")
