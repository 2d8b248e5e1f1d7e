"""
Register Use Case

Creates an account, optionally hosts its profile image, and returns an
identity token.
"""

import asyncio
import logging
from typing import Optional

from sqlalchemy.exc import IntegrityError

from libs.result import Error, Result, Return
from src.app.services.gateways import IImageStore
from src.app.services.password_hasher import hash_password
from src.app.services.unit_of_work import UnitOfWork
from src.app.services.validation import (
    check_email,
    check_password,
    check_username,
    validation_error,
)
from src.domain.entities import User
from .register_dto import RegisterCommand, RegisterResponse

logger = logging.getLogger(__name__)


class RegisterUseCase:
    """
    Register Use Case

    Command/Response Pattern:
    - Input: RegisterCommand (raw registration intent)
    - Output: Result[RegisterResponse] (message + identity token)

    Business Logic:
    1. Validate username, email and password before touching the store
    2. Reject an existing username, then an existing email
    3. Hash password with bcrypt
    4. Flush the new User (unique indexes are the final backstop)
    5. Upload the profile image, if any, and store its URL
    6. Commit, then sign a 24-hour identity token

    An image is uploaded only after the row has been accepted by the store,
    so a duplicate registration never leaves an orphaned upload behind.
    """

    def __init__(self, uow: UnitOfWork, image_store: IImageStore):
        self.uow = uow
        self.image_store = image_store

    def _validate(self, command: RegisterCommand) -> Optional[Error]:
        if not command.username or not command.password or not command.email:
            return validation_error("Username, password, and email are required.")
        return (
            check_username(command.username)
            or check_email(command.email)
            or check_password(command.password)
        )

    async def execute(self, command: RegisterCommand) -> Result[RegisterResponse]:
        """
        Execute register use case

        Args:
            command: RegisterCommand with username, password, email, optional image

        Returns:
            Result[RegisterResponse] with message and token, or Error:
            - VALIDATION_ERROR: missing or malformed field
            - USERNAME_ALREADY_EXISTS / EMAIL_ALREADY_EXISTS / USER_ALREADY_EXISTS
            - REGISTRATION_FAILED: unexpected store or upload failure
        """
        error = self._validate(command)
        if error is not None:
            return Return.err(error)

        async with self.uow:
            try:
                return await self._register(command)
            except Exception:
                logger.exception(f"Registration of {command.username} failed")
                return Return.err(
                    Error("REGISTRATION_FAILED", "Error while Registering User.")
                )

    async def _register(self, command: RegisterCommand) -> Result[RegisterResponse]:
        if await self.uow.users.get_by_username(command.username):
            return Return.err(
                Error("USERNAME_ALREADY_EXISTS", "Username already exists.")
            )

        if await self.uow.users.get_by_email(command.email):
            return Return.err(Error("EMAIL_ALREADY_EXISTS", "Email already exists."))

        password_hash = await asyncio.to_thread(hash_password, command.password)

        user = User(
            username=command.username,
            email=command.email,
            password_hash=password_hash,
        )
        try:
            user = await self.uow.users.create(user)
        except IntegrityError:
            # Lost a race with a concurrent registration of the same identity
            return Return.err(
                Error("USER_ALREADY_EXISTS", "Username or email already exists.")
            )

        profile_url = None
        if command.image is not None:
            profile_url = await self.image_store.upload(
                command.image.content, command.image.filename
            )
            user.profile = profile_url
            user = await self.uow.users.update(user)

        try:
            await self.uow.commit()
        except Exception:
            if profile_url:
                logger.warning(
                    f"Profile image {profile_url} is orphaned: "
                    f"account {command.username} was not saved"
                )
            raise

        # Import JWT utility here to avoid circular dependency
        from src.api.utils.jwt import generate_jwt

        token = generate_jwt(user.id, user.username)
        logger.info(f"Registered user {user.id}")

        return Return.ok(RegisterResponse(message="Registered Successfully.", token=token))
