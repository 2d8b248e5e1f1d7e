from typing import Any, Optional

from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.user_repository import IUserRepository
from src.domain.entities import User


class UserRepository(IUserRepository):
    """Account store backed by the users table (SQLModel)"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def _one_by(self, column: Any, value: str) -> Optional[User]:
        result = await self.session.exec(select(User).where(column == value))
        return result.one_or_none()

    async def get_by_email(self, email: str) -> Optional[User]:
        return await self._one_by(User.email, email)

    async def get_by_username(self, username: str) -> Optional[User]:
        return await self._one_by(User.username, username)

    async def _stage(self, user: User) -> User:
        # Flush so unique-index violations surface here, not at commit
        self.session.add(user)
        await self.session.flush()
        await self.session.refresh(user)
        return user

    async def create(self, user: User) -> User:
        return await self._stage(user)

    async def update(self, user: User) -> User:
        return await self._stage(user)
