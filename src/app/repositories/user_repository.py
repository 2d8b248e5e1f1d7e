from abc import ABC, abstractmethod
from typing import Optional

from src.domain.entities import User


class IUserRepository(ABC):
    """
    Account store - application layer

    Username and email are each unique; lookups match them exactly as given.
    """

    @abstractmethod
    async def get_by_email(self, email: str) -> Optional[User]:
        pass

    @abstractmethod
    async def get_by_username(self, username: str) -> Optional[User]:
        pass

    @abstractmethod
    async def create(self, user: User) -> User:
        """Stage a new account; raises IntegrityError if username or email is taken"""
        pass

    @abstractmethod
    async def update(self, user: User) -> User:
        """Stage changes to an existing account"""
        pass
