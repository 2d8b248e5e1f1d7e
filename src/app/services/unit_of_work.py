from abc import ABC, abstractmethod

from src.app.repositories.user_repository import IUserRepository


class UnitOfWork(ABC):
    """
    Transaction boundary for one request's account changes.

    Use as an async context manager. Only work committed inside the block
    is kept; anything still pending on exit is discarded.
    """

    users: IUserRepository

    @abstractmethod
    async def __aenter__(self) -> "UnitOfWork":
        pass

    @abstractmethod
    async def __aexit__(self, *args) -> None:
        pass

    @abstractmethod
    async def commit(self) -> None:
        pass

    @abstractmethod
    async def rollback(self) -> None:
        """Discard pending changes; loaded accounts must be fetched again"""
        pass
