import pytest
from unittest.mock import AsyncMock, MagicMock

from tests.fixtures.gateways import FakeImageStore, RecordingEmailSender


@pytest.fixture
def mock_uow():
    uow = MagicMock()
    uow.__aenter__ = AsyncMock(return_value=uow)
    uow.__aexit__ = AsyncMock(return_value=False)  # Must return False to not suppress exceptions
    uow.commit = AsyncMock()
    uow.rollback = AsyncMock()

    uow.users = MagicMock()
    uow.users.get_by_email = AsyncMock(return_value=None)
    uow.users.get_by_username = AsyncMock(return_value=None)
    uow.users.create = AsyncMock(side_effect=lambda user: user)
    uow.users.update = AsyncMock(side_effect=lambda user: user)
    return uow


@pytest.fixture
def email_sender():
    return RecordingEmailSender()


@pytest.fixture
def image_store():
    return FakeImageStore()
