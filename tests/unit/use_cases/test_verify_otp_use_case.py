"""
Unit tests for VerifyOtpUseCase
"""
from datetime import timedelta
from uuid import uuid4

import pytest

from src.app.services.otp_codec import fingerprint_otp
from src.app.use_cases.auth import VerifyOtpUseCase
from src.domain.base import utc_now
from src.domain.entities import User


def user_with_code(otp: str = "483920", expires_in: timedelta = timedelta(minutes=10)) -> User:
    return User(
        id=uuid4(),
        username="alice",
        email="alice@example.com",
        password_hash="hashed_password",
        reset_code_fingerprint=fingerprint_otp(otp),
        reset_code_expires_at=utc_now() + expires_in,
    )


@pytest.mark.asyncio
async def test_successful_verification(mock_uow):
    """Matching code is consumed and unlocks the reset step"""
    # Arrange
    user = user_with_code("483920")
    mock_uow.users.get_by_email.return_value = user
    use_case = VerifyOtpUseCase(mock_uow)

    # Act
    result = await use_case.execute("alice@example.com", "483920")

    # Assert
    assert result.is_ok()
    assert result.value.message == "OTP verified"
    assert user.otp_verified is True
    assert user.reset_code_fingerprint is None
    assert user.reset_code_expires_at is None
    mock_uow.users.update.assert_called_once_with(user)
    mock_uow.commit.assert_called_once()


@pytest.mark.asyncio
async def test_wrong_code(mock_uow):
    # Arrange
    user = user_with_code("483920")
    stored_fingerprint = user.reset_code_fingerprint
    mock_uow.users.get_by_email.return_value = user
    use_case = VerifyOtpUseCase(mock_uow)

    # Act
    result = await use_case.execute("alice@example.com", "111111")

    # Assert
    assert result.is_err()
    assert result.error.code == "INVALID_OR_EXPIRED_OTP"
    # Failed attempt leaves the issued code in place
    assert user.reset_code_fingerprint == stored_fingerprint
    assert user.otp_verified is False
    mock_uow.commit.assert_not_called()


@pytest.mark.asyncio
async def test_expired_code(mock_uow):
    # Arrange
    user = user_with_code("483920", expires_in=timedelta(seconds=-1))
    mock_uow.users.get_by_email.return_value = user
    use_case = VerifyOtpUseCase(mock_uow)

    # Act
    result = await use_case.execute("alice@example.com", "483920")

    # Assert
    assert result.is_err()
    assert result.error.code == "INVALID_OR_EXPIRED_OTP"
    assert user.otp_verified is False
    mock_uow.commit.assert_not_called()


@pytest.mark.asyncio
async def test_wrong_and_expired_codes_are_indistinguishable(mock_uow):
    use_case = VerifyOtpUseCase(mock_uow)

    mock_uow.users.get_by_email.return_value = user_with_code("483920")
    wrong = await use_case.execute("alice@example.com", "000000")

    mock_uow.users.get_by_email.return_value = user_with_code(
        "483920", expires_in=timedelta(minutes=-5)
    )
    expired = await use_case.execute("alice@example.com", "483920")

    assert wrong.error == expired.error


@pytest.mark.asyncio
async def test_no_code_issued(mock_uow):
    # Arrange
    mock_uow.users.get_by_email.return_value = User(
        id=uuid4(), username="alice", email="alice@example.com", password_hash="x"
    )
    use_case = VerifyOtpUseCase(mock_uow)

    # Act
    result = await use_case.execute("alice@example.com", "483920")

    # Assert
    assert result.is_err()
    assert result.error.code == "INVALID_OR_EXPIRED_OTP"


@pytest.mark.asyncio
async def test_code_cannot_be_used_twice(mock_uow):
    user = user_with_code("483920")
    mock_uow.users.get_by_email.return_value = user
    use_case = VerifyOtpUseCase(mock_uow)

    first = await use_case.execute("alice@example.com", "483920")
    second = await use_case.execute("alice@example.com", "483920")

    assert first.is_ok()
    assert second.is_err()
    assert second.error.code == "INVALID_OR_EXPIRED_OTP"


@pytest.mark.asyncio
async def test_verify_unknown_email(mock_uow):
    mock_uow.users.get_by_email.return_value = None
    use_case = VerifyOtpUseCase(mock_uow)

    result = await use_case.execute("nobody@example.com", "483920")

    assert result.is_err()
    assert result.error.code == "USER_NOT_FOUND"


@pytest.mark.asyncio
@pytest.mark.parametrize("email,otp", [(None, "483920"), ("alice@example.com", None), ("", "")])
async def test_verify_missing_fields(mock_uow, email, otp):
    use_case = VerifyOtpUseCase(mock_uow)

    result = await use_case.execute(email, otp)

    assert result.is_err()
    assert result.error.code == "VALIDATION_ERROR"
    mock_uow.users.get_by_email.assert_not_called()


@pytest.mark.asyncio
async def test_verify_store_failure(mock_uow):
    mock_uow.users.get_by_email.return_value = user_with_code("483920")
    mock_uow.commit.side_effect = RuntimeError("database is locked")
    use_case = VerifyOtpUseCase(mock_uow)

    result = await use_case.execute("alice@example.com", "483920")

    assert result.is_err()
    assert result.error.code == "OTP_VERIFICATION_FAILED"
