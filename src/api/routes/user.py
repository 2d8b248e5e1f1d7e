from typing import Optional

from fastapi import APIRouter, Depends, status
from pydantic import BaseModel, Field

from src.api.error import ClientError, ServerError
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.users import (
    CurrentUserResponse,
    GetCurrentUserUseCase,
    GetUserByEmailUseCase,
    UserLookupResponse,
)
from src.depends import get_current_user, get_unit_of_work

router = APIRouter(tags=["User"])


class UserLookupRequest(BaseModel):
    """Lookup by email payload"""

    email: Optional[str] = Field(None, description="Account email address")


@router.post("/users/lookup", status_code=status.HTTP_200_OK, response_model=UserLookupResponse)
async def lookup_user(request: UserLookupRequest, uow: UnitOfWork = Depends(get_unit_of_work)):
    """
    Fetch a public profile (username, profile, email) by email.

    Raises:
        - 400 Bad Request: Email missing
        - 404 Not Found: No account with that email
        - 500 Internal Server Error: Server error
    """
    use_case = GetUserByEmailUseCase(uow)
    result = await use_case.execute(request.email)

    if result.is_err():
        error = result.error
        if error.code == "VALIDATION_ERROR":
            raise ClientError(error, status_code=status.HTTP_400_BAD_REQUEST)
        elif error.code == "USER_NOT_FOUND":
            raise ClientError(error, status_code=status.HTTP_404_NOT_FOUND)
        raise ServerError(error)

    return result.value


@router.get("/me", status_code=status.HTTP_200_OK, response_model=CurrentUserResponse)
async def get_me(
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Fetch the profile of the account named by the bearer token.

    Raises:
        - 400 Bad Request: Token carries no username
        - 401 Unauthorized: Invalid or expired JWT
        - 404 Not Found: Account no longer exists
        - 500 Internal Server Error: Server error
    """
    use_case = GetCurrentUserUseCase(uow)
    result = await use_case.execute(current_user)

    if result.is_err():
        error = result.error
        if error.code == "VALIDATION_ERROR":
            raise ClientError(error, status_code=status.HTTP_400_BAD_REQUEST)
        elif error.code == "USER_NOT_FOUND":
            raise ClientError(error, status_code=status.HTTP_404_NOT_FOUND)
        raise ServerError(error)

    return result.value
