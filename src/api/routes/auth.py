from typing import Optional

from fastapi import APIRouter, Depends, File, Form, Header, UploadFile, status
from pydantic import BaseModel, ConfigDict, Field

from src.api.error import ClientError, ServerError
from src.app.services.gateways import IEmailSender, IImageStore
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.auth import (
    ImageUpload,
    LoginResponse,
    LoginUseCase,
    RegisterCommand,
    RegisterResponse,
    RegisterUseCase,
    ResetPasswordResponse,
    ResetPasswordUseCase,
    SendOtpResponse,
    SendOtpUseCase,
    VerifyOtpResponse,
    VerifyOtpUseCase,
)
from src.depends import get_email_sender, get_image_store, get_unit_of_work

router = APIRouter(prefix="/auth", tags=["Authentication"])

# Codes every auth flow can return besides its own
VALIDATION_ERROR = "VALIDATION_ERROR"
USER_NOT_FOUND = "USER_NOT_FOUND"


@router.post("/register", status_code=status.HTTP_200_OK, response_model=RegisterResponse)
async def register(
    username: Optional[str] = Form(None),
    password: Optional[str] = Form(None),
    email: Optional[str] = Form(None),
    file: Optional[UploadFile] = File(None),
    uow: UnitOfWork = Depends(get_unit_of_work),
    image_store: IImageStore = Depends(get_image_store),
):
    """
    Register Account

    Multipart form so a profile image can be sent alongside the fields.
    Returns a 24-hour identity token.

    Raises:
        - 400 Bad Request: Missing/invalid field, username or email taken
        - 500 Internal Server Error: Store or upload failure
    """
    image = None
    if file is not None and file.filename:
        image = ImageUpload(filename=file.filename, content=await file.read())

    command = RegisterCommand(
        username=username, password=password, email=email, image=image
    )

    use_case = RegisterUseCase(uow, image_store)
    result = await use_case.execute(command)

    if result.is_err():
        error = result.error
        if error.code in (
            VALIDATION_ERROR,
            "USERNAME_ALREADY_EXISTS",
            "EMAIL_ALREADY_EXISTS",
            "USER_ALREADY_EXISTS",
        ):
            raise ClientError(error, status_code=status.HTTP_400_BAD_REQUEST)
        raise ServerError(error)

    return result.value


class LoginRequest(BaseModel):
    """
    Login HTTP request payload

    Fields are optional; the use case reports missing ones as 400.
    """

    email: Optional[str] = Field(None, description="User email address")
    password: Optional[str] = Field(None, description="User password")


@router.post("/login", status_code=status.HTTP_200_OK, response_model=LoginResponse)
async def login(request: LoginRequest, uow: UnitOfWork = Depends(get_unit_of_work)):
    """
    User Login

    Raises:
        - 400 Bad Request: Email or password missing
        - 401 Unauthorized: Incorrect password
        - 404 Not Found: No account with that email
        - 500 Internal Server Error: Server error
    """
    use_case = LoginUseCase(uow)
    result = await use_case.execute(request.email, request.password)

    if result.is_err():
        error = result.error
        if error.code == VALIDATION_ERROR:
            raise ClientError(error, status_code=status.HTTP_400_BAD_REQUEST)
        elif error.code == USER_NOT_FOUND:
            raise ClientError(error, status_code=status.HTTP_404_NOT_FOUND)
        elif error.code == "INVALID_CREDENTIALS":
            raise ClientError(error, status_code=status.HTTP_401_UNAUTHORIZED)
        raise ServerError(error)

    return result.value


class SendOtpRequest(BaseModel):
    """Password reset code request payload"""

    email: Optional[str] = Field(None, description="Account email address")


@router.post("/send-otp", status_code=status.HTTP_200_OK, response_model=SendOtpResponse)
async def send_otp(
    request: SendOtpRequest,
    user_agent: Optional[str] = Header(None),
    uow: UnitOfWork = Depends(get_unit_of_work),
    email_sender: IEmailSender = Depends(get_email_sender),
):
    """
    Send Password Reset Code

    Emails a 6-digit code valid for 10 minutes. The code is never part of
    the response.

    Raises:
        - 400 Bad Request: Email missing
        - 404 Not Found: No account with that email
        - 500 Internal Server Error: Code could not be stored or delivered
    """
    use_case = SendOtpUseCase(uow, email_sender)
    result = await use_case.execute(request.email, user_agent or "")

    if result.is_err():
        error = result.error
        if error.code == VALIDATION_ERROR:
            raise ClientError(error, status_code=status.HTTP_400_BAD_REQUEST)
        elif error.code == USER_NOT_FOUND:
            raise ClientError(error, status_code=status.HTTP_404_NOT_FOUND)
        raise ServerError(error)

    return result.value


class VerifyOtpRequest(BaseModel):
    """Password reset code verification payload"""

    model_config = ConfigDict(coerce_numbers_to_str=True)

    email: Optional[str] = Field(None, description="Account email address")
    otp: Optional[str] = Field(None, description="Code received by email")


@router.post("/verify-otp", status_code=status.HTTP_200_OK, response_model=VerifyOtpResponse)
async def verify_otp(request: VerifyOtpRequest, uow: UnitOfWork = Depends(get_unit_of_work)):
    """
    Verify Password Reset Code

    Wrong and expired codes are reported identically.

    Raises:
        - 400 Bad Request: Field missing, or invalid/expired code
        - 404 Not Found: No account with that email
        - 500 Internal Server Error: Server error
    """
    use_case = VerifyOtpUseCase(uow)
    result = await use_case.execute(request.email, request.otp)

    if result.is_err():
        error = result.error
        if error.code in (VALIDATION_ERROR, "INVALID_OR_EXPIRED_OTP"):
            raise ClientError(error, status_code=status.HTTP_400_BAD_REQUEST)
        elif error.code == USER_NOT_FOUND:
            raise ClientError(error, status_code=status.HTTP_404_NOT_FOUND)
        raise ServerError(error)

    return result.value


class ResetPasswordRequest(BaseModel):
    """Password reset payload"""

    model_config = ConfigDict(populate_by_name=True)

    email: Optional[str] = Field(None, description="Account email address")
    new_password: Optional[str] = Field(
        None, alias="newPassword", description="Replacement password"
    )


@router.post("/reset-password", status_code=status.HTTP_200_OK, response_model=ResetPasswordResponse)
async def reset_password(request: ResetPasswordRequest, uow: UnitOfWork = Depends(get_unit_of_work)):
    """
    Reset Password

    Requires a prior successful code verification. Does not log the caller in.

    Raises:
        - 400 Bad Request: Field missing or code not verified
        - 404 Not Found: No account with that email
        - 500 Internal Server Error: Server error
    """
    use_case = ResetPasswordUseCase(uow)
    result = await use_case.execute(request.email, request.new_password)

    if result.is_err():
        error = result.error
        if error.code in (VALIDATION_ERROR, "OTP_NOT_VERIFIED"):
            raise ClientError(error, status_code=status.HTTP_400_BAD_REQUEST)
        elif error.code == USER_NOT_FOUND:
            raise ClientError(error, status_code=status.HTTP_404_NOT_FOUND)
        raise ServerError(error)

    return result.value
