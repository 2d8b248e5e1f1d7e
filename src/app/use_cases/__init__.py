"""
Use Cases

Organized into domain folders:
- auth/: Registration, login and password reset flows
- users/: Profile lookup
"""

from .auth import (
    RegisterUseCase,
    RegisterCommand,
    RegisterResponse,
    LoginUseCase,
    SendOtpUseCase,
    VerifyOtpUseCase,
    ResetPasswordUseCase,
)
from .users import (
    GetUserByEmailUseCase,
    GetCurrentUserUseCase,
)

__all__ = [
    # Auth
    "RegisterUseCase",
    "RegisterCommand",
    "RegisterResponse",
    "LoginUseCase",
    "SendOtpUseCase",
    "VerifyOtpUseCase",
    "ResetPasswordUseCase",
    # Users
    "GetUserByEmailUseCase",
    "GetCurrentUserUseCase",
]
