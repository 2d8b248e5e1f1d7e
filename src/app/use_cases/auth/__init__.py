"""
Authentication Use Cases

Registration, login and the three-step password reset flow.
"""

from .register_use_case import RegisterUseCase
from .register_dto import RegisterCommand, RegisterResponse, ImageUpload
from .login_use_case import LoginUseCase
from .send_otp_use_case import SendOtpUseCase
from .verify_otp_use_case import VerifyOtpUseCase
from .reset_password_use_case import ResetPasswordUseCase
from .dtos import (
    LoginResponse,
    SendOtpResponse,
    VerifyOtpResponse,
    ResetPasswordResponse,
)

__all__ = [
    # Use Cases
    "RegisterUseCase",
    "LoginUseCase",
    "SendOtpUseCase",
    "VerifyOtpUseCase",
    "ResetPasswordUseCase",
    # DTOs - Commands
    "RegisterCommand",
    "ImageUpload",
    # DTOs - Responses
    "RegisterResponse",
    "LoginResponse",
    "SendOtpResponse",
    "VerifyOtpResponse",
    "ResetPasswordResponse",
]
