"""
Authentication Use Case DTOs (Data Transfer Objects)

All Response classes for auth domain.
Provides type safety and clear contracts between layers.
"""

from pydantic import BaseModel


# ============================================================================
# Response DTOs
# ============================================================================


class LoginResponse(BaseModel):
    """Response for user login use case"""

    message: str
    token: str


class SendOtpResponse(BaseModel):
    """Response for reset code issuance use case"""

    message: str


class VerifyOtpResponse(BaseModel):
    """Response for reset code verification use case"""

    message: str


class ResetPasswordResponse(BaseModel):
    """Response for password reset use case"""

    message: str
