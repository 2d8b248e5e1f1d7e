"""
Register Use Case DTOs (Data Transfer Objects)

Command/Response pattern for clean architecture separation:
- RegisterCommand: Input to use case (raw registration intent)
- RegisterResponse: Output from use case (structured result)
"""

from typing import Optional
from pydantic import BaseModel


class ImageUpload(BaseModel):
    """Profile image bytes received with the registration form"""

    filename: str
    content: bytes


class RegisterCommand(BaseModel):
    """
    Register command - represents a registration attempt

    Fields are optional so that the use case, not the transport, decides
    what a missing field means.
    """

    username: Optional[str] = None
    password: Optional[str] = None
    email: Optional[str] = None
    image: Optional[ImageUpload] = None


class RegisterResponse(BaseModel):
    """Register response - confirmation message and identity token"""

    message: str
    token: str
