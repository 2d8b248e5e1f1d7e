"""
Outbound gateway contracts.

The use cases depend on these interfaces only; concrete transports live in
src/adapter/services.
"""

from abc import ABC, abstractmethod


class GatewayError(Exception):
    """Base error for failures reported by an outbound gateway."""


class EmailDeliveryError(GatewayError):
    """The email transport did not accept the message."""


class ImageUploadError(GatewayError):
    """The image host rejected or failed the upload."""


class IEmailSender(ABC):
    """Notification gateway - delivers a rendered HTML message to an address"""

    @abstractmethod
    async def send(self, address: str, subject: str, html: str) -> None:
        """
        Deliver a message.

        Raises:
            EmailDeliveryError: if the transport fails
        """
        pass


class IImageStore(ABC):
    """Image store - hosts uploaded profile images"""

    @abstractmethod
    async def upload(self, content: bytes, filename: str) -> str:
        """
        Upload image bytes.

        Returns:
            Public retrieval URL of the stored image

        Raises:
            ImageUploadError: if the upload fails
        """
        pass
