"""
Profile image hosting on Cloudinary.

Talks to the signed upload endpoint directly:
POST https://api.cloudinary.com/v1_1/<cloud>/image/upload
"""

import hashlib
import logging
import time
from typing import Dict, Optional

import httpx

from src.app.services.gateways import IImageStore, ImageUploadError

logger = logging.getLogger(__name__)

CLOUDINARY_API_BASE = "https://api.cloudinary.com/v1_1"

# Keep the original file name and overwrite any previous image with that name
UPLOAD_OPTIONS = {
    "use_filename": "true",
    "unique_filename": "false",
    "overwrite": "true",
}


def sign_params(params: Dict[str, str], api_secret: str) -> str:
    """Cloudinary request signature: sha1 of sorted key=value pairs + secret."""
    to_sign = "&".join(f"{key}={params[key]}" for key in sorted(params))
    return hashlib.sha1((to_sign + api_secret).encode("utf-8")).hexdigest()


class CloudinaryImageStore(IImageStore):
    def __init__(
        self,
        cloud_name: str,
        api_key: str,
        api_secret: str,
        timeout: float = 30.0,
        client: Optional[httpx.AsyncClient] = None,
    ):
        self.cloud_name = cloud_name
        self.api_key = api_key
        self.api_secret = api_secret
        self.timeout = timeout
        self.client = client

    @property
    def upload_url(self) -> str:
        return f"{CLOUDINARY_API_BASE}/{self.cloud_name}/image/upload"

    def _signed_form(self) -> Dict[str, str]:
        params = dict(UPLOAD_OPTIONS, timestamp=str(int(time.time())))
        params["signature"] = sign_params(params, self.api_secret)
        params["api_key"] = self.api_key
        return params

    async def _post(self, client: httpx.AsyncClient, content: bytes, filename: str) -> httpx.Response:
        return await client.post(
            self.upload_url,
            data=self._signed_form(),
            files={"file": (filename, content)},
        )

    async def upload(self, content: bytes, filename: str) -> str:
        try:
            if self.client is not None:
                response = await self._post(self.client, content, filename)
            else:
                async with httpx.AsyncClient(timeout=self.timeout) as client:
                    response = await self._post(client, content, filename)
            response.raise_for_status()
            secure_url = response.json().get("secure_url")
        except httpx.HTTPError as e:
            logger.error(f"Cloudinary upload of {filename} failed: {e}")
            raise ImageUploadError(str(e)) from e

        if not secure_url:
            raise ImageUploadError("Upload response carried no secure_url")
        return secure_url
