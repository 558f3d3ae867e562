from __future__ import annotations

import logging
from typing import Optional, Protocol

import requests

from ..core.constants import UPLOAD_TIMEOUT_SECONDS
from ..core.exceptions import UploadFailed, UploadTimeout

logger = logging.getLogger(__name__)


class BlobStore(Protocol):
    def upload(self, path: str, data: bytes, *, content_type: str = "image/jpeg") -> str:
        """Store ``data`` at ``path`` and return its public URL.

        Raises ``UploadTimeout`` when the transfer exceeds the timeout and
        ``UploadFailed`` for every other failure.
        """

        raise NotImplementedError


class BunnyBlobStore(BlobStore):
    """Bunny Storage zone: ``PUT https://{hostname}/{zone}/{path}``."""

    def __init__(
        self,
        *,
        hostname: str,
        zone: str,
        access_key: str,
        cdn_url: str,
        timeout: float = UPLOAD_TIMEOUT_SECONDS,
        session: Optional[requests.Session] = None,
    ):
        self._hostname = hostname
        self._zone = zone
        self._access_key = access_key
        self._cdn_url = cdn_url.rstrip("/")
        self._timeout = float(timeout)
        self._http = session or requests.Session()

    def upload(self, path: str, data: bytes, *, content_type: str = "image/jpeg") -> str:
        if not data:
            raise UploadFailed("Tệp rỗng, không thể upload")
        path = path.lstrip("/")
        url = f"https://{self._hostname}/{self._zone}/{path}"
        try:
            response = self._http.put(
                url,
                data=data,
                headers={"AccessKey": self._access_key, "Content-Type": content_type},
                timeout=self._timeout,
            )
        except requests.Timeout as exc:
            logger.warning("[blob] upload timed out after %ss: %s", self._timeout, path)
            raise UploadTimeout("Upload timeout - vui lòng thử lại") from exc
        except requests.RequestException as exc:
            logger.warning("[blob] upload failed: %s (%s)", path, exc)
            raise UploadFailed("Lỗi khi upload ảnh") from exc

        if not response.ok:
            logger.warning("[blob] storage rejected %s: %s %s", path, response.status_code, response.text[:200])
            raise UploadFailed(f"Lỗi upload: {response.status_code}")

        return f"{self._cdn_url}/{path}"


class InMemoryBlobStore(BlobStore):
    def __init__(self, base_url: str = "memory://blobs"):
        self._base_url = base_url.rstrip("/")
        self.blobs: dict[str, bytes] = {}

    def upload(self, path: str, data: bytes, *, content_type: str = "image/jpeg") -> str:
        if not data:
            raise UploadFailed("Tệp rỗng, không thể upload")
        path = path.lstrip("/")
        self.blobs[path] = bytes(data)
        return f"{self._base_url}/{path}"
