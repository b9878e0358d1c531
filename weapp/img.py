"""Image services: smart crop, QR code scanning and super resolution."""

from __future__ import annotations

from typing import Any, Dict

from .core import Requester

API_AI_CROP = "/cv/img/aicrop"
API_SCAN_QR_CODE = "/cv/img/qrcode"
API_SUPER_RESOLUTION = "/cv/img/superResolution"

_FILE_FIELD = "img"


class ImageService:
    """Image processing, by uploaded file or by image URL."""

    def __init__(self, requester: Requester) -> None:
        self.requester = requester

    def _by_file(self, path: str, filename: str) -> Dict[str, Any]:
        url = self.requester.combine_uri(path, None, True)
        return self.requester.post_file(url, _FILE_FIELD, filename)

    def _by_url(self, path: str, img_url: str) -> Dict[str, Any]:
        url = self.requester.combine_uri(path, {"img_url": img_url}, True)
        return self.requester.post(url, None)

    def ai_crop(self, filename: str) -> Dict[str, Any]:
        """Smart crop of an uploaded image; returns ``results`` and ``img_size``."""
        return self._by_file(API_AI_CROP, filename)

    def ai_crop_by_url(self, img_url: str) -> Dict[str, Any]:
        """Smart crop of the image at ``img_url``."""
        return self._by_url(API_AI_CROP, img_url)

    def scan_qr_code(self, filename: str) -> Dict[str, Any]:
        """Recognise bar codes and QR codes in an uploaded image."""
        return self._by_file(API_SCAN_QR_CODE, filename)

    def scan_qr_code_by_url(self, img_url: str) -> Dict[str, Any]:
        """Recognise bar codes and QR codes in the image at ``img_url``."""
        return self._by_url(API_SCAN_QR_CODE, img_url)

    def super_resolution(self, filename: str) -> Dict[str, Any]:
        """Upscale an uploaded image; returns the ``media_id`` of the result."""
        return self._by_file(API_SUPER_RESOLUTION, filename)

    def super_resolution_by_url(self, img_url: str) -> Dict[str, Any]:
        """Upscale the image at ``img_url``."""
        return self._by_url(API_SUPER_RESOLUTION, img_url)