"""Optical character recognition of cards, licences and printed text."""

from __future__ import annotations

from enum import Enum
from typing import Any, Dict, Optional, Union

from .core import Requester

API_BANKCARD = "/cv/ocr/bankcard"
API_BUSINESS_LICENSE = "/cv/ocr/bizlicense"
API_DRIVER_LICENSE = "/cv/ocr/drivinglicense"
API_ID_CARD = "/cv/ocr/idcard"
API_PRINTED_TEXT = "/cv/ocr/comm"
API_VEHICLE_LICENSE = "/cv/ocr/driving"

CARD_TYPE_FRONT = "Front"
CARD_TYPE_BACK = "Back"

_FILE_FIELD = "img"

Mode = Optional[Union["RecognizeMode", str]]


class RecognizeMode(str, Enum):
    PHOTO = "photo"
    SCAN = "scan"


def _mode_query(mode: Mode) -> Dict[str, str]:
    if not mode:
        return {}
    return {"type": RecognizeMode(mode).value}


class OCR:
    """Recognition by uploaded image file or by image URL."""

    def __init__(self, requester: Requester) -> None:
        self.requester = requester

    def _by_file(self, path: str, filename: str, mode: Mode) -> Dict[str, Any]:
        url = self.requester.combine_uri(path, _mode_query(mode), True)
        return self.requester.post_file(url, _FILE_FIELD, filename)

    def _by_url(self, path: str, card_url: str, mode: Mode) -> Dict[str, Any]:
        query = {**_mode_query(mode), "img_url": card_url}
        url = self.requester.combine_uri(path, query, True)
        return self.requester.post(url, None)

    def bankcard_by_url(self, card_url: str, mode: Mode = None) -> Dict[str, Any]:
        """Bank card number in ``number``."""
        return self._by_url(API_BANKCARD, card_url, mode)

    def bankcard_by_file(self, filename: str, mode: Mode = None) -> Dict[str, Any]:
        return self._by_file(API_BANKCARD, filename, mode)

    def business_license_by_url(self, card_url: str, mode: Mode = None) -> Dict[str, Any]:
        """Business licence fields such as ``reg_num`` and ``enterprise_name``."""
        return self._by_url(API_BUSINESS_LICENSE, card_url, mode)

    def business_license_by_file(self, filename: str, mode: Mode = None) -> Dict[str, Any]:
        return self._by_file(API_BUSINESS_LICENSE, filename, mode)

    def driver_license_by_url(self, card_url: str, mode: Mode = None) -> Dict[str, Any]:
        """Driving licence fields such as ``id_num``, ``name`` and ``car_class``."""
        return self._by_url(API_DRIVER_LICENSE, card_url, mode)

    def driver_license_by_file(self, filename: str, mode: Mode = None) -> Dict[str, Any]:
        return self._by_file(API_DRIVER_LICENSE, filename, mode)

    def id_card_by_url(self, card_url: str, mode: Mode = None) -> Dict[str, Any]:
        """Identity card side (``Front`` or ``Back``) and ``valid_date``."""
        return self._by_url(API_ID_CARD, card_url, mode)

    def id_card_by_file(self, filename: str, mode: Mode = None) -> Dict[str, Any]:
        return self._by_file(API_ID_CARD, filename, mode)

    def printed_text_by_url(self, card_url: str, mode: Mode = None) -> Dict[str, Any]:
        """Recognised text ``items`` with their positions and ``img_size``."""
        return self._by_url(API_PRINTED_TEXT, card_url, mode)

    def printed_text_by_file(self, filename: str, mode: Mode = None) -> Dict[str, Any]:
        return self._by_file(API_PRINTED_TEXT, filename, mode)

    def vehicle_license_by_url(self, card_url: str, mode: Mode = None) -> Dict[str, Any]:
        """Vehicle licence fields such as ``vehicle_type``, ``owner`` and ``vin``."""
        return self._by_url(API_VEHICLE_LICENSE, card_url, mode)

    def vehicle_license_by_file(self, filename: str, mode: Mode = None) -> Dict[str, Any]:
        return self._by_file(API_VEHICLE_LICENSE, filename, mode)