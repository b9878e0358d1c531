"""Face identification results."""

from __future__ import annotations

from typing import Any, Dict

from .core import Requester

API_FACE_IDENTIFY = "/cityservice/face/identify/getinfo"


def face_identify(requester: Requester, key: str) -> Dict[str, Any]:
    """Fetch the identification result for the mini program's ``verify_result``.

    The answer holds ``identify_ret``, ``identify_time``, ``validate_data``,
    ``openid``, ``user_id_key``, ``finish_time``, ``id_card_number_md5`` and
    ``name_utf8_md5``.
    """
    url = requester.combine_uri(API_FACE_IDENTIFY, None, True)
    return requester.post(url, {"verify_result": key})