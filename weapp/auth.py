"""Login and identity endpoints."""

from __future__ import annotations

from typing import Any, Dict, Optional

from .core import Requester

API_CHECK_ENCRYPTED_DATA = "/wxa/business/checkencryptedmsg"
API_CODE2SESSION = "/sns/jscode2session"
API_GET_PAID_UNION_ID = "/wxa/getpaidunionid"


class Auth:
    """User login and identity services."""

    def __init__(self, requester: Requester) -> None:
        self.requester = requester

    def check_encrypted_data(self, encrypted_msg_hash: str) -> Dict[str, Any]:
        """Check whether encrypted data (hex sha256) was produced by the platform in the last 3 days.

        The answer holds ``vaild`` (sic) and ``create_time``.
        """
        url = self.requester.combine_uri(API_CHECK_ENCRYPTED_DATA, None, True)
        return self.requester.post(url, {"encrypted_msg_hash": encrypted_msg_hash})

    def code2session(
        self,
        appid: str,
        secret: str,
        js_code: str,
        grant_type: str = "authorization_code",
    ) -> Dict[str, Any]:
        """Exchange a login code for ``openid``, ``session_key`` and ``unionid``."""
        query = {
            "appid": appid,
            "secret": secret,
            "js_code": js_code,
            "grant_type": grant_type,
        }
        url = self.requester.combine_uri(API_CODE2SESSION, query, False)
        return self.requester.get(url)

    def get_paid_union_id(
        self,
        openid: str,
        transaction_id: Optional[str] = None,
        mch_id: Optional[str] = None,
        out_trade_no: Optional[str] = None,
    ) -> str:
        """Return the UnionId of a user who has completed a payment."""
        query = {
            "openid": openid,
            "transaction_id": transaction_id,
            "mch_id": mch_id,
            "out_trade_no": out_trade_no,
        }
        url = self.requester.combine_uri(API_GET_PAID_UNION_ID, query, True)
        return self.requester.get(url).get("unionid", "")