"""Goods of live broadcast rooms: warehouse, review, sale and room placement."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Any, Dict, Iterable, List, Optional

from .core import Requester

API_GOODS_ADD = "/wxaapi/broadcast/goods/add"
API_GOODS_AUDIT = "/wxaapi/broadcast/goods/audit"
API_GOODS_DELETE = "/wxaapi/broadcast/goods/delete"
API_GOODS_INFO = "/wxa/business/getgoodswarehouse"
API_GOODS_LIST = "/wxaapi/broadcast/goods/getapproved"
API_GOODS_PUSH = "/wxaapi/broadcast/goods/push"
API_GOODS_RESET_AUDIT = "/wxaapi/broadcast/goods/resetaudit"
API_GOODS_SALE = "/wxaapi/broadcast/goods/onsale"
API_GOODS_SORT = "/wxaapi/broadcast/goods/sort"
API_GOODS_UPDATE = "/wxaapi/broadcast/goods/update"
API_GOODS_VIDEO = "/wxaapi/broadcast/goods/getVideo"
API_ADD_GOODS = "/wxaapi/broadcast/room/addgoods"


class PriceType(IntEnum):
    NORMAL = 1
    RANGE = 2
    DISCOUNT = 3


@dataclass
class GoodsInfo:
    """Goods description; prices are in yuan with at most two decimals.

    ``price2`` is the upper bound for a range and the current price for a
    discount; it is ignored for a fixed price.
    """

    cover_img_url: str
    name: str
    price_type: PriceType
    price: float
    url: str
    price2: float = 0.0
    third_party_appid: str = ""

    def to_dict(self) -> Dict[str, Any]:
        return {
            "coverImgUrl": self.cover_img_url,
            "name": self.name,
            "priceType": int(PriceType(self.price_type)),
            "price": self.price,
            "price2": self.price2,
            "url": self.url,
            "thirdPartyAppid": self.third_party_appid,
        }


class LiveGoods:
    """Goods management for live broadcasts."""

    def __init__(self, requester: Requester) -> None:
        self.requester = requester

    def _post(self, path: str, body: Any) -> Dict[str, Any]:
        url = self.requester.combine_uri(path, None, True)
        return self.requester.post(url, body)

    def add(self, goods: GoodsInfo) -> Dict[str, Any]:
        """Add goods and submit them for review; returns ``goodsId`` and ``auditId``."""
        return self._post(API_GOODS_ADD, {"goodsInfo": goods.to_dict()})

    def audit(self, goods_id: int) -> Dict[str, Any]:
        """Resubmit goods for review; returns ``auditId``."""
        return self._post(API_GOODS_AUDIT, {"goodsId": goods_id})

    def delete(self, goods_id: int) -> Dict[str, Any]:
        return self._post(API_GOODS_DELETE, {"goodsId": goods_id})

    def info(self, goods_ids: Iterable[int]) -> Dict[str, Any]:
        """Status of the given goods: ``total`` and ``goods``."""
        return self._post(API_GOODS_INFO, {"goods_ids": list(goods_ids)})

    def list(self, offset: int, limit: Optional[int], status: int) -> Dict[str, Any]:
        """Goods in a review state (0 new, 1 reviewing, 2 approved, 3 rejected).

        ``limit`` defaults to 30 on the platform and may not exceed 100.
        """
        query = {"offset": offset, "limit": limit, "status": status}
        url = self.requester.combine_uri(API_GOODS_LIST, query, True)
        return self.requester.get(url)

    def push(self, goods_id: int, room_id: int) -> Dict[str, Any]:
        return self._post(API_GOODS_PUSH, {"goodsId": goods_id, "roomId": room_id})

    def reset_audit(self, goods_id: int, audit_id: int) -> Dict[str, Any]:
        """Withdraw a pending review."""
        return self._post(API_GOODS_RESET_AUDIT, {"goodsId": goods_id, "auditId": audit_id})

    def sale(self, goods_id: int, audit_id: int, on_sale: bool) -> Dict[str, Any]:
        """Put goods on sale or take them off."""
        return self._post(
            API_GOODS_SALE,
            {"goodsId": goods_id, "auditId": audit_id, "onSale": int(bool(on_sale))},
        )

    def sort(self, room_id: int, goods_ids: Iterable[int]) -> Dict[str, Any]:
        """Order the goods of a room as given."""
        goods: List[Dict[str, int]] = [{"goodsId": goods_id} for goods_id in goods_ids]
        return self._post(API_GOODS_SORT, {"roomId": room_id, "goods": goods})

    def update(self, goods_id: int, goods: GoodsInfo) -> Dict[str, Any]:
        body = {"goodsId": goods_id, **goods.to_dict()}
        return self._post(API_GOODS_UPDATE, {"goodsInfo": body})

    def video(self, goods_id: int, room_id: int) -> Dict[str, Any]:
        """Explanation video of goods in a room; the link is in ``url``."""
        return self._post(API_GOODS_VIDEO, {"goodsId": goods_id, "roomId": room_id})

    def add_to_room(self, room_id: int, goods_ids: Iterable[int]) -> Dict[str, Any]:
        """Import warehouse goods into a room."""
        return self._post(API_ADD_GOODS, {"ids": list(goods_ids), "roomId": room_id})