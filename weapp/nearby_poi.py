"""Nearby places ("nearby mini programs")."""

from __future__ import annotations

import json
from dataclasses import asdict, dataclass, field
from enum import IntEnum
from typing import Any, Dict, List, Union

from .core import Requester

API_ADD_NEARBY_POI = "/wxa/addnearbypoi"
API_DELETE_NEARBY_POI = "/wxa/delnearbypoi"
API_GET_NEARBY_POI_LIST = "/wxa/getnearbypoilist"
API_SET_NEARBY_POI_SHOW_STATUS = "/wxa/setnearbypoishowstatus"


def _compact(value: Any) -> str:
    return json.dumps(value, ensure_ascii=False, separators=(",", ":"))


@dataclass
class ServiceInfo:
    id: int
    type: int
    name: str
    appid: str
    path: str


@dataclass
class KFInfo:
    """Customer service avatar and nickname."""

    open_kf: bool = False
    kf_headimg: str = ""
    kf_name: str = ""


@dataclass
class NearbyPoi:
    """A place; ``poi_id`` is empty when creating and set when updating."""

    store_name: str
    hour: str
    credential: str
    address: str
    company_name: str
    qualification_list: str = ""
    pic_list: List[str] = field(default_factory=list)
    service_infos: List[ServiceInfo] = field(default_factory=list)
    kf_info: KFInfo = field(default_factory=KFInfo)
    poi_id: str = ""

    def to_params(self) -> Dict[str, str]:
        """Request body; picture, service and customer service lists travel as JSON strings."""
        return {
            "is_comm_nearby": "1",
            "pic_list": _compact({"list": list(self.pic_list)}),
            "service_infos": _compact(
                {"service_infos": [asdict(info) for info in self.service_infos]}
            ),
            "store_name": self.store_name,
            "hour": self.hour,
            "credential": self.credential,
            "address": self.address,
            "company_name": self.company_name,
            "qualification_list": self.qualification_list,
            "kf_info": _compact(asdict(self.kf_info)),
            "poi_id": self.poi_id,
        }


class ShowStatus(IntEnum):
    HIDE = 0
    SHOW = 1


class NearbyPoiService:
    """Adds, removes, lists and shows nearby places."""

    def __init__(self, requester: Requester) -> None:
        self.requester = requester

    def add(self, poi: NearbyPoi) -> Dict[str, Any]:
        """Add or update a place; ``data`` holds ``audit_id``, ``poi_id`` and ``related_credential``."""
        url = self.requester.combine_uri(API_ADD_NEARBY_POI, None, True)
        return self.requester.post(url, poi.to_params())

    def delete(self, poi_id: str) -> Dict[str, Any]:
        url = self.requester.combine_uri(API_DELETE_NEARBY_POI, None, True)
        return self.requester.post(url, {"poi_id": poi_id})

    def get_list(self, page: int, rows: int) -> Dict[str, Any]:
        """List places; ``page`` counts from 1, ``rows`` is at most 1000.

        The JSON string in ``data.data`` is decoded into ``data.poi_list``.
        """
        url = self.requester.combine_uri(API_GET_NEARBY_POI_LIST, None, True)
        result = self.requester.post(url, {"page": page, "page_rows": rows})
        data = result.setdefault("data", {})
        parsed = json.loads(data.get("data", ""))
        data["poi_list"] = parsed.get("poi_list") or []
        return result

    def set_show_status(self, poi_id: str, status: Union[ShowStatus, int]) -> Dict[str, Any]:
        url = self.requester.combine_uri(API_SET_NEARBY_POI_SHOW_STATUS, None, True)
        return self.requester.post(url, {"poi_id": poi_id, "status": int(ShowStatus(status))})