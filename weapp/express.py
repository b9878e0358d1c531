"""Logistics assistant: carrier accounts, waybills, printers and quotas."""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any, Dict, List

from .core import Requester

API_BIND_ACCOUNT = "/cgi-bin/express/business/account/bind"
API_GET_ALL_LOGISTICS_ACCOUNT = "/cgi-bin/express/business/account/getall"
API_GET_EXPRESS_PATH = "/cgi-bin/express/business/path/get"
API_ADD_EXPRESS_ORDER = "/cgi-bin/express/business/order/add"
API_CANCEL_EXPRESS_ORDER = "/cgi-bin/express/business/order/cancel"
API_GET_ALL_DELIVERY = "/cgi-bin/express/business/delivery/getall"
API_GET_EXPRESS_ORDER = "/cgi-bin/express/business/order/get"
API_GET_PRINTER = "/cgi-bin/express/business/printer/getall"
API_GET_EXPRESS_QUOTA = "/cgi-bin/express/business/quota/get"
API_UPDATE_PRINTER = "/cgi-bin/express/business/printer/update"
API_TEST_UPDATE_ORDER = "/cgi-bin/express/business/test_update_order"

BIND = "bind"
UNBIND = "unbind"

BIND_SUCCESS = 0
BIND_FAILED = -1

FROM_WEAPP = 0
FROM_APP_OR_H5 = 2

UNINSURED = 0
INSURED = 1


def _without_empty(data: Dict[str, Any], *keys: str) -> Dict[str, Any]:
    """Drop the given keys whose values are empty or zero."""
    return {key: value for key, value in data.items() if key not in keys or value}


@dataclass
class ExpressUser:
    """Sender or receiver; one of ``tel`` and ``mobile`` must be given."""

    name: str
    province: str
    city: str
    area: str
    address: str
    tel: str = ""
    mobile: str = ""
    company: str = ""
    post_code: str = ""
    country: str = ""

    def to_dict(self) -> Dict[str, Any]:
        return _without_empty(asdict(self), "tel", "mobile", "company", "post_code", "country")


@dataclass
class CargoDetail:
    name: str
    count: int


@dataclass
class ExpressCargo:
    """Package: weight in kg, dimensions in cm."""

    count: int
    weight: float
    space_x: float
    space_y: float
    space_z: float
    detail_list: List[CargoDetail] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass
class ExpressShop:
    wxa_path: str = ""
    img_url: str = ""
    goods_name: str = ""
    goods_count: int = 0

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass
class ExpressInsure:
    """Insurance; the value is in cents."""

    use_insured: int = UNINSURED
    insured_value: int = 0

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass
class ExpressService:
    service_type: int
    service_name: str

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass
class ExpressOrder:
    order_id: str
    delivery_id: str
    biz_id: str
    sender: ExpressUser
    receiver: ExpressUser
    cargo: ExpressCargo
    service: ExpressService
    openid: str = ""
    custom_remark: str = ""
    shop: ExpressShop = field(default_factory=ExpressShop)
    insured: ExpressInsure = field(default_factory=ExpressInsure)

    def to_dict(self) -> Dict[str, Any]:
        data = {
            "order_id": self.order_id,
            "openid": self.openid,
            "delivery_id": self.delivery_id,
            "biz_id": self.biz_id,
            "custom_remark": self.custom_remark,
            "sender": self.sender.to_dict(),
            "receiver": self.receiver.to_dict(),
            "cargo": self.cargo.to_dict(),
            "shop": self.shop.to_dict(),
            "insured": self.insured.to_dict(),
            "service": self.service.to_dict(),
        }
        return _without_empty(data, "openid", "custom_remark")


@dataclass
class ExpressAccount:
    """Bind (``type="bind"``) or unbind (``type="unbind"``) a carrier account."""

    type: str
    biz_id: str
    delivery_id: str
    password: str
    remark_content: str = ""

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass
class ExpressOrderCreator:
    """An order together with how it was placed."""

    order: ExpressOrder
    add_source: int = FROM_WEAPP
    wx_appid: str = ""
    expect_time: int = 0
    tagid: int = 0

    def to_dict(self) -> Dict[str, Any]:
        data = self.order.to_dict()
        data.update(
            _without_empty(
                {
                    "add_source": self.add_source,
                    "wx_appid": self.wx_appid,
                    "expect_time": self.expect_time,
                    "tagid": self.tagid,
                },
                "wx_appid",
                "expect_time",
                "tagid",
            )
        )
        return data


@dataclass
class ExpressOrderGetter:
    """Identifies a waybill; used to get, cancel or trace it."""

    order_id: str
    delivery_id: str
    waybill_id: str
    openid: str = ""

    def to_dict(self) -> Dict[str, Any]:
        return _without_empty(
            {
                "order_id": self.order_id,
                "openid": self.openid,
                "delivery_id": self.delivery_id,
                "waybill_id": self.waybill_id,
            },
            "openid",
        )


@dataclass
class QuotaGetter:
    delivery_id: str
    biz_id: str

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass
class UpdateExpressOrderTester:
    """Simulated carrier update; ``biz_id`` must be ``test_biz_id``."""

    biz_id: str
    order_id: str
    waybill_id: str
    delivery_id: str
    action_time: int
    action_type: int
    action_msg: str

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass
class PrinterUpdater:
    """Bind or unbind a printer; ``tagid_list`` is comma separated."""

    openid: str
    update_type: str
    tagid_list: str = ""

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


class Logistics:
    """Business side of the logistics assistant."""

    def __init__(self, requester: Requester) -> None:
        self.requester = requester

    def _post(self, path: str, body: Any) -> Dict[str, Any]:
        url = self.requester.combine_uri(path, None, True)
        return self.requester.post(url, body)

    def bind_account(self, account: ExpressAccount) -> Dict[str, Any]:
        return self._post(API_BIND_ACCOUNT, account.to_dict())

    def get_all_accounts(self) -> Dict[str, Any]:
        """All bound carrier accounts: ``count`` and ``list``."""
        return self._post(API_GET_ALL_LOGISTICS_ACCOUNT, {})

    def get_path(self, getter: ExpressOrderGetter) -> Dict[str, Any]:
        """Trace of a waybill: ``path_item_num`` and ``path_item_list``."""
        return self._post(API_GET_EXPRESS_PATH, getter.to_dict())

    def add_order(self, creator: ExpressOrderCreator) -> Dict[str, Any]:
        """Create a waybill; returns ``order_id``, ``waybill_id`` and ``waybill_data``."""
        return self._post(API_ADD_EXPRESS_ORDER, creator.to_dict())

    def get_all_delivery(self) -> Dict[str, Any]:
        """Supported carriers: ``count`` and ``data``."""
        url = self.requester.combine_uri(API_GET_ALL_DELIVERY, None, True)
        return self.requester.get(url)

    def get_order(self, getter: ExpressOrderGetter) -> Dict[str, Any]:
        """Waybill data: ``print_html`` and ``waybill_data``."""
        return self._post(API_GET_EXPRESS_ORDER, getter.to_dict())

    def cancel_order(self, getter: ExpressOrderGetter) -> Dict[str, Any]:
        return self._post(API_CANCEL_EXPRESS_ORDER, getter.to_dict())

    def get_printer(self) -> Dict[str, Any]:
        """Bound printers: ``count``, ``openid`` and ``tagid_list``."""
        url = self.requester.combine_uri(API_GET_PRINTER, None, True)
        return self.requester.get(url)

    def get_quota(self, getter: QuotaGetter) -> Dict[str, Any]:
        """Remaining electronic waybill quota in ``quota_num``."""
        return self._post(API_GET_EXPRESS_QUOTA, getter.to_dict())

    def test_update_order(self, tester: UpdateExpressOrderTester) -> Dict[str, Any]:
        """Simulate a carrier status update; for testing only."""
        return self._post(API_TEST_UPDATE_ORDER, tester.to_dict())

    def update_printer(self, updater: PrinterUpdater) -> Dict[str, Any]:
        return self._post(API_UPDATE_PRINTER, updater.to_dict())