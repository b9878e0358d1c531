import pytest
import responses
from responses import matchers

from weapp.core import Requester, WeappError
from weapp.live_goods import GoodsInfo, LiveGoods, PriceType

BASE = "https://api.example.com"
TOKEN_QUERY = matchers.query_param_matcher({"access_token": "token"})


@pytest.fixture
def rsps():
    with responses.RequestsMock() as mock:
        yield mock


@pytest.fixture
def goods():
    return LiveGoods(Requester(lambda: "token", BASE))


@pytest.fixture
def info():
    return GoodsInfo(
        cover_img_url="media-1",
        name="Tea",
        price_type=PriceType.RANGE,
        price=1.5,
        url="pages/goods/index",
        price2=3.5,
    )


def test_price_type_values():
    assert PriceType(1) is PriceType.NORMAL
    assert PriceType.DISCOUNT == 3


def test_goods_info_to_dict(info):
    data = info.to_dict()
    assert data == {
        "coverImgUrl": "media-1",
        "name": "Tea",
        "priceType": 2,
        "price": 1.5,
        "price2": 3.5,
        "url": "pages/goods/index",
        "thirdPartyAppid": "",
    }


def test_add(rsps, goods, info):
    rsps.add(
        responses.POST,
        BASE + "/wxaapi/broadcast/goods/add",
        json={"errcode": 0, "goodsId": 7, "auditId": 9},
        match=[TOKEN_QUERY, matchers.json_params_matcher({"goodsInfo": info.to_dict()})],
    )
    result = goods.add(info)
    assert (result["goodsId"], result["auditId"]) == (7, 9)


def test_update_includes_goods_id(rsps, goods, info):
    rsps.add(
        responses.POST,
        BASE + "/wxaapi/broadcast/goods/update",
        json={"errcode": 0},
        match=[
            TOKEN_QUERY,
            matchers.json_params_matcher({"goodsInfo": {"goodsId": 7, **info.to_dict()}}),
        ],
    )
    assert goods.update(7, info)["errcode"] == 0


@pytest.mark.parametrize(
    "call, path, body",
    [
        (lambda g: g.audit(5), "/wxaapi/broadcast/goods/audit", {"goodsId": 5}),
        (lambda g: g.delete(5), "/wxaapi/broadcast/goods/delete", {"goodsId": 5}),
        (lambda g: g.info([1, 2]), "/wxa/business/getgoodswarehouse", {"goods_ids": [1, 2]}),
        (lambda g: g.push(5, 6), "/wxaapi/broadcast/goods/push", {"goodsId": 5, "roomId": 6}),
        (
            lambda g: g.reset_audit(5, 8),
            "/wxaapi/broadcast/goods/resetaudit",
            {"goodsId": 5, "auditId": 8},
        ),
        (
            lambda g: g.sale(5, 8, True),
            "/wxaapi/broadcast/goods/onsale",
            {"goodsId": 5, "auditId": 8, "onSale": 1},
        ),
        (
            lambda g: g.sort(6, [3, 1]),
            "/wxaapi/broadcast/goods/sort",
            {"roomId": 6, "goods": [{"goodsId": 3}, {"goodsId": 1}]},
        ),
        (lambda g: g.video(5, 6), "/wxaapi/broadcast/goods/getVideo", {"goodsId": 5, "roomId": 6}),
        (
            lambda g: g.add_to_room(6, [1, 2]),
            "/wxaapi/broadcast/room/addgoods",
            {"ids": [1, 2], "roomId": 6},
        ),
    ],
)
def test_post_endpoints(rsps, goods, call, path, body):
    rsps.add(
        responses.POST,
        BASE + path,
        json={"errcode": 0, "echo": path},
        match=[TOKEN_QUERY, matchers.json_params_matcher(body)],
    )
    assert call(goods)["echo"] == path


def test_sale_off(rsps, goods):
    rsps.add(
        responses.POST,
        BASE + "/wxaapi/broadcast/goods/onsale",
        json={"errcode": 0},
        match=[matchers.json_params_matcher({"goodsId": 5, "auditId": 8, "onSale": 0})],
    )
    assert goods.sale(5, 8, False) == {"errcode": 0}


def test_list_uses_get_query(rsps, goods):
    rsps.add(
        responses.GET,
        BASE + "/wxaapi/broadcast/goods/getapproved",
        json={"total": 1, "goods": [{"goodsId": 4}]},
        match=[
            matchers.query_param_matcher(
                {"access_token": "token", "offset": "0", "limit": "30", "status": "2"}
            )
        ],
    )
    result = goods.list(0, 30, 2)
    assert result["goods"][0]["goodsId"] == 4


def test_list_without_limit(rsps, goods):
    rsps.add(
        responses.GET,
        BASE + "/wxaapi/broadcast/goods/getapproved",
        json={"total": 0},
        match=[
            matchers.query_param_matcher({"access_token": "token", "offset": "10", "status": "1"})
        ],
    )
    assert goods.list(10, None, 1)["total"] == 0


def test_error_raises(rsps, goods):
    rsps.add(
        responses.POST,
        BASE + "/wxaapi/broadcast/goods/delete",
        json={"errcode": 300002, "errmsg": "bad"},
    )
    with pytest.raises(WeappError) as err:
        goods.delete(1)
    assert err.value.errmsg == "bad"