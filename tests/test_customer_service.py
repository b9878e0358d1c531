import json
from urllib.parse import parse_qs, urlparse

import pytest
import responses

from weapp.core import Requester, WeappError
from weapp.customer_service import (
    CardMessage,
    CustomerService,
    ImageMessage,
    LinkMessage,
    TextMessage,
    TypingCommand,
)

BASE = "https://api.example.com"
OK = {"errcode": 0, "errmsg": "ok"}


@pytest.fixture
def mock():
    with responses.RequestsMock() as rsps:
        yield rsps


@pytest.fixture
def service():
    return CustomerService(Requester(lambda: "token", BASE))


def _body(mock):
    return json.loads(mock.calls[0].request.body)


def _query(mock):
    return parse_qs(urlparse(mock.calls[0].request.url).query)


def test_send_text(mock, service):
    mock.add(responses.POST, BASE + "/cgi-bin/message/custom/send", json=OK)
    result = service.send_text_msg("user-1", TextMessage("hello"))
    assert result["errcode"] == 0
    assert _body(mock) == {"touser": "user-1", "msgtype": "text", "text": {"content": "hello"}}
    assert _query(mock)["access_token"] == ["token"]


def test_send_image(mock, service):
    mock.add(responses.POST, BASE + "/cgi-bin/message/custom/send", json=OK)
    result = service.send_image_msg("user-1", ImageMessage("m1"))
    assert result["errmsg"] == "ok"
    body = _body(mock)
    assert body["msgtype"] == "image"
    assert body["image"] == {"media_id": "m1"}


def test_send_link(mock, service):
    mock.add(responses.POST, BASE + "/cgi-bin/message/custom/send", json=OK)
    result = service.send_link_msg(
        "user-1", LinkMessage("t", "d", "https://example.com", "https://example.com/t.png")
    )
    assert result["errcode"] == 0
    body = _body(mock)
    assert body["msgtype"] == "link"
    assert body["link"]["thumb_url"] == "https://example.com/t.png"
    assert set(body) == {"touser", "msgtype", "link"}


def test_send_card_uses_wire_names(mock, service):
    mock.add(responses.POST, BASE + "/cgi-bin/message/custom/send", json=OK)
    result = service.send_card_msg("user-1", CardMessage("title", "pages/index", "thumb"))
    assert result["errcode"] == 0
    body = _body(mock)
    assert body["msgtype"] == "miniprogrampage"
    assert body["miniprogrampage"] == {
        "title": "title",
        "pagepath": "pages/index",
        "thumb_media_id": "thumb",
    }


def test_send_error_raises(mock, service):
    mock.add(responses.POST, BASE + "/cgi-bin/message/custom/send", json={"errcode": 45015, "errmsg": "late"})
    with pytest.raises(WeappError) as info:
        service.send_text_msg("user-1", TextMessage("x"))
    assert info.value.errcode == 45015


def test_set_typing(mock, service):
    mock.add(responses.POST, BASE + "/cgi-bin/message/custom/typing", json=OK)
    result = service.set_typing("user-1", TypingCommand.CANCEL_TYPING)
    assert result["errmsg"] == "ok"
    assert _body(mock) == {"touser": "user-1", "command": "CancelTyping"}


def test_set_typing_rejects_unknown_command(service):
    with pytest.raises(ValueError):
        service.set_typing("user-1", "Dancing")


def test_upload_temp_media(mock, service, tmp_path):
    picture = tmp_path / "pic.jpg"
    picture.write_bytes(b"imagedata")
    mock.add(
        responses.POST,
        BASE + "/cgi-bin/media/upload",
        json={"errcode": 0, "type": "image", "media_id": "m2", "created_at": 1},
    )
    result = service.upload_temp_media("image", str(picture))
    assert result["media_id"] == "m2"
    assert _query(mock)["type"] == ["image"]
    body = mock.calls[0].request.body
    assert b'name="media"' in body
    assert b"imagedata" in body


def test_get_temp_media_image(mock, service):
    mock.add(responses.GET, BASE + "/cgi-bin/media/get", body=b"\x89PNGdata", content_type="image/png")
    assert service.get_temp_media("m3") == b"\x89PNGdata"
    assert _query(mock)["media_id"] == ["m3"]


def test_get_temp_media_json_error(mock, service):
    mock.add(responses.GET, BASE + "/cgi-bin/media/get", json={"errcode": 40007, "errmsg": "invalid media_id"})
    with pytest.raises(WeappError) as info:
        service.get_temp_media("bad")
    assert info.value.errmsg == "invalid media_id"


def test_get_temp_media_bad_header(mock, service):
    mock.add(responses.GET, BASE + "/cgi-bin/media/get", body="<html>", content_type="text/html")
    with pytest.raises(ValueError, match="invalid response header"):
        service.get_temp_media("m4")