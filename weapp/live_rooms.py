"""Live broadcast rooms: creation, editing, staff, subscribers and room switches."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Any, Dict, Iterable, Optional, Union

from .core import Requester

API_CREATE_ROOM = "/wxaapi/broadcast/room/create"
API_EDIT_ROOM = "/wxaapi/broadcast/room/editroom"
API_DELETE_ROOM = "wxaapi/broadcast/room/deleteroom"
API_GET_LIVE_INFO = "/wxa/business/getliveinfo"
API_GET_PUSH_URL = "/wxaapi/broadcast/room/getpushurl"
API_GET_SHARED_CODE = "/wxaapi/broadcast/room/GetSharedCode"
API_ADD_ASSISTANT = "/wxaapi/broadcast/room/addassistant"
API_MODIFY_ASSISTANT = "/wxaapi/broadcast/room/modifyassistant"
API_REMOVE_ASSISTANT = "/wxaapi/broadcast/room/removeassistant"
API_GET_ASSISTANT_LIST = "/wxaapi/broadcast/room/getassistantlist"
API_ADD_SUB_ANCHOR = "/wxaapi/broadcast/room/addsubanchor"
API_MODIFY_SUB_ANCHOR = "/wxaapi/broadcast/room/modifysubanchor"
API_DELETE_SUB_ANCHOR = "/wxaapi/broadcast/room/deletesubanchor"
API_GET_SUB_ANCHOR = "/wxaapi/broadcast/room/GetSubAnchor"
API_ADD_ROLE = "/wxaapi/broadcast/role/addrole"
API_DELETE_ROLE = "/wxaapi/broadcast/role/deleterole"
API_GET_ROLE_LIST = "/wxaapi/broadcast/role/getrolelist"
API_GET_FOLLOWERS = "/wxa/business/get_wxa_followers"
API_PUSH_MESSAGE = "/wxa/business/push_message"
API_UPDATE_COMMENT = "/wxaapi/broadcast/room/updatecomment"
API_UPDATE_FEED_PUBLIC = "/wxaapi/broadcast/room/updatefeedpublic"
API_UPDATE_KF = "/wxaapi/broadcast/room/updatekf"
API_UPDATE_REPLAY = "/wxaapi/broadcast/room/updatereplay"


class Role(IntEnum):
    ALL = -1
    ROOT = 0
    ADMINISTRATOR = 1
    BROADCASTER = 2
    OPERATOR = 3


class LiveType(IntEnum):
    PHONE = 0
    PUSH_FLOW = 1


class LiveStatus(IntEnum):
    LIVING = 101
    NOT_STARTED = 102
    FINISHED = 103
    BAN = 104
    PAUSE = 105
    EXCEPTION = 106
    EXPIRED = 107


@dataclass
class Assistant:
    """A room assistant given by WeChat ID and nickname."""

    username: str
    nickname: str

    def to_dict(self) -> Dict[str, str]:
        return {"username": self.username, "nickname": self.nickname}


@dataclass
class RoomSettings:
    """Settings of a room; images are media IDs valid for three days.

    The room must start at least 10 minutes from now and within 6 months, and
    last between 30 minutes and 24 hours.
    """

    name: str
    cover_img: str
    start_time: int
    end_time: int
    anchor_name: str
    anchor_wechat: str
    share_img: str
    feeds_img: str
    sub_anchor_wechat: str = ""
    creater_wechat: str = ""
    is_feeds_public: bool = False
    type: LiveType = LiveType.PHONE
    close_like: bool = False
    close_goods: bool = False
    close_comment: bool = False
    close_replay: bool = False
    close_share: bool = False
    close_kf: bool = False

    def _common(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "coverImg": self.cover_img,
            "startTime": self.start_time,
            "endTime": self.end_time,
            "anchorName": self.anchor_name,
            "anchorWechat": self.anchor_wechat,
            "shareImg": self.share_img,
            "feedsImg": self.feeds_img,
            "isFeedsPublic": int(bool(self.is_feeds_public)),
            "closeLike": int(bool(self.close_like)),
            "closeGoods": int(bool(self.close_goods)),
            "closeComment": int(bool(self.close_comment)),
            "closeReplay": int(bool(self.close_replay)),
            "closeShare": int(bool(self.close_share)),
            "closeKf": int(bool(self.close_kf)),
        }

    def create_body(self) -> Dict[str, Any]:
        """Request body for creating a room."""
        body = self._common()
        body.update(
            {
                "subAnchorWechat": self.sub_anchor_wechat,
                "createrWechat": self.creater_wechat,
                "type": int(LiveType(self.type)),
            }
        )
        return body

    def edit_body(self, room_id: int) -> Dict[str, Any]:
        """Request body for editing room ``room_id``."""
        return {"id": room_id, **self._common()}


class LiveRooms:
    """Room management for live broadcasts."""

    def __init__(self, requester: Requester) -> None:
        self.requester = requester

    def _post(self, path: str, body: Any) -> Dict[str, Any]:
        url = self.requester.combine_uri(path, None, True)
        return self.requester.post(url, body)

    def _get(self, path: str, query: Dict[str, Any]) -> Dict[str, Any]:
        url = self.requester.combine_uri(path, query, True)
        return self.requester.get(url)

    def create_room(self, room: RoomSettings) -> Dict[str, Any]:
        """Create a room; returns ``roomId`` and, for unverified anchors, ``qrcode_url``."""
        return self._post(API_CREATE_ROOM, room.create_body())

    def edit_room(self, room_id: int, room: RoomSettings) -> Dict[str, Any]:
        return self._post(API_EDIT_ROOM, room.edit_body(room_id))

    def delete_room(self, room_id: int) -> Dict[str, Any]:
        return self._post(API_DELETE_ROOM, {"id": room_id})

    def get_live_info(self, start: int, limit: int) -> Dict[str, Any]:
        """Rooms from index ``start`` (0 is the first); ``total`` and ``room_info``."""
        return self._post(API_GET_LIVE_INFO, {"start": start, "limit": limit})

    def get_push_url(self, room_id: int) -> Dict[str, Any]:
        """Push stream address in ``pushAddr``."""
        return self._get(API_GET_PUSH_URL, {"roomId": room_id})

    def get_shared_code(self, room_id: int, params: Optional[Any] = None) -> Dict[str, Any]:
        """Share QR code: ``cdnUrl``, ``pagePath`` and ``posterUrl``."""
        return self._get(API_GET_SHARED_CODE, {"roomId": room_id, "params": params})

    def add_assistant(self, room_id: int, users: Iterable[Assistant]) -> Dict[str, Any]:
        return self._post(
            API_ADD_ASSISTANT,
            {"roomId": room_id, "users": [user.to_dict() for user in users]},
        )

    def modify_assistant(self, room_id: int, username: str, nickname: str) -> Dict[str, Any]:
        return self._post(
            API_MODIFY_ASSISTANT,
            {"roomId": room_id, "username": username, "nickname": nickname},
        )

    def remove_assistant(self, room_id: int, username: str) -> Dict[str, Any]:
        return self._post(API_REMOVE_ASSISTANT, {"room_id": room_id, "username": username})

    def get_assistant_list(self, room_id: int) -> Dict[str, Any]:
        """Assistants: ``list``, ``count`` and ``maxCount``."""
        return self._get(API_GET_ASSISTANT_LIST, {"roomId": room_id})

    def add_sub_anchor(self, room_id: int, username: str) -> Dict[str, Any]:
        return self._post(API_ADD_SUB_ANCHOR, {"roomId": room_id, "username": username})

    def modify_sub_anchor(self, room_id: int, username: str) -> Dict[str, Any]:
        return self._post(API_MODIFY_SUB_ANCHOR, {"roomId": room_id, "username": username})

    def delete_sub_anchor(self, room_id: int) -> Dict[str, Any]:
        return self._post(API_DELETE_SUB_ANCHOR, {"roomId": room_id})

    def get_sub_anchor(self, room_id: int) -> Dict[str, Any]:
        """Sub anchor WeChat ID in ``username``."""
        return self._get(API_GET_SUB_ANCHOR, {"roomId": room_id})

    def add_role(self, role: Union[Role, int], nickname: str) -> Dict[str, Any]:
        """Give a member a role; the platform ignores super administrator."""
        return self._post(API_ADD_ROLE, {"role": int(Role(role)), "nickname": nickname})

    def delete_role(self, role: Union[Role, int], nickname: str) -> Dict[str, Any]:
        return self._post(API_DELETE_ROLE, {"role": int(Role(role)), "nickname": nickname})

    def get_role_list(
        self,
        role: Union[Role, int] = Role.ALL,
        offset: int = 0,
        limit: int = 10,
        keyword: Optional[str] = None,
    ) -> Dict[str, Any]:
        """Members with a role; ``limit`` is at most 30."""
        query = {
            "role": int(Role(role)),
            "offset": offset,
            "limit": limit,
            "keyword": keyword,
        }
        return self._get(API_GET_ROLE_LIST, query)

    def get_followers(
        self, limit: Optional[int] = None, page_break: Optional[int] = None
    ) -> Dict[str, Any]:
        """Long-term subscribers; pass the previous ``page_break`` for the next page."""
        body = {
            key: value
            for key, value in (("limit", limit), ("page_break", page_break))
            if value is not None
        }
        return self._post(API_GET_FOLLOWERS, body)

    def push_message(self, room_id: int, user_openids: Iterable[str]) -> Dict[str, Any]:
        """Notify subscribers that a room starts; returns ``message_id``."""
        return self._post(
            API_PUSH_MESSAGE, {"room_id": room_id, "user_openid": list(user_openids)}
        )

    def update_comment(self, room_id: int, ban_comment: bool) -> Dict[str, Any]:
        return self._post(
            API_UPDATE_COMMENT, {"roomId": room_id, "banComment": int(bool(ban_comment))}
        )

    def update_feed_public(self, room_id: int, is_feeds_public: bool) -> Dict[str, Any]:
        return self._post(
            API_UPDATE_FEED_PUBLIC,
            {"roomId": room_id, "isFeedsPublic": int(bool(is_feeds_public))},
        )

    def update_kf(self, room_id: int, close_kf: bool) -> Dict[str, Any]:
        return self._post(API_UPDATE_KF, {"roomId": room_id, "closeKf": int(bool(close_kf))})

    def update_replay(self, room_id: int, close_replay: bool) -> Dict[str, Any]:
        return self._post(
            API_UPDATE_REPLAY, {"roomId": room_id, "closeReplay": int(bool(close_replay))}
        )