"""Customer service messages, typing state and temporary media."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from enum import Enum
from typing import Any, Dict, Union

from .core import Requester

API_SEND_MESSAGE = "/cgi-bin/message/custom/send"
API_SET_TYPING = "/cgi-bin/message/custom/typing"
API_UPLOAD_TEMP_MEDIA = "/cgi-bin/media/upload"
API_GET_TEMP_MEDIA = "/cgi-bin/media/get"

TEMP_MEDIA_TYPE_IMAGE = "image"

_MSG_TYPE_TEXT = "text"
_MSG_TYPE_IMAGE = "image"
_MSG_TYPE_LINK = "link"
_MSG_TYPE_CARD = "miniprogrampage"


@dataclass
class TextMessage:
    content: str

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass
class ImageMessage:
    """Image message; ``media_id`` comes from an uploaded image."""

    media_id: str

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass
class LinkMessage:
    title: str
    description: str
    url: str
    thumb_url: str

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass
class CardMessage:
    """Mini program card; the thumbnail is an uploaded image, ideally 520*416."""

    title: str
    page_path: str
    thumb_media_id: str

    def to_dict(self) -> Dict[str, Any]:
        return {
            "title": self.title,
            "pagepath": self.page_path,
            "thumb_media_id": self.thumb_media_id,
        }


class TypingCommand(str, Enum):
    TYPING = "Typing"
    CANCEL_TYPING = "CancelTyping"


Message = Union[TextMessage, ImageMessage, LinkMessage, CardMessage]


class CustomerService:
    """Sends customer service messages to users."""

    def __init__(self, requester: Requester) -> None:
        self.requester = requester

    def _send(self, open_id: str, msg_type: str, message: Message) -> Dict[str, Any]:
        body = {"touser": open_id, "msgtype": msg_type, msg_type: message.to_dict()}
        url = self.requester.combine_uri(API_SEND_MESSAGE, None, True)
        return self.requester.post(url, body)

    def send_text_msg(self, open_id: str, message: TextMessage) -> Dict[str, Any]:
        return self._send(open_id, _MSG_TYPE_TEXT, message)

    def send_image_msg(self, open_id: str, message: ImageMessage) -> Dict[str, Any]:
        return self._send(open_id, _MSG_TYPE_IMAGE, message)

    def send_link_msg(self, open_id: str, message: LinkMessage) -> Dict[str, Any]:
        return self._send(open_id, _MSG_TYPE_LINK, message)

    def send_card_msg(self, open_id: str, message: CardMessage) -> Dict[str, Any]:
        return self._send(open_id, _MSG_TYPE_CARD, message)

    def set_typing(self, open_id: str, command: Union[TypingCommand, str]) -> Dict[str, Any]:
        """Show or cancel the "typing" state for a user."""
        url = self.requester.combine_uri(API_SET_TYPING, None, True)
        return self.requester.post(
            url, {"touser": open_id, "command": TypingCommand(command).value}
        )

    def upload_temp_media(self, media_type: str, filename: str) -> Dict[str, Any]:
        """Upload a temporary media file (valid 3 days); returns ``media_id`` among others."""
        url = self.requester.combine_uri(API_UPLOAD_TEMP_MEDIA, {"type": media_type}, True)
        return self.requester.post_file(url, "media", filename)

    def get_temp_media(self, media_id: str) -> bytes:
        """Download a temporary media file sent in a customer service message."""
        url = self.requester.combine_uri(API_GET_TEMP_MEDIA, {"media_id": media_id}, True)
        return self.requester.download(url)