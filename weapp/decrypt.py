"""Decryption of user data handed to the mini program."""

from __future__ import annotations

import base64
import json
from dataclasses import dataclass, field
from typing import Any, List, Mapping

from .crypto import cbc_decrypt, verify_signature


@dataclass
class Watermark:
    appid: str = ""
    timestamp: int = 0

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Watermark":
        return cls(appid=data.get("appid", ""), timestamp=data.get("timestamp", 0))


@dataclass
class Mobile:
    phone_number: str = ""
    pure_phone_number: str = ""
    country_code: str = ""
    watermark: Watermark = field(default_factory=Watermark)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Mobile":
        return cls(
            phone_number=data.get("phoneNumber", ""),
            pure_phone_number=data.get("purePhoneNumber", ""),
            country_code=data.get("countryCode", ""),
            watermark=Watermark.from_dict(data.get("watermark") or {}),
        )


@dataclass
class ShareInfo:
    gid: str = ""

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "ShareInfo":
        return cls(gid=data.get("openGId", ""))


@dataclass
class UserInfo:
    avatar: str = ""
    gender: int = 0
    country: str = ""
    city: str = ""
    language: str = ""
    nickname: str = ""
    province: str = ""

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "UserInfo":
        return cls(
            avatar=data.get("avatarUrl", ""),
            gender=data.get("gender", 0),
            country=data.get("country", ""),
            city=data.get("city", ""),
            language=data.get("language", ""),
            nickname=data.get("nickName", ""),
            province=data.get("province", ""),
        )


@dataclass
class StepInfo:
    step: int = 0
    timestamp: int = 0


@dataclass
class RunData:
    step_info_list: List[StepInfo] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "RunData":
        return cls(
            step_info_list=[
                StepInfo(step=item.get("step", 0), timestamp=item.get("timestamp", 0))
                for item in data.get("stepInfoList") or []
            ]
        )


def decrypt_user_data(session_key: str, ciphertext: str, iv: str) -> bytes:
    """Decode the base64 inputs and decrypt the payload."""
    key = base64.b64decode(session_key, validate=True)
    data = base64.b64decode(ciphertext, validate=True)
    raw_iv = base64.b64decode(iv, validate=True)
    return cbc_decrypt(key, raw_iv, data)


def _decrypt_json(session_key: str, encrypted_data: str, iv: str) -> Mapping[str, Any]:
    return json.loads(decrypt_user_data(session_key, encrypted_data, iv))


def decrypt_mobile(session_key: str, encrypted_data: str, iv: str) -> Mobile:
    return Mobile.from_dict(_decrypt_json(session_key, encrypted_data, iv))


def decrypt_share_info(session_key: str, encrypted_data: str, iv: str) -> ShareInfo:
    return ShareInfo.from_dict(_decrypt_json(session_key, encrypted_data, iv))


def decrypt_user_info(
    session_key: str, raw_data: str, encrypted_data: str, signature: str, iv: str
) -> UserInfo:
    """Check ``signature`` against sha1(raw_data + session_key), then decrypt."""
    if not verify_signature(signature, [raw_data, session_key], False):
        raise ValueError("failed to validate signature")
    return UserInfo.from_dict(_decrypt_json(session_key, encrypted_data, iv))


def decrypt_run_data(session_key: str, encrypted_data: str, iv: str) -> RunData:
    return RunData.from_dict(_decrypt_json(session_key, encrypted_data, iv))