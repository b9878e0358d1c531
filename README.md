# weapp

A Python client for the server-side APIs of WeChat mini programs.

## What is in the package

| Module | What it offers |
| --- | --- |
| `weapp.core` | `Requester`, which builds URLs and sends requests, and `WeappError` |
| `weapp.auth` | `Auth`: `code2session`, `get_paid_union_id`, `check_encrypted_data` |
| `weapp.decrypt` | `decrypt_user_data`, `decrypt_mobile`, `decrypt_share_info`, `decrypt_user_info`, `decrypt_run_data` |
| `weapp.crypto` | `pkcs7_pad`, `pkcs7_unpad`, `cbc_encrypt`, `cbc_decrypt`, `sign`, `verify_signature` |
| `weapp.analysis` | `Analysis`: user portraits, visit distribution, visited pages, daily summary, retention and visit trends |
| `weapp.img` | `ImageService`: smart crop, QR code scanning and super resolution, by file or by URL |
| `weapp.customer_service` | `CustomerService`: text, image, link and card messages, typing state, temporary media |
| `weapp.nearby_poi` | `NearbyPoiService`: add, delete, list and show or hide nearby places |
| `weapp.face_identify` | `face_identify(requester, key)` |
| `weapp.express` | `Logistics`: carrier accounts, waybills, traces, printers and quotas |
| `weapp.ocr` | `OCR`: bank cards, business licences, driving licences, ID cards, printed text and vehicle licences |
| `weapp.live_goods` | `LiveGoods`: goods warehouse, review, sale, sorting and room placement |
| `weapp.live_rooms` | `LiveRooms`: rooms, assistants, sub anchors, roles, subscribers and room switches |
| `weapp.cache` | `Cache` and the thread-safe `MemoryCache`, with expiry |
| `weapp.logger` | `Logger` with `Level` (`SILENT`, `ERROR`, `WARN`, `INFO`), optionally coloured |

## Installation

From a checkout of the project:

```
pip install .
```

## Usage

Every service is built on a `weapp.core.Requester`. It joins the base URL with
an API path, adds the access token returned by `token_source` when asked to,
sends the request and decodes the JSON reply. HTTP error statuses raise
`requests.HTTPError`; replies with a non-zero `errcode` raise
`weapp.core.WeappError`, which carries `errcode` and `errmsg`. Service methods
return the decoded reply as a dict.

```python
from weapp.core import Requester
from weapp.auth import Auth
from weapp.ocr import OCR, RecognizeMode

requester = Requester(
    token_source=lambda: "token",
    base_url="https://api.weixin.qq.com",
    session=None,
)

auth = Auth(requester)
login = auth.code2session("appid", "secret", "code-from-wx-login", "authorization_code")

ocr = OCR(requester)
card = ocr.bankcard_by_file("card.jpg", RecognizeMode.PHOTO)
print(card["number"])
```

Decrypting data sent by the mini program (all three arguments are base64
strings as the mini program hands them over):

```python
from weapp.decrypt import decrypt_mobile

mobile = decrypt_mobile(session_key, encrypted_data, iv)
print(mobile.phone_number)
```

`decrypt_user_info` first checks the signature against
`sha1(raw_data + session_key)` and raises `ValueError` when it does not match.

Caching a value for a while:

```python
from weapp.cache import MemoryCache

cache = MemoryCache()
cache.set("access_token", "token", 7000)
cache.get("access_token")  # None once the timeout has passed
```

## What the package does not do

- It does not fetch or refresh the access token itself: pass a `token_source`
  callable to `Requester`, which may for instance read from a `MemoryCache`.
- It does not receive or parse the messages and events the platform pushes to
  your server; it only makes outgoing API calls.
- It covers the business side of the logistics assistant only: there are no
  calls for carriers themselves, nor for same-city immediate delivery.

## Running the tests

```
pip install -e ".[test]"
pytest
```