"""HTTP plumbing shared by the API services: URL building, requests and error checks."""

from __future__ import annotations

import os
from typing import Any, Callable, Mapping, Optional
from urllib.parse import urlencode

import requests


class WeappError(Exception):
    """Error reported by the platform through a non-zero ``errcode``."""

    def __init__(self, errcode: int, errmsg: str = "") -> None:
        super().__init__(f"{errcode}: {errmsg}")
        self.errcode = errcode
        self.errmsg = errmsg

    @classmethod
    def raise_for(cls, data: Any) -> None:
        """Raise if a decoded response body carries a non-zero ``errcode``."""
        if isinstance(data, Mapping):
            code = data.get("errcode", 0) or 0
            if code != 0:
                raise cls(code, data.get("errmsg", ""))


class Requester:
    """Builds API URLs and performs JSON requests against the platform."""

    def __init__(
        self,
        token_source: Callable[[], str],
        base_url: str,
        session: Optional[requests.Session] = None,
    ) -> None:
        self.token_source = token_source
        self.base_url = base_url.rstrip("/")
        self.session = session if session is not None else requests.Session()

    def combine_uri(
        self,
        path: str,
        query: Optional[Mapping[str, Any]] = None,
        with_token: bool = True,
    ) -> str:
        """Join ``path`` to the base URL and append the query, with the access token if asked."""
        params = {key: value for key, value in (query or {}).items() if value is not None}
        if with_token:
            params["access_token"] = self.token_source()
        url = f"{self.base_url}/{path.lstrip('/')}"
        if params:
            url = f"{url}?{urlencode(params)}"
        return url

    @staticmethod
    def _decode(response: requests.Response) -> Any:
        response.raise_for_status()
        data = response.json()
        WeappError.raise_for(data)
        return data

    def get(self, url: str) -> Any:
        """GET ``url`` and return the decoded JSON body."""
        return self._decode(self.session.get(url))

    def post(self, url: str, body: Any = None) -> Any:
        """POST ``body`` as JSON to ``url`` and return the decoded JSON body."""
        if body is None:
            response = self.session.post(url)
        else:
            response = self.session.post(url, json=body)
        return self._decode(response)

    def post_file(self, url: str, field: str, filename: str) -> Any:
        """Upload the file at ``filename`` as multipart field ``field``."""
        with open(filename, "rb") as handle:
            response = self.session.post(
                url, files={field: (os.path.basename(filename), handle)}
            )
        return self._decode(response)

    def download(self, url: str) -> bytes:
        """Fetch an image; JSON answers are treated as platform errors."""
        response = self.session.get(url)
        response.raise_for_status()
        header = response.headers.get("Content-Type", "")
        if header.startswith("application/json"):
            data = response.json()
            WeappError.raise_for(data)
            return response.content
        if header.startswith("image"):
            return response.content
        raise ValueError("invalid response header: " + header)