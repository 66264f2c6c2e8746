"""Request/response primitives shared by the middleware and the runtime."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Optional

import httpx

from .errors import ResponseError


_REDACTED = "[redacted]"
_SENSITIVE_HEADERS = {"authorization"}


@dataclass
class Request:
    url: str
    method: str = "GET"
    params: Dict[str, Any] = field(default_factory=dict)
    headers: Dict[str, str] = field(default_factory=dict)
    json: Any = None

    def redacted_headers(self) -> Dict[str, str]:
        return {
            name: _REDACTED if name.lower() in _SENSITIVE_HEADERS else value
            for name, value in self.headers.items()
        }

    def to_httpx(self) -> httpx.Request:
        kwargs: Dict[str, Any] = {
            "params": {key: value for key, value in self.params.items() if value is not None},
            "headers": self.headers,
        }
        if self.json is not None:
            kwargs["json"] = self.json
        return httpx.Request(self.method.upper(), self.url, **kwargs)


class Response:
    """Wraps an ``httpx.Response`` with the fields handlers read."""

    def __init__(self, raw: httpx.Response, request: Request) -> None:
        self._raw = raw
        self.request = request

    @property
    def status(self) -> int:
        return self._raw.status_code

    @property
    def headers(self) -> httpx.Headers:
        return self._raw.headers

    @property
    def content(self) -> str:
        return self._raw.text

    @property
    def data(self) -> Any:
        """Parsed JSON body, ``None`` when the body is empty.

        Malformed JSON raises ``ValueError`` with the decoder's message.
        """
        if not self.content:
            return None
        return self._raw.json()

    @property
    def ok(self) -> bool:
        return 200 <= self.status < 300

    def throw_for_status(self) -> "Response":
        if self.ok:
            return self
        message = (
            f"Got {self.status} calling {self.request.method.upper()} {self.request.url}, "
            f"expected 2xx.\nWhat happened:\n  {self.content or '(empty body)'}"
        )
        raise ResponseError(message, status=self.status, content=self.content)

    def __repr__(self) -> str:
        return f"Response(status={self.status}, url={self.request.url!r})"


def truncate(value: Optional[str], limit: int = 200) -> str:
    if not value:
        return ""
    return value[:limit]
