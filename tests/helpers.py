import asyncio
from typing import Any, Callable, List

import httpx

from wistia_zapier.runtime import Bundle, BundleMeta


API_BASE = "https://api.wistia.com/v1"


class RecordingHandler:
    def __init__(self, handler: Callable[[httpx.Request], httpx.Response]) -> None:
        self._handler = handler
        self.requests: List[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self._handler(request)


def json_response(status: int, payload: Any) -> Callable[[httpx.Request], httpx.Response]:
    return lambda request: httpx.Response(status, json=payload)


def text_response(status: int, text: str) -> Callable[[httpx.Request], httpx.Response]:
    return lambda request: httpx.Response(status, text=text)


def run(coro: Any) -> Any:
    return asyncio.run(coro)


def make_bundle(input_data: dict | None = None, dropdown: bool = False, api_key: str = "secret-key") -> Bundle:
    return Bundle(
        auth_data={"apiKey": api_key} if api_key else {},
        input_data=input_data or {},
        meta=BundleMeta(is_filling_dynamic_dropdown=dropdown),
    )
