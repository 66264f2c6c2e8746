"""Transforms applied around every outbound request.

``BEFORES`` run over each ``Request`` before it is sent and ``AFTERS`` over
each ``Response`` before a handler sees it, both in list order.
"""
from __future__ import annotations

from typing import TYPE_CHECKING

from .errors import AuthenticationError
from .http import Request, Response

if TYPE_CHECKING:
    from .runtime import Bundle, ZObject


AUTH_FAILED_MESSAGE = "The API Key you supplied is incorrect"


def include_api_key(request: Request, z: "ZObject", bundle: "Bundle") -> Request:
    api_key = (bundle.auth_data or {}).get("apiKey")
    if api_key:
        request.headers = request.headers or {}
        request.headers["Authorization"] = f"Bearer {api_key}"
    return request


def handle_bad_responses(response: Response, z: "ZObject", bundle: "Bundle") -> Response:
    # Other error statuses mean different things per endpoint; handlers decide.
    if response.status == 401:
        raise AuthenticationError(AUTH_FAILED_MESSAGE, status=response.status)
    return response


BEFORES = [include_api_key]

AFTERS = [handle_bad_responses]
