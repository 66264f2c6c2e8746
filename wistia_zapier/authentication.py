"""Custom API-key authentication for Wistia."""
from __future__ import annotations

import re
from typing import Any

from .config import settings
from .errors import AppError
from .runtime import Bundle, ZObject
from .schema import AuthField, Authentication


_LABEL_TOKEN = re.compile(r"\{\{\s*([\w.]+)\s*\}\}")


async def verify_api_key(z: ZObject, bundle: Bundle) -> Any:
    # Wistia has no "whoami" endpoint; every account can list one media.
    response = await z.request(
        url=f"{settings.api_base_url}/medias.json",
        params={"per_page": 1},
    )
    if response.status != 200:
        raise AppError("Authentication failed. Please check your API token.", status=response.status)
    return response.data


def render_connection_label(template: str, result: Any) -> str:
    """Fill ``{{key}}`` tokens from the auth test result.

    A ``json.`` prefix is accepted. When the result is a list the first
    record is used; unknown keys render as empty strings.
    """
    if isinstance(result, list):
        result = result[0] if result else {}
    if not isinstance(result, dict):
        result = {}

    def _lookup(match: "re.Match[str]") -> str:
        path = match.group(1)
        if path.startswith("json."):
            path = path[len("json."):]
        value: Any = result
        for part in path.split("."):
            if not isinstance(value, dict):
                return ""
            value = value.get(part)
        return "" if value is None else str(value)

    return _LABEL_TOKEN.sub(_lookup, template).strip()


authentication = Authentication(
    type="custom",
    fields=(
        AuthField(
            key="apiKey",
            label=(
                "Go to the [API Key details](https://tenant.wistia.com/account/api) screen from your\n"
                "Website Dashboard to find your API Key. Use subdomain instead of tenant."
            ),
            required=True,
        ),
    ),
    test=verify_api_key,
    connection_label="{{name}}",
)
