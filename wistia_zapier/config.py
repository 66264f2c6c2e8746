"""Configuration loading for the Wistia app runtime."""
from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv


load_dotenv()


def _get_float(name: str, default: float) -> float:
    value = os.getenv(name)
    if value is None or value == "":
        return default
    try:
        return float(value)
    except ValueError as exc:
        raise ValueError(f"Invalid float for {name}: {value}") from exc


def _get_str(name: str, default: str) -> str:
    value = os.getenv(name)
    if value is None or value == "":
        return default
    return value


def _get_optional_str(name: str) -> Optional[str]:
    value = os.getenv(name)
    if value is None or value == "":
        return None
    return value


@dataclass(frozen=True)
class Settings:
    api_base_url: str
    api_key: Optional[str]
    request_timeout_s: float
    log_level: str

    @classmethod
    def load(cls) -> "Settings":
        return cls(
            api_base_url=_get_str("WISTIA_API_BASE_URL", "https://api.wistia.com/v1").rstrip("/"),
            api_key=_get_optional_str("WISTIA_API_KEY"),
            request_timeout_s=_get_float("REQUEST_TIMEOUT_S", 30.0),
            log_level=_get_str("LOG_LEVEL", "INFO").upper(),
        )


settings = Settings.load()
