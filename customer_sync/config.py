from __future__ import annotations

from dataclasses import dataclass
import os

from customer_sync.domain.contracts import CUSTOMERS_COLLECTION_PATH

DEFAULT_BASE_URL = "http://localhost:8000"
DEFAULT_TIMEOUT_SECONDS = 30.0


@dataclass(frozen=True)
class ClientSettings:
    base_url: str = DEFAULT_BASE_URL
    collection_path: str = CUSTOMERS_COLLECTION_PATH
    timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS


def client_settings_from_env() -> ClientSettings:
    return ClientSettings(
        base_url=_env_str("CUSTOMERS_API_BASE_URL", DEFAULT_BASE_URL),
        collection_path=_env_path("CUSTOMERS_API_COLLECTION_PATH", CUSTOMERS_COLLECTION_PATH),
        timeout_seconds=_env_float("CUSTOMERS_API_TIMEOUT_SECONDS", DEFAULT_TIMEOUT_SECONDS),
    )


def _env_str(name: str, default: str) -> str:
    value = os.getenv(name)
    if value is None or not value.strip():
        return default
    return value.strip()


def _env_path(name: str, default: str) -> str:
    value = _env_str(name, default)
    return value if value.startswith("/") else default


def _env_float(name: str, default: float) -> float:
    value = os.getenv(name)
    if value is None:
        return default

    try:
        parsed = float(value)
    except ValueError:
        return default

    return parsed if parsed > 0 else default
