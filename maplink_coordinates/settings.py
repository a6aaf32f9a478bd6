"""Application configuration loading."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Final

from dotenv import load_dotenv

_DEFAULT_TIMEOUT: Final[float] = 10.0
_DEFAULT_CONCURRENCY: Final[int] = 4
_DEFAULT_USER_AGENT: Final[str] = "maplinkCoordinates/0.1.0"

_CACHED_SETTINGS: Settings | None = None


@dataclass(frozen=True)
class Settings:
    """Runtime configuration derived from environment variables."""

    timeout: float
    concurrency: int
    user_agent: str
    http_proxy: str | None
    https_proxy: str | None
    use_proxy: bool


_TRUE_VALUES: Final[set[str]] = {"1", "true", "yes", "on"}
_FALSE_VALUES: Final[set[str]] = {"0", "false", "no", "off"}


def _coerce_bool(value: str | None, *, default: bool) -> bool:
    """Convert common textual boolean representations to bool."""
    if value is None:
        return default
    normalized = value.strip().lower()
    if normalized in _TRUE_VALUES:
        return True
    if normalized in _FALSE_VALUES:
        return False
    return default


def get_settings(*, force_reload: bool = False) -> Settings:
    """Load configuration, optionally reloading from the environment."""
    global _CACHED_SETTINGS  # noqa: PLW0603
    if not force_reload and _CACHED_SETTINGS is not None:
        return _CACHED_SETTINGS

    dotenv_override = os.getenv("MAPLINK_DOTENV_PATH")
    if dotenv_override:
        load_dotenv(dotenv_override, override=True)
    else:
        dotenv_path = Path.cwd() / ".env"
        if dotenv_path.exists():
            load_dotenv(dotenv_path=dotenv_path)

    timeout = float(os.getenv("MAPLINK_TIMEOUT", _DEFAULT_TIMEOUT))
    concurrency = max(int(os.getenv("MAPLINK_CONCURRENCY", _DEFAULT_CONCURRENCY)), 1)
    user_agent = os.getenv("MAPLINK_USER_AGENT", _DEFAULT_USER_AGENT)
    http_proxy = os.getenv("MAPLINK_HTTP_PROXY") or None
    https_proxy = os.getenv("MAPLINK_HTTPS_PROXY") or None
    default_use_proxy = bool(http_proxy or https_proxy)
    use_proxy = _coerce_bool(
        os.getenv("MAPLINK_USE_PROXY"),
        default=default_use_proxy,
    )

    _CACHED_SETTINGS = Settings(
        timeout=timeout,
        concurrency=concurrency,
        user_agent=user_agent,
        http_proxy=http_proxy,
        https_proxy=https_proxy,
        use_proxy=use_proxy,
    )
    return _CACHED_SETTINGS
