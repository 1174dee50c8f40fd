"""
config.py — Runtime settings resolved from the environment.

Values come from the process environment, falling back to a ``.env`` file
found from the working directory upward (python-dotenv).  The environment is
never modified.  CLI flags override these values.
"""
from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping

from dotenv import dotenv_values, find_dotenv

DEFAULT_API_VERSION = "60.0"
DEFAULT_MAX_WORKERS = 8
DEFAULT_HTTP_TIMEOUT = 30


@dataclass(frozen=True)
class Settings:
    instance_url: str = ""
    access_token: str = ""
    api_version: str = DEFAULT_API_VERSION
    max_workers: int = DEFAULT_MAX_WORKERS
    http_timeout: int = DEFAULT_HTTP_TIMEOUT

    @property
    def has_env_session(self) -> bool:
        return bool(self.instance_url and self.access_token)


def _int_env(env: Mapping[str, str], name: str, default: int) -> int:
    raw = env.get(name, "").strip()
    if not raw:
        return default
    try:
        value = int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got '{raw}'")
    if value < 1:
        raise ValueError(f"{name} must be at least 1, got {value}")
    return value


def load_settings(dotenv: bool = True) -> Settings:
    """Build ``Settings`` from ``SF_*`` variables.

    Args:
        dotenv: Also read a ``.env`` file; process variables take precedence.

    Raises:
        ValueError: If a numeric variable is not a positive integer.
    """
    env: dict[str, str] = {}
    if dotenv:
        path = find_dotenv(usecwd=True)
        if path:
            env.update({k: v for k, v in dotenv_values(path).items() if v is not None})
    env.update(os.environ)
    return Settings(
        instance_url=env.get("SF_INSTANCE_URL", "").rstrip("/"),
        access_token=env.get("SF_ACCESS_TOKEN", ""),
        api_version=env.get("SF_API_VERSION", "").strip() or DEFAULT_API_VERSION,
        max_workers=_int_env(env, "SF_SOBJECT_MAX_WORKERS", DEFAULT_MAX_WORKERS),
        http_timeout=_int_env(env, "SF_HTTP_TIMEOUT", DEFAULT_HTTP_TIMEOUT),
    )
