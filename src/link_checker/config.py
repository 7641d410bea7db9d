"""Runtime settings for the link checker.

Values come from ``LINK_CHECKER_*`` environment variables; a ``.env`` file in
the working directory is loaded first without overriding the real
environment. Command line flags take precedence over these settings.
"""
from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional

from dotenv import find_dotenv, load_dotenv

DEFAULT_TIMEOUT = 10.0
DEFAULT_USER_AGENT = "link-checker/0.1"

_FALSE_VALUES = {"0", "false", "no", "off"}


def _read_float(env: Mapping[str, str], name: str, default: float) -> float:
    raw = env.get(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return float(raw)
    except ValueError as exc:
        raise ValueError(f"{name} must be a number, got {raw!r}") from exc


def _read_optional_int(env: Mapping[str, str], name: str) -> Optional[int]:
    raw = env.get(name)
    if raw is None or raw.strip() == "":
        return None
    try:
        value = int(raw)
    except ValueError as exc:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from exc
    # 0 means no cap
    return value or None


def _read_flag(env: Mapping[str, str], name: str, default: bool) -> bool:
    raw = env.get(name)
    if raw is None or raw.strip() == "":
        return default
    return raw.strip().lower() not in _FALSE_VALUES


@dataclass
class Settings:
    timeout: float = DEFAULT_TIMEOUT
    user_agent: str = DEFAULT_USER_AGENT
    max_concurrency: Optional[int] = None
    follow_redirects: bool = True

    @classmethod
    def from_env(
        cls, env: Mapping[str, str] | None = None, load_env_file: bool = True
    ) -> "Settings":
        if env is None:
            if load_env_file:
                load_dotenv(find_dotenv(usecwd=True), override=False)
            env = os.environ
        return cls(
            timeout=_read_float(env, "LINK_CHECKER_TIMEOUT", DEFAULT_TIMEOUT),
            user_agent=env.get("LINK_CHECKER_USER_AGENT") or DEFAULT_USER_AGENT,
            max_concurrency=_read_optional_int(env, "LINK_CHECKER_MAX_CONCURRENCY"),
            follow_redirects=_read_flag(env, "LINK_CHECKER_FOLLOW_REDIRECTS", True),
        )
