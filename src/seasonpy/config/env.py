"""Environment variable loaders for configuration."""

from __future__ import annotations

import os

from .errors import ConfigurationError

_TRUE_VALUES = frozenset({"1", "true", "yes", "on"})
_FALSE_VALUES = frozenset({"0", "false", "no", "off"})


def optional_env_var(name: str, default: str) -> str:
    """Return an environment variable, falling back to ``default`` when blank."""

    value = os.getenv(name)
    if value is None or not value.strip():
        return default
    return value.strip()


def optional_env_flag(name: str, default: bool) -> bool:  # noqa: FBT001
    value = os.getenv(name)
    if value is None or not value.strip():
        return default
    normalized = value.strip().lower()
    if normalized in _TRUE_VALUES:
        return True
    if normalized in _FALSE_VALUES:
        return False
    raise ConfigurationError(f"Invalid boolean for {name}: {value!r}")
