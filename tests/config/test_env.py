from __future__ import annotations

import pytest

from seasonpy.config import (
    ConfigurationError,
    optional_env_flag,
    optional_env_var,
)


def test_optional_env_var_falls_back_on_blank(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("EXAMPLE_VAR", "  ")

    assert optional_env_var("EXAMPLE_VAR", "fallback") == "fallback"

    monkeypatch.setenv("EXAMPLE_VAR", " kitsu ")
    assert optional_env_var("EXAMPLE_VAR", "fallback") == "kitsu"


@pytest.mark.parametrize(
    ("raw", "expected"),
    [("1", True), ("Yes", True), ("on", True), ("0", False), ("false", False), ("OFF", False)],
)
def test_optional_env_flag_parses_booleans(
    monkeypatch: pytest.MonkeyPatch, raw: str, expected: bool
) -> None:
    monkeypatch.setenv("EXAMPLE_FLAG", raw)

    assert optional_env_flag("EXAMPLE_FLAG", default=not expected) is expected


def test_optional_env_flag_rejects_garbage(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("EXAMPLE_FLAG", "maybe")

    with pytest.raises(ConfigurationError, match="EXAMPLE_FLAG"):
        optional_env_flag("EXAMPLE_FLAG", default=True)
