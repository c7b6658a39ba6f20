"""Pydantic models describing the raw season file payloads."""

from __future__ import annotations

from datetime import UTC, datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator


def _strip(value: object) -> object:
    if isinstance(value, str):
        return value.strip()
    if value is None:
        return ""
    return value


class SeasonFileBaseModel(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)


class IdPayload(SeasonFileBaseModel):
    name: str
    value: str = ""

    _normalize = field_validator("name", "value", mode="before")(_strip)


class AnimePayload(SeasonFileBaseModel):
    ids: list[IdPayload] = Field(default_factory=list["IdPayload"])
    title: str = ""
    type: int = 0
    image: str = ""
    trailer: str = ""
    producers: tuple[str, ...] = ()

    _normalize = field_validator("title", "image", "trailer", mode="before")(_strip)

    @field_validator("type", mode="before")
    @classmethod
    def _parse_type(cls, value: object) -> int:
        if isinstance(value, int):
            return value
        try:
            return int(str(value).strip())
        except ValueError:
            return 0

    @field_validator("producers", mode="before")
    @classmethod
    def _split_producers(cls, value: object) -> object:
        if value is None:
            return ()
        if isinstance(value, str):
            return tuple(part.strip() for part in value.split(",") if part.strip())
        return value


class InfoPayload(SeasonFileBaseModel):
    name: str = ""
    modified: int = 0

    _normalize = field_validator("name", mode="before")(_strip)

    @field_validator("modified", mode="before")
    @classmethod
    def _parse_modified(cls, value: object) -> int:
        if isinstance(value, int):
            return value
        text = str(value or "").strip()
        if not text:
            return 0
        try:
            return int(text)
        except ValueError:
            pass
        try:
            normalized = text[:-1] + "+00:00" if text.endswith("Z") else text
            parsed = datetime.fromisoformat(normalized)
        except ValueError:
            return 0
        if parsed.tzinfo is None:
            parsed = parsed.replace(tzinfo=UTC)
        return int(parsed.timestamp())
