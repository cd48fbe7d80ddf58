"""Pydantic v2 models for the casino content collections.

Wire names are camelCase (``imageUrl``, ``isPopular``...); Python attributes
are snake_case. Every model is frozen and every collection is a tuple: the
dataset is loaded once and never mutated. Serialize with
``by_alias=True, exclude_none=True`` so unset optional flags stay absent
instead of becoming ``null``.
"""

from __future__ import annotations

import re
from datetime import date
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from pydantic.alias_generators import to_camel


class Volatility(str, Enum):
    """Qualitative payout variance of a game."""

    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"
    MEDIUM_LOW = "Medium-Low"
    MEDIUM_HIGH = "Medium-High"


class _ContentModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
        extra="forbid",
    )

    @field_validator("id", "title", check_fields=False)
    @classmethod
    def validate_id_title(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("must not be empty")
        return v


_ISO_DATE = re.compile(r"\d{4}-\d{2}-\d{2}")


def _require_iso_date(v: str) -> str:
    if not _ISO_DATE.fullmatch(v):
        raise ValueError(f"{v!r} is not a YYYY-MM-DD date")
    try:
        date.fromisoformat(v)
    except ValueError:
        raise ValueError(f"{v!r} is not a valid ISO date") from None
    return v


class CasinoGame(_ContentModel):
    id: str
    title: str
    provider: str
    categories: tuple[str, ...] = Field(..., min_length=1)
    image_url: str
    description: str
    rtp: float = Field(..., gt=0, le=100)  # return-to-player percentage
    volatility: Volatility
    is_new: bool | None = None
    is_popular: bool | None = None

    @field_validator("provider", "image_url", "description")
    @classmethod
    def validate_text(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("must not be empty")
        return v

    @field_validator("categories")
    @classmethod
    def validate_categories(cls, v: tuple[str, ...]) -> tuple[str, ...]:
        if any(not c.strip() for c in v):
            raise ValueError("categories must be non-empty strings")
        return v

    def matches_search(self, term: str) -> bool:
        """Case-insensitive substring match on title, description or provider."""
        if not term:
            return True
        needle = term.lower()
        return (
            needle in self.title.lower()
            or needle in self.description.lower()
            or needle in self.provider.lower()
        )

    def in_any_category(self, categories) -> bool:
        """True when no categories are given or the game carries at least one."""
        if not categories:
            return True
        return any(c in self.categories for c in categories)


class Promotion(_ContentModel):
    id: str
    title: str
    snippet: str
    full_terms: str
    image_url: str
    expiry_date: str  # ISO 8601 calendar date

    @field_validator("snippet", "full_terms", "image_url")
    @classmethod
    def validate_text(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("must not be empty")
        return v

    @field_validator("expiry_date")
    @classmethod
    def validate_expiry_date(cls, v: str) -> str:
        return _require_iso_date(v)


class NewsItem(_ContentModel):
    id: str
    title: str
    snippet: str
    full_content: str
    date: str  # ISO 8601 calendar date
    tags: tuple[str, ...] = ()

    @field_validator("snippet", "full_content")
    @classmethod
    def validate_text(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("must not be empty")
        return v

    @field_validator("date")
    @classmethod
    def validate_date(cls, v: str) -> str:
        return _require_iso_date(v)

    @field_validator("tags")
    @classmethod
    def validate_tags(cls, v: tuple[str, ...]) -> tuple[str, ...]:
        if any(not t.strip() for t in v):
            raise ValueError("tags must be non-empty strings")
        return v


def _duplicate_ids(items) -> list[str]:
    seen: set[str] = set()
    dupes: list[str] = []
    for item in items:
        if item.id in seen:
            dupes.append(item.id)
        seen.add(item.id)
    return dupes


class CasinoContent(_ContentModel):
    """The full dataset: three keyed collections in insertion order."""

    casino_games: tuple[CasinoGame, ...]
    promotions: tuple[Promotion, ...]
    casino_news: tuple[NewsItem, ...]

    @model_validator(mode="after")
    def validate_unique_ids(self) -> "CasinoContent":
        for name, items in (
            ("casinoGames", self.casino_games),
            ("promotions", self.promotions),
            ("casinoNews", self.casino_news),
        ):
            dupes = _duplicate_ids(items)
            if dupes:
                raise ValueError(f"duplicate ids in {name}: {', '.join(dupes)}")
        return self

    def to_wire(self) -> dict:
        """JSON-ready dict with camelCase keys and unset flags omitted."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)
