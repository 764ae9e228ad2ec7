"""
backend/scorecast/models/news.py

Purpose:
    News search result model. Provider `content` maps to `description`;
    `source` falls back to the URL host when the provider does not send one.

Dependencies:
    - pydantic
"""

from __future__ import annotations

from typing import Any
from urllib.parse import urlparse

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, model_validator


class NewsItem(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)

    title: str
    description: str | None = Field(
        default=None, validation_alias=AliasChoices("description", "content")
    )
    url: str
    source: str | None = None
    published_date: str | None = None

    @model_validator(mode="before")
    @classmethod
    def _default_source(cls, data: Any) -> Any:
        if isinstance(data, dict) and not data.get("source") and data.get("url"):
            host = urlparse(str(data["url"])).netloc
            if host:
                data = {**data, "source": host.removeprefix("www.")}
        return data

    @property
    def snippet(self) -> str:
        """Title, or description when the title is blank."""
        return self.title or self.description or ""
