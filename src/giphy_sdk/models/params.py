"""Per-operation query parameter models.

Each model lists the options its endpoint recognises.  The API key is not a
field on any of them: it is appended when the request descriptor is built.
"""

from __future__ import annotations

from typing import Any

from pydantic import ConfigDict, field_validator

from giphy_sdk.models.base import GiphyModel
from giphy_sdk.models.enums import Rating


class QueryParams(GiphyModel):
    model_config = ConfigDict(extra="forbid")

    def to_query(self) -> dict[str, Any]:
        """Dump the fields that were set, in wire form."""
        return self.model_dump(mode="json", exclude_none=True)


class PageParams(QueryParams):
    limit: int | None = None
    offset: int | None = None


class SearchParams(PageParams):
    q: str
    rating: Rating | None = None
    lang: str | None = None


class TrendingParams(PageParams):
    rating: Rating | None = None


class TranslateParams(QueryParams):
    s: str | None = None
    rating: Rating | None = None
    lang: str | None = None


class RandomParams(QueryParams):
    tag: str | None = None
    rating: Rating | None = None


class GifsByIdsParams(QueryParams):
    ids: str

    @field_validator("ids", mode="before")
    @classmethod
    def _join_ids(cls, value: Any) -> Any:
        if isinstance(value, str):
            return value
        return ",".join(str(v) for v in value)


class CategoriesParams(PageParams):
    sort: str | None = None
