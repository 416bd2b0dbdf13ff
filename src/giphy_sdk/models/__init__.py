"""SDK models."""

from giphy_sdk.models.base import GiphyModel
from giphy_sdk.models.enums import MediaType, Rating
from giphy_sdk.models.errors import ErrorMeta, ErrorResponse
from giphy_sdk.models.params import (
    CategoriesParams,
    GifsByIdsParams,
    PageParams,
    QueryParams,
    RandomParams,
    SearchParams,
    TranslateParams,
    TrendingParams,
)

__all__ = [
    "GiphyModel",
    # enums
    "MediaType",
    "Rating",
    # errors
    "ErrorMeta",
    "ErrorResponse",
    # params
    "CategoriesParams",
    "GifsByIdsParams",
    "PageParams",
    "QueryParams",
    "RandomParams",
    "SearchParams",
    "TranslateParams",
    "TrendingParams",
]
