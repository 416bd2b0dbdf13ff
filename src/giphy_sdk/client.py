"""High-level GIPHY client: one method per API endpoint."""

from __future__ import annotations

from collections.abc import Awaitable, Mapping, Sequence
from typing import Any

import httpx

from giphy_sdk.http import Callback, HTTPClient
from giphy_sdk.models.enums import MediaType, Rating
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
from giphy_sdk.request import RequestDescriptor

DEFAULT_BASE_URL = "https://api.giphy.com"


class Client:
    """Top-level SDK client.

    Every endpoint method returns an awaitable resolving to the decoded JSON
    body, or ``None`` when a ``callback`` is given, in which case
    ``callback(error, result)`` is invoked once the request settles::

        async with Client("my-api-key") as giphy:
            body = await giphy.search("gifs", "cats", limit=5)

            giphy.trending("stickers", callback=lambda err, res: ...)
    """

    def __init__(
        self,
        api_key: str,
        *,
        base_url: str = DEFAULT_BASE_URL,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._api_key = api_key
        self.http = HTTPClient(base_url, transport=transport)

    # --- Credentials ---

    @property
    def api_key(self) -> str:
        return self._api_key

    @api_key.setter
    def api_key(self, value: str) -> None:
        self._api_key = value

    def set_credentials(self, api_key: str) -> None:
        """Replace the API key used by every call issued from now on."""
        self._api_key = api_key

    def _request(
        self,
        operation: str,
        path: str,
        params: QueryParams | None,
        callback: Callback | None,
    ) -> Awaitable[Any] | None:
        request = RequestDescriptor.build(
            self.http.base_url,
            path,
            self._api_key,
            params.to_query() if params is not None else None,
        )
        return self.http.dispatch(request, operation, callback)

    # --- Endpoints shared by gifs and stickers ---

    def search(
        self,
        type: MediaType | str,
        q: str,
        *,
        limit: int | None = None,
        offset: int | None = None,
        rating: Rating | str | None = None,
        lang: str | None = None,
        callback: Callback | None = None,
    ) -> Awaitable[Any] | None:
        """Search for *q*.

        :param limit: number of results, at most 100 (API default 25)
        :param offset: results offset (API default 0)
        :param rating: only return results rated at or below this
        :param lang: 2-letter ISO 639-1 language code for regional content
        """
        params = SearchParams(q=q, limit=limit, offset=offset, rating=rating, lang=lang)
        return self._request("search", f"/v1/{_segment(type)}/search", params, callback)

    def trending(
        self,
        type: MediaType | str,
        *,
        limit: int | None = None,
        offset: int | None = None,
        rating: Rating | str | None = None,
        callback: Callback | None = None,
    ) -> Awaitable[Any] | None:
        """Currently trending media."""
        params = TrendingParams(limit=limit, offset=offset, rating=rating)
        return self._request("trending", f"/v1/{_segment(type)}/trending", params, callback)

    def translate(
        self,
        type: MediaType | str,
        s: str | None = None,
        *,
        rating: Rating | str | None = None,
        lang: str | None = None,
        callback: Callback | None = None,
    ) -> Awaitable[Any] | None:
        """A single result translated from the term *s*."""
        params = TranslateParams(s=s, rating=rating, lang=lang)
        return self._request("translate", f"/v1/{_segment(type)}/translate", params, callback)

    def random(
        self,
        type: MediaType | str,
        *,
        tag: str | None = None,
        rating: Rating | str | None = None,
        callback: Callback | None = None,
    ) -> Awaitable[Any] | None:
        """A random result, optionally limited to *tag*."""
        params = RandomParams(tag=tag, rating=rating)
        return self._request("random", f"/v1/{_segment(type)}/random", params, callback)

    # --- GIF-only endpoints ---

    def gif_by_id(self, id: str, *, callback: Callback | None = None) -> Awaitable[Any] | None:
        return self._request("gif_by_id", f"/v1/gifs/{id}", None, callback)

    def gifs_by_ids(
        self,
        ids: Sequence[str],
        *,
        callback: Callback | None = None,
    ) -> Awaitable[Any] | None:
        """Several GIFs at once.

        A sequence of *ids* is sent comma-joined and an empty one sends ``ids=``.
        A string is sent unchanged.
        """
        params = GifsByIdsParams(ids=ids)
        return self._request("gifs_by_ids", "/v1/gifs", params, callback)

    def categories_for_gifs(
        self,
        *,
        sort: str | None = None,
        limit: int | None = None,
        offset: int | None = None,
        callback: Callback | None = None,
    ) -> Awaitable[Any] | None:
        params = CategoriesParams(sort=sort, limit=limit, offset=offset)
        return self._request("categories_for_gifs", "/v1/gifs/categories", params, callback)

    def subcategories_for_gifs(
        self,
        subcategory: str,
        *,
        limit: int | None = None,
        offset: int | None = None,
        callback: Callback | None = None,
    ) -> Awaitable[Any] | None:
        params = PageParams(limit=limit, offset=offset)
        return self._request(
            "subcategories_for_gifs",
            f"/v1/gifs/categories/{subcategory}",
            params,
            callback,
        )

    def gifs_by_categories(
        self,
        category: str,
        subcategory: str,
        *,
        limit: int | None = None,
        offset: int | None = None,
        callback: Callback | None = None,
    ) -> Awaitable[Any] | None:
        params = PageParams(limit=limit, offset=offset)
        return self._request(
            "gifs_by_categories",
            f"/v1/gifs/categories/{category}/{subcategory}",
            params,
            callback,
        )

    # --- Queries ---

    def term_suggestions(
        self,
        term: str,
        params: Mapping[str, Any] | None = None,
        *,
        callback: Callback | None = None,
    ) -> Awaitable[Any] | None:
        """Terms similar to *term*.

        Only the API key is sent: *params* is accepted so call sites can pass
        the same options bag as for the other endpoints, and is dropped.
        """
        return self._request("term_suggestions", f"/v1/queries/suggest/{term}", None, callback)

    # --- Context manager ---

    async def close(self) -> None:
        await self.http.close()

    async def __aenter__(self) -> Client:
        return self

    async def __aexit__(self, *exc: Any) -> None:
        await self.close()


def _segment(type: MediaType | str) -> str:
    return type.value if isinstance(type, MediaType) else type
