"""Error payloads returned by the GIPHY API."""

from __future__ import annotations

from pydantic import ConfigDict

from giphy_sdk.models.base import GiphyModel


class ErrorMeta(GiphyModel):
    model_config = ConfigDict(extra="allow")

    status: int | None = None
    msg: str | None = None
    response_id: str | None = None


class ErrorResponse(GiphyModel):
    """Either ``{"message": ...}`` or ``{"meta": {...}}``, sometimes both."""

    model_config = ConfigDict(extra="allow")

    message: str | None = None
    meta: ErrorMeta | None = None

    @property
    def text(self) -> str | None:
        if self.message:
            return self.message
        if self.meta is not None:
            return self.meta.msg
        return None
