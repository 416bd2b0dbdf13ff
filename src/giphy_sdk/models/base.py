"""Base model shared by SDK models."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class GiphyModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)
