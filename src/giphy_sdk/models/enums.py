"""String enums for path and query discriminators."""

from __future__ import annotations

from enum import Enum


class MediaType(str, Enum):
    GIFS = "gifs"
    STICKERS = "stickers"


class Rating(str, Enum):
    Y = "y"
    G = "g"
    PG = "pg"
    PG_13 = "pg-13"
    R = "r"
