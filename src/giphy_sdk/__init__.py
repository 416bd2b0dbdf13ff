"""GIPHY SDK — async Python client for the GIPHY REST API."""

from giphy_sdk.client import Client
from giphy_sdk.errors import GiphyDecodeError, GiphyError, GiphyHTTPError, GiphyNetworkError
from giphy_sdk.models.enums import MediaType, Rating
from giphy_sdk.request import RequestDescriptor

__all__ = [
    "Client",
    "GiphyDecodeError",
    "GiphyError",
    "GiphyHTTPError",
    "GiphyNetworkError",
    "MediaType",
    "Rating",
    "RequestDescriptor",
]
