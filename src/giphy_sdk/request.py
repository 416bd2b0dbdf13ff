"""Outgoing request descriptors."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any
from urllib.parse import urlsplit

API_KEY_PARAM = "api_key"


@dataclass(frozen=True)
class RequestDescriptor:
    """A fully assembled GET request, built once per call."""

    url: str
    params: Mapping[str, Any] = field(default_factory=dict)
    method: str = "GET"

    @classmethod
    def build(
        cls,
        base_url: str,
        path: str,
        api_key: str,
        params: Mapping[str, Any] | None = None,
    ) -> RequestDescriptor:
        """Join *base_url* and *path* and attach the credential.

        A caller-supplied ``api_key`` is discarded.  Placing the key first is
        cosmetic.  Path segments are not escaped.
        """
        query: dict[str, Any] = {API_KEY_PARAM: api_key}
        for name, value in (params or {}).items():
            if name != API_KEY_PARAM:
                query[name] = value
        return cls(
            url=base_url.rstrip("/") + path,
            params=MappingProxyType(query),
        )

    @property
    def path(self) -> str:
        """The URL without scheme and host, safe to log."""
        return urlsplit(self.url).path
