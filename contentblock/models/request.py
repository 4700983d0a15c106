"""Models for requests submitted to the rule engine and the reactions it returns."""

import ipaddress
from functools import cached_property
from dataclasses import dataclass
from enum import Enum
from typing import ClassVar, Optional, Union
from urllib.parse import SplitResult, urlsplit, urlunsplit

from pydantic import BaseModel, ConfigDict, Field


class ResourceType(Enum):
    """The type of resource being requested."""

    DOCUMENT = "document"
    IMAGE = "image"
    STYLE_SHEET = "style-sheet"
    SCRIPT = "script"
    FONT = "font"
    RAW = "raw"  # Uncategorized requests (eg. XMLHttpRequest)
    SVG_DOCUMENT = "svg-document"
    MEDIA = "media"
    POPUP = "popup"


class LoadType(Enum):
    """Relationship of a request to the originating document."""

    FIRST_PARTY = "first-party"
    THIRD_PARTY = "third-party"


def _split(url: str) -> Optional[SplitResult]:
    try:
        return urlsplit(url)
    except ValueError:
        return None


def _canonicalize(url: str) -> str:
    """Lowercase the scheme and host, and give an empty hierarchical path a ``/``."""
    parts = _split(url)
    if parts is None:
        return url
    userinfo, at, host_port = parts.netloc.rpartition("@")
    netloc = f"{userinfo}{at}{host_port.lower()}"
    path = parts.path
    if netloc and not path:
        path = "/"
    return urlunsplit((parts.scheme.lower(), netloc, path, parts.query, parts.fragment))


def _domain_of(url: str) -> Optional[str]:
    """Extract the domain name of a URL.

    IP literals and URLs without a host have no domain.
    """
    parts = _split(url)
    host = parts.hostname if parts is not None else None
    if not host:
        return None
    try:
        ipaddress.ip_address(host)
    except ValueError:
        return host
    return None


class Request(BaseModel):
    """A request that could be filtered."""

    model_config = ConfigDict(frozen=True)

    url: str = Field(description="The requested URL")
    resource_type: ResourceType = Field(
        default=ResourceType.DOCUMENT,
        description="The resource type for which this request was initiated",
    )
    load_type: LoadType = Field(
        default=LoadType.FIRST_PARTY,
        description="Whether the request is same-origin with the originating document",
    )

    @cached_property
    def canonical_url(self) -> str:
        """The URL as matched against url filters."""
        return _canonicalize(self.url)

    @cached_property
    def host(self) -> Optional[str]:
        """Domain name of the requested URL, or None if it has none."""
        return _domain_of(self.url)

    def __str__(self) -> str:
        """Format as human-readable string."""
        return f"{self.url} ({self.resource_type.value}, {self.load_type.value})"


@dataclass(frozen=True)
class BlockReaction:
    """Block the request from starting."""

    kind: ClassVar[str] = "block"


@dataclass(frozen=True)
class BlockCookiesReaction:
    """Strip the HTTP cookies from the request."""

    kind: ClassVar[str] = "block-cookies"


@dataclass(frozen=True)
class HideMatchingElements:
    """Hide the elements matching a CSS selector in the originating document."""

    selector: str

    kind: ClassVar[str] = "hide-matching-elements"


Reaction = Union[BlockReaction, BlockCookiesReaction, HideMatchingElements]
