"""Request and reaction models."""

from .request import (
    BlockCookiesReaction,
    BlockReaction,
    HideMatchingElements,
    LoadType,
    Reaction,
    Request,
    ResourceType,
)

__all__ = [
    "BlockCookiesReaction",
    "BlockReaction",
    "HideMatchingElements",
    "LoadType",
    "Reaction",
    "Request",
    "ResourceType",
]
