"""Domain port definitions for adapters."""

from __future__ import annotations

from .references import ReferenceResolver
from .resources import ResourceCreator, ResourceFetcher, ResourceGateway, ResourceUpdater

__all__ = [
    "ReferenceResolver",
    "ResourceCreator",
    "ResourceFetcher",
    "ResourceGateway",
    "ResourceUpdater",
]
