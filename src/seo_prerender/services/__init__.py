"""Service layer for business logic.

This layer contains the prerender flow and its building blocks.
Services depend on protocols (interfaces), not concrete implementations,
making them testable with in-memory fakes.

Architecture:
    Handler -> PrerenderService -> MetadataService / ImageCacheService -> Protocols
    (HTTP)  -> (Flow)           -> (Business)                         -> (Adapters)
"""

from .image_cache_service import ImageCacheService, cache_key
from .metadata_service import MetadataService
from .page_renderer import render_page
from .prerender_service import PrerenderService
from .routing import ROUTE_PATTERNS, match_route, normalize_path

__all__ = [
    "ImageCacheService",
    "MetadataService",
    "PrerenderService",
    "ROUTE_PATTERNS",
    "cache_key",
    "match_route",
    "normalize_path",
    "render_page",
]
