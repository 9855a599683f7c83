"""SEO Prerender - Serve an SPA to visitors and metadata pages to crawlers.

This package provides a layered architecture for crawler prerendering:

Layers:
    - protocols: Interface contracts (BotDetector, HttpClient, ImageCodec)
    - repositories: Library adapters (user-agents, httpx, Pillow)
    - services: Business logic (routing, metadata, image cache, prerender flow)
    - handlers: HTTP endpoint handlers
    - dto: Data transfer objects (upstream and API contracts)
    - entities: Domain models (internal)

Usage:
    ```python
    from seo_prerender.api.app import create_app

    app = create_app()
    ```
"""

from seo_prerender.config import Settings, get_settings
from seo_prerender.dto import BusinessDetails, DetailsEnvelope, ProductDetails
from seo_prerender.entities import EntityKind, EntityRef, PageMetadata, PrerenderDecision
from seo_prerender.exceptions import ImageProcessingError, PrerenderError, UpstreamError
from seo_prerender.handlers import PrerenderHandler
from seo_prerender.protocols import BotDetector, HttpClient, ImageCodec
from seo_prerender.repositories import HttpxClient, PillowImageCodec, UserAgentBotDetector
from seo_prerender.services import (
    ImageCacheService,
    MetadataService,
    PrerenderService,
    match_route,
)

__all__ = [
    # Configuration
    "Settings",
    "get_settings",
    # Protocols (interfaces)
    "BotDetector",
    "HttpClient",
    "ImageCodec",
    # Services (business logic)
    "ImageCacheService",
    "MetadataService",
    "PrerenderService",
    "match_route",
    # Handlers (HTTP)
    "PrerenderHandler",
    # Repositories (adapters)
    "HttpxClient",
    "PillowImageCodec",
    "UserAgentBotDetector",
    # Entities (domain models)
    "EntityKind",
    "EntityRef",
    "PageMetadata",
    "PrerenderDecision",
    # DTOs (contracts)
    "DetailsEnvelope",
    "ProductDetails",
    "BusinessDetails",
    # Errors
    "PrerenderError",
    "UpstreamError",
    "ImageProcessingError",
]
