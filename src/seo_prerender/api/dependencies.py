"""Dependency wiring for the FastAPI app.

Uses FastAPI's app.state pattern for storing service instances.

Pattern:
    - Collaborators built once per app in the lifespan
    - Dependency functions retrieve from request.app.state
    - Clean separation, no global mutable state
"""

from contextlib import asynccontextmanager
from dataclasses import dataclass
from typing import Annotated

from fastapi import Depends, FastAPI, Request

from seo_prerender.config import Settings
from seo_prerender.handlers import PrerenderHandler
from seo_prerender.protocols import BotDetector, HttpClient, ImageCodec
from seo_prerender.repositories import HttpxClient, PillowImageCodec, UserAgentBotDetector
from seo_prerender.services import ImageCacheService, MetadataService, PrerenderService


@dataclass
class Collaborators:
    """External capabilities injected into the app.

    Any field left as None gets the default library-backed implementation.
    """

    bot_detector: BotDetector | None = None
    http_client: HttpClient | None = None
    image_codec: ImageCodec | None = None


def build_handler(
    settings: Settings,
    http_client: HttpClient,
    image_codec: ImageCodec,
) -> PrerenderHandler:
    """Assemble services and handler around the given collaborators."""
    image_cache = ImageCacheService(http_client=http_client, codec=image_codec, settings=settings)
    image_cache.ensure_directory()

    prerender_service = PrerenderService.create(
        metadata_service=MetadataService(http_client=http_client, settings=settings),
        image_cache=image_cache,
        settings=settings,
    )
    return PrerenderHandler(prerender_service=prerender_service)


def get_handler(request: Request) -> PrerenderHandler:
    """Dependency injection for PrerenderHandler from app.state.

    Args:
        request: FastAPI Request object

    Returns:
        The PrerenderHandler instance from app.state

    Raises:
        RuntimeError: If handler is not initialized
    """
    handler = getattr(request.app.state, "prerender_handler", None)
    if handler is None:
        raise RuntimeError("PrerenderHandler not initialized. Check lifespan setup.")
    return handler


def get_bot_detector(app: FastAPI) -> BotDetector:
    detector = getattr(app.state, "bot_detector", None)
    if detector is None:
        raise RuntimeError("BotDetector not initialized. Check lifespan setup.")
    return detector


def make_lifespan(settings: Settings, collaborators: Collaborators):
    """Build the lifespan context manager for an app.

    Initializes all layers and stores them in app.state:
    1. Adapters (bot detector, HTTP client, image codec)
    2. Services and handler - stored in app.state.prerender_handler

    Cleanup:
        Closes the HTTP client and removes everything from app.state
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        http_client = collaborators.http_client or HttpxClient.create(timeout=settings.http_timeout)
        image_codec = collaborators.image_codec or PillowImageCodec()

        app.state.bot_detector = collaborators.bot_detector or UserAgentBotDetector()
        app.state.http_client = http_client
        app.state.prerender_handler = build_handler(settings, http_client, image_codec)

        print("✓ SEO prerender initialized")
        print(f"✓ App base URL: {settings.app_base_url or '(unset, prerendering disabled)'}")
        print(f"✓ API base URL: {settings.api_base_url or '(unset, prerendering disabled)'}")
        print(f"✓ SPA dist: {settings.spa_dist_dir}")
        print(f"✓ Image cache: {settings.image_dir}")

        yield

        await http_client.aclose()
        del app.state.prerender_handler
        del app.state.http_client
        del app.state.bot_detector
        print("✓ SEO prerender shut down")

    return lifespan


# Type alias for cleaner dependency injection
HandlerDep = Annotated[PrerenderHandler, Depends(get_handler)]
