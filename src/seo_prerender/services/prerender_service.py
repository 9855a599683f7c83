"""Prerender flow for a single request.

Decides between serving the SPA, redirecting a human visitor to the
canonical URL, and rendering the SEO page for a crawler.
"""

import logging

from seo_prerender.config import Settings
from seo_prerender.entities import PrerenderDecision
from seo_prerender.exceptions import UpstreamError
from seo_prerender.services.image_cache_service import ImageCacheService
from seo_prerender.services.metadata_service import MetadataService
from seo_prerender.services.page_renderer import render_page
from seo_prerender.services.routing import match_route

logger = logging.getLogger(__name__)


class PrerenderService:
    """Core request orchestration.

    The service is stateless between requests: every call to ``resolve``
    starts from scratch.

    Example:
        ```python
        service = PrerenderService.create(
            metadata_service=MetadataService(http_client, settings),
            image_cache=ImageCacheService(http_client, PillowImageCodec(), settings),
            settings=settings,
        )
        decision = await service.resolve("/products/ab12", is_bot=True, resolved=False)
        ```
    """

    def __init__(
        self,
        metadata_service: MetadataService,
        image_cache: ImageCacheService,
        settings: Settings,
    ) -> None:
        self._metadata = metadata_service
        self._images = image_cache
        self._settings = settings

    @classmethod
    def create(
        cls,
        metadata_service: MetadataService,
        image_cache: ImageCacheService,
        settings: Settings,
    ) -> "PrerenderService":
        """Factory method, mirrors the other services."""
        return cls(
            metadata_service=metadata_service,
            image_cache=image_cache,
            settings=settings,
        )

    @property
    def settings(self) -> Settings:
        return self._settings

    async def resolve(self, path: str, *, is_bot: bool, resolved: bool) -> PrerenderDecision:
        """Decide how to answer a request.

        Business logic:
        1. Resolved marker or missing base URLs -> SPA
        2. Human visitor without redirects enabled -> SPA
        3. No entity route -> SPA
        4. Human visitor -> redirect to the canonical URL
        5. Crawler -> fetch metadata (failure -> SPA), compress image, render

        Args:
            path: Request path
            is_bot: Bot classification of the requester
            resolved: Whether the ``resolved`` query parameter is present

        Returns:
            The decision for the handler to carry out
        """
        if resolved or not self._settings.prerender_enabled:
            return PrerenderDecision.serve_spa()

        if not is_bot and not self._settings.redirect_humans:
            return PrerenderDecision.serve_spa()

        ref = match_route(path)
        if ref is None:
            return PrerenderDecision.serve_spa()

        if not is_bot:
            return PrerenderDecision.redirect(self._metadata.canonical_url(ref))

        try:
            metadata = await self._metadata.fetch(ref)
        except UpstreamError as e:
            logger.warning("%s %s not found, serving SPA: %s", ref.kind.value, ref.identifier, e)
            return PrerenderDecision.serve_spa()

        compressed = await self._images.get_or_create(metadata.image)
        if compressed is not None:
            metadata = metadata.with_image(self._images.public_url(compressed))

        return PrerenderDecision.render(metadata)

    def render(self, decision: PrerenderDecision) -> str:
        """Render the HTML document for a RENDER decision."""
        if decision.metadata is None:
            raise ValueError("Only RENDER decisions carry page metadata")
        return render_page(
            decision.metadata,
            site_name=self._settings.site_name,
            default_image_url=self._settings.default_image_url,
            favicon_url=self._settings.favicon_url,
        )
