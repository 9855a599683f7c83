"""HTTP handler for the catch-all SPA route.

Turns PrerenderDecisions into FastAPI responses. Nothing raised below this
layer reaches the client as a 5xx: the worst case is the SPA document.
"""

import logging
from pathlib import Path

from fastapi import Request, status
from fastapi.responses import FileResponse, HTMLResponse, PlainTextResponse, RedirectResponse, Response

from seo_prerender.dto import HealthCheckResponse
from seo_prerender.entities import DecisionKind
from seo_prerender.services import PrerenderService

logger = logging.getLogger(__name__)


class PrerenderHandler:
    """HTTP handler for SPA and crawler requests.

    Example:
        ```python
        handler = PrerenderHandler(prerender_service=service)

        @app.get("/{full_path:path}")
        async def catch_all(full_path: str, request: Request):
            return await handler.handle(request, full_path)
        ```
    """

    def __init__(self, prerender_service: PrerenderService) -> None:
        """Initialize the handler.

        Args:
            prerender_service: The prerender flow (required).
        """
        self._prerender = prerender_service
        self._dist_root = Path(prerender_service.settings.spa_dist_dir).resolve()
        self._index = self._dist_root / "index.html"

    async def handle(self, request: Request, full_path: str) -> Response:
        """Handle GET /{full_path} requests.

        Args:
            request: The incoming request, tagged with ``state.is_bot``
            full_path: Path captured by the catch-all route

        Returns:
            A static asset, the SPA document, a redirect or the SEO page
        """
        asset = self.static_asset(full_path)
        if asset is not None:
            return FileResponse(asset)

        try:
            decision = await self._prerender.resolve(
                full_path,
                is_bot=getattr(request.state, "is_bot", False),
                resolved="resolved" in request.query_params,
            )

            if decision.kind is DecisionKind.REDIRECT:
                return RedirectResponse(
                    decision.redirect_url,
                    status_code=status.HTTP_307_TEMPORARY_REDIRECT,
                )
            if decision.kind is DecisionKind.RENDER:
                return HTMLResponse(self._prerender.render(decision))

        except Exception:
            logger.exception("Error handling request for /%s, serving SPA", full_path)

        return self.serve_spa()

    def serve_spa(self) -> Response:
        """Return the SPA entry document."""
        if not self._index.is_file():
            logger.error("SPA entry document missing at %s", self._index)
            return PlainTextResponse("SPA build not found", status_code=status.HTTP_404_NOT_FOUND)
        return FileResponse(self._index, media_type="text/html")

    def static_asset(self, full_path: str) -> Path | None:
        """Resolve a file from the SPA build directory.

        Returns:
            The file path if it exists inside the build directory, None otherwise
        """
        relative = full_path.strip("/")
        if not relative:
            return None

        try:
            candidate = (self._dist_root / relative).resolve()
            if not candidate.is_relative_to(self._dist_root) or not candidate.is_file():
                return None
        except (OSError, ValueError):
            # Overlong segments and embedded NUL bytes cannot name a file
            return None
        return candidate

    async def health_check(self) -> HealthCheckResponse:
        """Handle GET /health requests."""
        settings = self._prerender.settings
        spa_available = self._index.is_file()

        return HealthCheckResponse(
            status="healthy" if spa_available else "degraded",
            spa_available=spa_available,
            prerender_enabled=settings.prerender_enabled,
            image_dir=settings.image_dir,
        )
