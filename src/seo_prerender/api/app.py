from pathlib import Path

from fastapi import FastAPI, Request
from fastapi.staticfiles import StaticFiles

from seo_prerender.api.dependencies import Collaborators, HandlerDep, get_bot_detector, make_lifespan
from seo_prerender.config import Settings, configure_logging, get_settings
from seo_prerender.dto import HealthCheckResponse


def create_app(
    settings: Settings | None = None,
    collaborators: Collaborators | None = None,
) -> FastAPI:
    """Create the FastAPI application.

    Args:
        settings: Application settings. Defaults to the environment.
        collaborators: Bot detector, HTTP client and image codec overrides.

    Returns:
        The configured application
    """
    settings = settings or get_settings()
    collaborators = collaborators or Collaborators()

    app = FastAPI(
        title="SEO Prerender",
        description="Serves the SPA to visitors and SEO metadata pages to crawlers",
        version="0.1.0",
        lifespan=make_lifespan(settings, collaborators),
    )

    @app.middleware("http")
    async def tag_bots(request: Request, call_next):
        detector = get_bot_detector(request.app)
        request.state.is_bot = detector.is_bot(request.headers.get("user-agent", ""))
        return await call_next(request)

    # The image directory must exist before StaticFiles checks it
    Path(settings.image_dir).mkdir(parents=True, exist_ok=True)
    app.mount(
        settings.image_url_prefix,
        StaticFiles(directory=settings.image_dir),
        name="seo-images",
    )

    @app.get("/health", response_model=HealthCheckResponse)
    async def health(handler: HandlerDep) -> HealthCheckResponse:
        """Health check endpoint."""
        return await handler.health_check()

    @app.get("/{full_path:path}")
    async def catch_all(full_path: str, request: Request, handler: HandlerDep):
        """Serve static assets, the SPA, redirects or SEO pages."""
        return await handler.handle(request, full_path)

    return app


configure_logging()
app = create_app()


if __name__ == "__main__":
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "seo_prerender.api.app:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.api_reload,
    )
