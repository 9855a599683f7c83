import logging
import os
from dataclasses import dataclass, field
from functools import lru_cache

from dotenv import load_dotenv

load_dotenv()


def _env_url(name: str) -> str | None:
    value = os.getenv(name)
    if not value:
        return None
    return value.rstrip("/")


def _env_bool(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() in ("1", "true", "yes")


@dataclass(frozen=True)
class Settings:
    """Application settings loaded from environment variables."""

    # Public SPA and backend API roots; prerendering is disabled without them
    app_base_url: str | None = field(default_factory=lambda: _env_url("APP_BASE_URL"))
    api_base_url: str | None = field(default_factory=lambda: _env_url("API_BASE_URL"))

    # SPA build output
    spa_dist_dir: str = field(default_factory=lambda: os.getenv("SPA_DIST_DIR", "app/dist"))

    # Compressed Open Graph images
    image_dir: str = field(
        default_factory=lambda: os.getenv("SEO_IMAGE_DIR", "/tmp/greep-seo-images")
    )
    image_url_prefix: str = field(
        default_factory=lambda: os.getenv("SEO_IMAGE_URL_PREFIX", "/seo-img").rstrip("/")
    )
    og_image_width: int = field(default_factory=lambda: int(os.getenv("OG_IMAGE_WIDTH", "1200")))
    og_image_height: int = field(default_factory=lambda: int(os.getenv("OG_IMAGE_HEIGHT", "630")))
    og_image_quality: int = field(default_factory=lambda: int(os.getenv("OG_IMAGE_QUALITY", "70")))

    # Page content
    site_name: str = field(default_factory=lambda: os.getenv("SITE_NAME", "GreepPay"))
    default_image_url: str = field(
        default_factory=lambda: os.getenv("DEFAULT_IMAGE_URL", "https://greep.io/")
    )
    favicon_url: str = field(default_factory=lambda: os.getenv("FAVICON_URL", "https://greep.io/"))

    # Behaviour
    redirect_humans: bool = field(default_factory=lambda: _env_bool("REDIRECT_HUMANS", "true"))
    http_timeout: float = field(default_factory=lambda: float(os.getenv("HTTP_TIMEOUT", "10")))

    # API
    api_host: str = field(default_factory=lambda: os.getenv("API_HOST", "0.0.0.0"))
    api_port: int = field(default_factory=lambda: int(os.getenv("API_PORT", "8080")))
    api_reload: bool = field(default_factory=lambda: _env_bool("API_RELOAD", "false"))

    log_level: str = field(default_factory=lambda: os.getenv("LOG_LEVEL", "INFO").upper())

    @property
    def prerender_enabled(self) -> bool:
        """Check if both base URLs are configured.

        Returns:
            True if bot-specific rendering can run, False otherwise
        """
        return bool(self.app_base_url) and bool(self.api_base_url)

    def __post_init__(self) -> None:
        """Validate settings after initialization."""
        if self.og_image_width <= 0 or self.og_image_height <= 0:
            raise ValueError("OG_IMAGE_WIDTH and OG_IMAGE_HEIGHT must be positive")

        if not 1 <= self.og_image_quality <= 95:
            raise ValueError(
                f"OG_IMAGE_QUALITY must be between 1 and 95, got {self.og_image_quality}"
            )

        if self.http_timeout <= 0:
            raise ValueError("HTTP_TIMEOUT must be positive")


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


def configure_logging(level: str | None = None) -> None:
    """Configure the root logger once with a timestamped format."""
    logging.basicConfig(
        level=getattr(logging, (level or get_settings().log_level), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
