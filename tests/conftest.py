"""
Shared pytest fixtures for the SEO prerender tests.
"""

import hashlib
from typing import Any

import pytest
from fastapi.testclient import TestClient

from seo_prerender.api.app import create_app
from seo_prerender.api.dependencies import Collaborators
from seo_prerender.config import Settings
from seo_prerender.exceptions import ImageProcessingError, UpstreamError
from seo_prerender.services import ImageCacheService, MetadataService, PrerenderService

APP_BASE_URL = "https://app.example.com"
API_BASE_URL = "https://api.example.com"
SPA_HTML = "<!DOCTYPE html><html><body><div id=\"app\">spa shell</div></body></html>"

PRODUCT_ID = "3f2a-9b1c-77de"
BUSINESS_ID = "c0ffee-42"
IMAGE_URL = "https://cdn.example.com/products/shoe.png"


class FakeBotDetector:
    """Treats any user agent mentioning 'bot' as a crawler."""

    def is_bot(self, user_agent: str) -> bool:
        return "bot" in user_agent.lower()


class FakeHttpClient:
    """In-memory HttpClient keyed by URL, recording every call."""

    def __init__(self) -> None:
        self.json_responses: dict[str, Any] = {}
        self.byte_responses: dict[str, bytes] = {}
        self.calls: list[str] = []
        self.closed = False

    async def get_json(self, url: str) -> Any:
        self.calls.append(url)
        if url not in self.json_responses:
            raise UpstreamError(url, "status 404")
        return self.json_responses[url]

    async def get_bytes(self, url: str) -> bytes:
        self.calls.append(url)
        if url not in self.byte_responses:
            raise UpstreamError(url, "status 404")
        return self.byte_responses[url]

    async def aclose(self) -> None:
        self.closed = True


class FakeImageCodec:
    """Returns a deterministic payload derived from the input."""

    def __init__(self) -> None:
        self.calls = 0

    def compress(self, data: bytes, width: int, height: int, quality: int) -> bytes:
        self.calls += 1
        if data == b"not an image":
            raise ImageProcessingError("cannot identify image file")
        return b"JPEG:" + hashlib.sha1(data).hexdigest().encode() + f":{width}x{height}@{quality}".encode()


@pytest.fixture
def spa_dist(tmp_path):
    """SPA build directory with an entry document and one asset."""
    dist = tmp_path / "dist"
    (dist / "assets").mkdir(parents=True)
    (dist / "index.html").write_text(SPA_HTML)
    (dist / "assets" / "app.js").write_text("console.log('spa');")
    return dist


@pytest.fixture
def settings(tmp_path, spa_dist):
    """Settings pointing at temporary directories."""
    return Settings(
        app_base_url=APP_BASE_URL,
        api_base_url=API_BASE_URL,
        spa_dist_dir=str(spa_dist),
        image_dir=str(tmp_path / "seo-img"),
        redirect_humans=True,
    )


@pytest.fixture
def http_client():
    return FakeHttpClient()


@pytest.fixture
def codec():
    return FakeImageCodec()


@pytest.fixture
def image_cache(http_client, codec, settings):
    return ImageCacheService(http_client=http_client, codec=codec, settings=settings)


@pytest.fixture
def metadata_service(http_client, settings):
    return MetadataService(http_client=http_client, settings=settings)


@pytest.fixture
def prerender_service(metadata_service, image_cache, settings):
    return PrerenderService.create(
        metadata_service=metadata_service,
        image_cache=image_cache,
        settings=settings,
    )


@pytest.fixture
def make_client(http_client, codec):
    """Factory for a started TestClient around the given settings."""
    clients = []

    def _make(app_settings: Settings) -> TestClient:
        app = create_app(
            settings=app_settings,
            collaborators=Collaborators(
                bot_detector=FakeBotDetector(),
                http_client=http_client,
                image_codec=codec,
            ),
        )
        client = TestClient(app)
        client.__enter__()
        clients.append(client)
        return client

    yield _make

    for client in clients:
        client.__exit__(None, None, None)


@pytest.fixture
def client(make_client, settings):
    """Create a test client with prerendering enabled."""
    return make_client(settings)


def product_payload(**overrides: Any) -> dict[str, Any]:
    data = {
        "name": "Running Shoe",
        "description": "Lightweight trainers",
        "images": f'[{{"url": "{IMAGE_URL}"}}, {{"url": "https://cdn.example.com/2.png"}}]',
        "price": 120,
    }
    data.update(overrides)
    return {"data": data}


def business_payload(**overrides: Any) -> dict[str, Any]:
    data = {
        "business_name": "Corner Cafe",
        "description": "Coffee and cake",
        "logo": "https://cdn.example.com/logo.png",
        "photo_url": "https://cdn.example.com/photo.png",
    }
    data.update(overrides)
    return {"data": data}
