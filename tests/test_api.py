"""
Tests for the prerender HTTP API.
"""

from dataclasses import replace

import pytest

from conftest import (
    API_BASE_URL,
    APP_BASE_URL,
    BUSINESS_ID,
    IMAGE_URL,
    PRODUCT_ID,
    SPA_HTML,
    business_payload,
    product_payload,
)
from seo_prerender.services import cache_key

BOT_UA = {"User-Agent": "Mozilla/5.0 (compatible; Googlebot/2.1)"}
HUMAN_UA = {"User-Agent": "Mozilla/5.0 (X11; Linux x86_64) Firefox/126.0"}
PRODUCT_URL = f"{API_BASE_URL}/details/product/{PRODUCT_ID}"


def test_health(client):
    """Test health check endpoint."""
    response = client.get("/health")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "healthy"
    assert data["spa_available"] is True
    assert data["prerender_enabled"] is True


def test_root_serves_spa(client):
    response = client.get("/", headers=BOT_UA)
    assert response.status_code == 200
    assert response.text == SPA_HTML


def test_unmatched_path_serves_spa_for_bots_and_humans(client, http_client):
    """Unknown paths always get the SPA document."""
    for headers in (BOT_UA, HUMAN_UA, {}):
        response = client.get("/cart/checkout", headers=headers)
        assert response.status_code == 200
        assert response.text == SPA_HTML
    assert http_client.calls == []


def test_resolved_marker_serves_spa(client, http_client):
    """Requests carrying the resolved marker always get the SPA document."""
    http_client.json_responses[PRODUCT_URL] = product_payload()

    for headers in (BOT_UA, HUMAN_UA):
        response = client.get(f"/products/{PRODUCT_ID}?resolved=true", headers=headers)
        assert response.status_code == 200
        assert response.text == SPA_HTML

    response = client.get(f"/products/{PRODUCT_ID}?resolved", headers=BOT_UA)
    assert response.text == SPA_HTML
    assert http_client.calls == []


def test_bot_gets_product_page(client, http_client):
    """Crawlers receive the metadata page for a product."""
    http_client.json_responses[PRODUCT_URL] = product_payload()
    http_client.byte_responses[IMAGE_URL] = b"png bytes"

    response = client.get(f"/products/{PRODUCT_ID}", headers=BOT_UA)

    assert response.status_code == 200
    assert response.headers["content-type"].startswith("text/html")
    assert "<title>Buy Running Shoe on GreepPay</title>" in response.text
    canonical = f"{APP_BASE_URL}/products/{PRODUCT_ID}?resolved=true"
    assert f'<meta property="og:url" content="{canonical}" />' in response.text
    image = f"{APP_BASE_URL}/seo-img/{cache_key(IMAGE_URL)}.jpg"
    assert f'<meta property="og:image" content="{image}" />' in response.text


def test_compressed_image_is_served(client, http_client):
    """The cached image is reachable under the image prefix."""
    http_client.json_responses[PRODUCT_URL] = product_payload()
    http_client.byte_responses[IMAGE_URL] = b"png bytes"
    client.get(f"/products/{PRODUCT_ID}", headers=BOT_UA)

    response = client.get(f"/seo-img/{cache_key(IMAGE_URL)}.jpg")

    assert response.status_code == 200
    assert response.content.startswith(b"JPEG:")


def test_repeat_bot_requests_reuse_cached_image(client, http_client, codec):
    http_client.json_responses[PRODUCT_URL] = product_payload()
    http_client.byte_responses[IMAGE_URL] = b"png bytes"

    client.get(f"/products/{PRODUCT_ID}", headers=BOT_UA)
    client.get(f"/products/{PRODUCT_ID}", headers=BOT_UA)

    assert http_client.calls.count(IMAGE_URL) == 1
    assert http_client.calls.count(PRODUCT_URL) == 2
    assert codec.calls == 1


def test_bot_gets_business_page(client, http_client):
    http_client.json_responses[f"{API_BASE_URL}/details/business/{BUSINESS_ID}"] = (
        business_payload(logo=None, photo_url=None)
    )

    response = client.get(f"/shops/{BUSINESS_ID}/", headers=BOT_UA)

    assert response.status_code == 200
    assert "<title>Corner Cafe on GreepPay</title>" in response.text
    assert '<meta property="og:type" content="website" />' in response.text
    assert '<meta property="og:image" content="https://greep.io/" />' in response.text


def test_human_is_redirected(client, http_client):
    """Visitors on entity URLs are redirected to the canonical resolved URL."""
    response = client.get(f"/events/{PRODUCT_ID}", headers=HUMAN_UA, follow_redirects=False)

    assert 300 <= response.status_code < 400
    assert response.headers["location"] == f"{APP_BASE_URL}/events/{PRODUCT_ID}?resolved=true"
    assert http_client.calls == []


def test_human_gets_spa_when_redirects_disabled(make_client, settings):
    client = make_client(replace(settings, redirect_humans=False))

    response = client.get(f"/products/{PRODUCT_ID}", headers=HUMAN_UA, follow_redirects=False)

    assert response.status_code == 200
    assert response.text == SPA_HTML


def test_upstream_failure_serves_spa(client):
    """A failed metadata fetch degrades to the SPA, never a 5xx."""
    response = client.get(f"/products/{PRODUCT_ID}", headers=BOT_UA)
    assert response.status_code == 200
    assert response.text == SPA_HTML


def test_unexpected_error_serves_spa(client, http_client):
    """Exceptions outside the expected failures are caught at the boundary."""

    async def explode(url):
        raise KeyError(url)

    http_client.get_json = explode

    response = client.get(f"/products/{PRODUCT_ID}", headers=BOT_UA)
    assert response.status_code == 200
    assert response.text == SPA_HTML


def test_prerender_disabled_without_base_url(make_client, settings, http_client):
    client = make_client(replace(settings, app_base_url=None))

    response = client.get(f"/products/{PRODUCT_ID}", headers=BOT_UA)

    assert response.text == SPA_HTML
    assert http_client.calls == []
    assert client.get("/health").json()["prerender_enabled"] is False


def test_static_assets_are_served(client):
    response = client.get("/assets/app.js", headers=BOT_UA)
    assert response.status_code == 200
    assert response.text == "console.log('spa');"


def test_missing_spa_build(make_client, settings, tmp_path):
    client = make_client(replace(settings, spa_dist_dir=str(tmp_path / "nowhere")))

    assert client.get("/about").status_code == 404
    assert client.get("/health").json()["status"] == "degraded"


@pytest.mark.parametrize(
    "path",
    [
        "/" + "a" * 300,
        "/assets/" + "b" * 300 + "/app.js",
        "/%00",
        "/assets/app.js%00.png",
        "/assets/..%2F..%2Fsecret.txt",
        "/../secret.txt",
        "/caf%C3%A9/%20menu",
        f"/products/{PRODUCT_ID}%3Fref%3Dhome",
    ],
)
def test_unusual_paths_serve_spa(client, spa_dist, http_client, path):
    """Odd but valid request paths fall back to the SPA, never a 5xx."""
    (spa_dist.parent / "secret.txt").write_text("outside the build")

    for headers in (BOT_UA, HUMAN_UA):
        response = client.get(path, headers=headers, follow_redirects=False)
        assert response.status_code == 200
        assert response.text == SPA_HTML
    assert http_client.calls == []
