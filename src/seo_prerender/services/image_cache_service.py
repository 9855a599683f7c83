"""Content-addressed disk cache for compressed Open Graph images.

Each source URL maps to ``{md5(url)}.jpg`` inside the image directory. A file
at that path is the only cache-hit signal: there is no TTL, no eviction and
no size bound. Concurrent misses for the same URL may both compress and
write; the output is deterministic so the last rename wins harmlessly.
"""

import asyncio
import hashlib
import logging
import os
import tempfile
from pathlib import Path

from seo_prerender.config import Settings
from seo_prerender.protocols import HttpClient, ImageCodec

logger = logging.getLogger(__name__)


def cache_key(image_url: str) -> str:
    """MD5 hex digest of the URL bytes."""
    return hashlib.md5(image_url.encode("utf-8")).hexdigest()


class ImageCacheService:
    """Downloads, compresses and stores og:image assets once per source URL.

    Example:
        ```python
        cache = ImageCacheService(
            http_client=HttpxClient.create(),
            codec=PillowImageCodec(),
            settings=settings,
        )
        path = await cache.get_or_create("https://cdn.example.com/p/1.png")
        if path is not None:
            image = cache.public_url(path)
        ```
    """

    def __init__(self, http_client: HttpClient, codec: ImageCodec, settings: Settings) -> None:
        """Initialize the image cache.

        Args:
            http_client: Client used to download source images.
            codec: Image codec used for resize and re-encode.
            settings: Application settings (directory, dimensions, quality).
        """
        self._http = http_client
        self._codec = codec
        self._settings = settings
        self._directory = Path(settings.image_dir)

    @property
    def directory(self) -> Path:
        return self._directory

    def ensure_directory(self) -> None:
        self._directory.mkdir(parents=True, exist_ok=True)

    def path_for(self, image_url: str) -> Path:
        return self._directory / f"{cache_key(image_url)}.jpg"

    def public_url(self, path: Path) -> str:
        """Absolute URL under which the app serves a cached file."""
        return f"{self._settings.app_base_url}{self._settings.image_url_prefix}/{path.name}"

    async def get_or_create(self, image_url: str) -> Path | None:
        """Return the compressed copy of ``image_url``, creating it on a miss.

        Args:
            image_url: Source image URL; empty skips the step entirely

        Returns:
            Path of the compressed file, or None when no compressed asset is
            available (empty URL, download, decode or write failure)
        """
        if not image_url:
            return None

        target = self.path_for(image_url)
        if target.exists():
            return target

        try:
            data = await self._http.get_bytes(image_url)
            compressed = await asyncio.to_thread(
                self._codec.compress,
                data,
                self._settings.og_image_width,
                self._settings.og_image_height,
                self._settings.og_image_quality,
            )
            await asyncio.to_thread(self._write_atomic, target, compressed)
        except Exception as e:
            logger.error("Image compression failed for %s: %s", image_url, e)
            return None

        logger.info("Cached compressed image %s for %s", target.name, image_url)
        return target

    def _write_atomic(self, target: Path, data: bytes) -> None:
        self.ensure_directory()
        fd, tmp_name = tempfile.mkstemp(dir=target.parent, prefix=".", suffix=".tmp")
        try:
            with os.fdopen(fd, "wb") as f:
                f.write(data)
            os.replace(tmp_name, target)
        except OSError:
            Path(tmp_name).unlink(missing_ok=True)
            raise
