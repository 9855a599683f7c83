"""Exceptions raised inside the prerender flow.

None of these reach the HTTP client: the handler degrades to the SPA
document or to the original image URL.
"""


class PrerenderError(Exception):
    """Base class for prerender failures."""


class UpstreamError(PrerenderError):
    """An upstream HTTP call failed or returned an unusable body."""

    def __init__(self, url: str, reason: str) -> None:
        super().__init__(f"{url}: {reason}")
        self.url = url
        self.reason = reason


class ImageProcessingError(PrerenderError):
    """A source image could not be decoded, resized or encoded."""
