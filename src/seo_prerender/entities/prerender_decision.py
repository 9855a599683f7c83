"""Outcome of the prerender flow for a single request."""

from dataclasses import dataclass
from enum import Enum

from .page_metadata import PageMetadata


class DecisionKind(str, Enum):
    SERVE_SPA = "serve_spa"
    RENDER = "render"
    REDIRECT = "redirect"


@dataclass(frozen=True)
class PrerenderDecision:
    """What the handler should send back.

    Attributes:
        kind: Which response to produce
        metadata: Page metadata, set for RENDER
        redirect_url: Target URL, set for REDIRECT
    """

    kind: DecisionKind
    metadata: PageMetadata | None = None
    redirect_url: str | None = None

    @classmethod
    def serve_spa(cls) -> "PrerenderDecision":
        return cls(kind=DecisionKind.SERVE_SPA)

    @classmethod
    def render(cls, metadata: PageMetadata) -> "PrerenderDecision":
        return cls(kind=DecisionKind.RENDER, metadata=metadata)

    @classmethod
    def redirect(cls, url: str) -> "PrerenderDecision":
        return cls(kind=DecisionKind.REDIRECT, redirect_url=url)
