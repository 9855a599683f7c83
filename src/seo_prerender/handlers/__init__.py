"""Handler layer for HTTP endpoints.

Handlers depend on services (business logic), not directly on adapters.

Architecture:
    Handler -> Service -> Protocol
    (HTTP)  -> (Business) -> (Adapters)
"""

from .prerender_handler import PrerenderHandler

__all__ = [
    "PrerenderHandler",
]
