"""Entity resolution from SPA URL paths."""

import re

from seo_prerender.entities import EntityKind, EntityRef

# Checked in order; first match wins.
ROUTE_PATTERNS: tuple[tuple[EntityKind, re.Pattern[str]], ...] = (
    (EntityKind.PRODUCT, re.compile(r"^products/([a-f0-9-]+)$")),
    (EntityKind.EVENT, re.compile(r"^events/([a-f0-9-]+)$")),
    (EntityKind.BUSINESS, re.compile(r"^shops/([a-f0-9-]+)$")),
)


def normalize_path(path: str) -> str:
    """Strip leading and trailing slashes."""
    return path.strip("/")


def match_route(path: str) -> EntityRef | None:
    """Resolve a request path to an entity reference.

    Args:
        path: Request path, with or without surrounding slashes

    Returns:
        EntityRef for the first matching pattern, None otherwise
    """
    normalized = normalize_path(path)
    for kind, pattern in ROUTE_PATTERNS:
        match = pattern.match(normalized)
        if match:
            return EntityRef(kind=kind, identifier=match.group(1))
    return None
