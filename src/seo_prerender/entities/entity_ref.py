"""Entity reference derived from a request path."""

from dataclasses import dataclass
from enum import Enum


class EntityKind(str, Enum):
    """Kind of entity an SPA URL points at."""

    PRODUCT = "product"
    EVENT = "event"
    BUSINESS = "business"

    @property
    def segment(self) -> str:
        """URL path segment used by the SPA for this kind."""
        return _SEGMENTS[self]

    @property
    def details_path(self) -> str:
        """Upstream details endpoint path for this kind.

        Events are served by the product details endpoint.
        """
        return _DETAILS_PATHS[self]

    @property
    def og_type(self) -> str:
        """Open Graph type advertised for this kind."""
        return "website" if self is EntityKind.BUSINESS else "product"


_SEGMENTS = {
    EntityKind.PRODUCT: "products",
    EntityKind.EVENT: "events",
    EntityKind.BUSINESS: "shops",
}

_DETAILS_PATHS = {
    EntityKind.PRODUCT: "/details/product",
    EntityKind.EVENT: "/details/product",
    EntityKind.BUSINESS: "/details/business",
}


@dataclass(frozen=True)
class EntityRef:
    """A product, event or business resolved from a request path.

    Attributes:
        kind: The entity kind
        identifier: Lowercase hex-and-dash identifier, query string removed
    """

    kind: EntityKind
    identifier: str

    @property
    def canonical_path(self) -> str:
        """SPA path of the entity, without leading slash."""
        return f"{self.kind.segment}/{self.identifier}"
