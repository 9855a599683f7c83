"""Page metadata domain entity."""

from dataclasses import dataclass, replace

from .entity_ref import EntityKind


@dataclass(frozen=True)
class PageMetadata:
    """SEO metadata for one entity page.

    Attributes:
        kind: The entity kind the metadata describes
        title: Page title (fallback literal when upstream has none)
        description: Page description (fallback literal when upstream has none)
        image: Image URL, empty when the entity has no image
        canonical_url: Absolute SPA URL carrying the resolved marker
    """

    kind: EntityKind
    title: str
    description: str
    image: str
    canonical_url: str

    @property
    def og_type(self) -> str:
        return self.kind.og_type

    def with_image(self, image: str) -> "PageMetadata":
        """Copy of this metadata pointing at another image."""
        return replace(self, image=image)
