"""Metadata fetcher for entity pages.

Looks up an entity on the backend details API and turns the payload into
PageMetadata with the title and description fallbacks applied.
"""

import logging

from pydantic import ValidationError

from seo_prerender.config import Settings
from seo_prerender.dto import BusinessDetails, DetailsEnvelope, ProductDetails
from seo_prerender.entities import EntityKind, EntityRef, PageMetadata
from seo_prerender.exceptions import UpstreamError
from seo_prerender.protocols import HttpClient

logger = logging.getLogger(__name__)


class MetadataService:
    """Fetches and shapes entity metadata.

    Example:
        ```python
        service = MetadataService(http_client=HttpxClient.create(), settings=settings)
        metadata = await service.fetch(EntityRef(EntityKind.PRODUCT, "ab12-cd34"))
        ```
    """

    def __init__(self, http_client: HttpClient, settings: Settings) -> None:
        """Initialize the metadata service.

        Args:
            http_client: Outbound HTTP client (required).
            settings: Application settings; ``api_base_url`` and
                ``app_base_url`` must be set.
        """
        self._http = http_client
        self._settings = settings

    def details_url(self, ref: EntityRef) -> str:
        return f"{self._settings.api_base_url}{ref.kind.details_path}/{ref.identifier}"

    def canonical_url(self, ref: EntityRef) -> str:
        """Absolute SPA URL for the entity, carrying the resolved marker."""
        return f"{self._settings.app_base_url}/{ref.canonical_path}?resolved=true"

    async def fetch(self, ref: EntityRef) -> PageMetadata:
        """Fetch metadata for an entity.

        Args:
            ref: The entity to look up

        Returns:
            PageMetadata with fallbacks applied; ``image`` is the original
            upstream image URL, or empty

        Raises:
            UpstreamError: If the request fails or the body is malformed
        """
        url = self.details_url(ref)
        logger.debug("Fetching %s details from %s", ref.kind.value, url)
        payload = await self._http.get_json(url)

        try:
            envelope = DetailsEnvelope.model_validate(payload)
            if ref.kind is EntityKind.BUSINESS:
                return self._business_metadata(ref, BusinessDetails.model_validate(envelope.data))
            return self._product_metadata(ref, ProductDetails.model_validate(envelope.data))
        except ValidationError as e:
            raise UpstreamError(url, f"malformed details payload ({e.error_count()} errors)") from e

    def _product_metadata(self, ref: EntityRef, details: ProductDetails) -> PageMetadata:
        site = self._settings.site_name
        noun = "event" if ref.kind is EntityKind.EVENT else "product"

        if details.name:
            suffix = " tickets" if ref.kind is EntityKind.EVENT else ""
            title = f"Buy {details.name}{suffix} on {site}"
        else:
            title = f"{noun.capitalize()} on {site}"

        return PageMetadata(
            kind=ref.kind,
            title=title,
            description=details.description or f"Check out this amazing {noun} on {site}",
            image=details.first_image_url,
            canonical_url=self.canonical_url(ref),
        )

    def _business_metadata(self, ref: EntityRef, details: BusinessDetails) -> PageMetadata:
        site = self._settings.site_name
        title = f"{details.business_name} on {site}" if details.business_name else f"Business on {site}"

        return PageMetadata(
            kind=ref.kind,
            title=title,
            description=details.description or f"Discover this business on {site}",
            image=details.image_url,
            canonical_url=self.canonical_url(ref),
        )
