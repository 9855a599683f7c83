"""Data Transfer Objects for external contracts.

These Pydantic models describe payloads crossing the service boundary:
- upstream: the backend details API consumed by the metadata fetcher
- responses: the JSON endpoints this service exposes

Internal logic should use entities from the entities package.
"""

from .responses import HealthCheckResponse
from .upstream import BusinessDetails, DetailsEnvelope, ImageItem, ProductDetails

__all__ = [
    "DetailsEnvelope",
    "ProductDetails",
    "BusinessDetails",
    "ImageItem",
    "HealthCheckResponse",
]
