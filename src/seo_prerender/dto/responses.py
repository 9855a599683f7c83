"""Response DTOs for API endpoints."""

from pydantic import BaseModel, Field


class HealthCheckResponse(BaseModel):
    """Response DTO for health check."""

    status: str = Field(..., description="Health status: 'healthy' or 'degraded'")
    spa_available: bool = Field(..., description="Whether the SPA entry document exists")
    prerender_enabled: bool = Field(
        ...,
        description="Whether APP_BASE_URL and API_BASE_URL are both configured",
    )
    image_dir: str = Field(..., description="Directory holding compressed Open Graph images")
