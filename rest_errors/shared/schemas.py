"""Base Pydantic schemas for API responses."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class BaseSchema(BaseModel):
    """Base schema with the common configuration."""

    model_config = ConfigDict(
        from_attributes=True,
        str_strip_whitespace=True,
        populate_by_name=True,
    )


class HealthResponse(BaseSchema):
    """Health check response.

    Used by health check endpoints to report service state.
    """

    status: str = Field(
        ...,
        description="Overall health status",
        examples=["healthy", "unhealthy"],
    )
    version: str | None = Field(
        default=None,
        description="Application version",
    )
    environment: str | None = Field(
        default=None,
        description="Runtime environment",
    )
    timestamp: datetime = Field(
        default_factory=lambda: datetime.now(),
        description="Check timestamp",
    )

    @classmethod
    def healthy(cls, version: str | None = None, environment: str | None = None) -> "HealthResponse":
        """Build a healthy response."""
        return cls(status="healthy", version=version, environment=environment)
