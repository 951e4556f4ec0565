"""
Base DTOs for the application layer.
Provides common patterns for request/response data transfer objects.
"""

from typing import Optional
from datetime import datetime, date
from pydantic import BaseModel, Field, ConfigDict


class BaseDTO(BaseModel):
    """Base DTO with common configuration."""
    
    model_config = ConfigDict(
        # Allow population by field name or alias
        populate_by_name=True,
        # Convert enum values to their values
        use_enum_values=True,
        # Validate assignment
        validate_assignment=True,
        # Reject unknown fields
        extra="forbid",
        # JSON encoders for custom types
        json_encoders={
            datetime: lambda v: v.isoformat(),
            date: lambda v: v.isoformat(),
        }
    )


class RequestDTO(BaseDTO):
    """Base class for request DTOs."""
    pass


class ResponseDTO(BaseDTO):
    """Base class for response DTOs."""
    
    id: Optional[int] = None


class RangeRequestDTO(RequestDTO):
    """Base class for requests carrying the current report window as raw strings."""
    
    from_date: Optional[str] = Field(default=None, alias="from", description="Range start (YYYY-MM-DD)")
    to_date: Optional[str] = Field(default=None, alias="to", description="Range end (YYYY-MM-DD)")


class HealthCheckResponseDTO(BaseDTO):
    """Health check response DTO."""
    
    status: str = Field(description="Service status")
    environment: Optional[str] = Field(default=None, description="Deployment environment")
    timestamp: datetime = Field(default_factory=datetime.utcnow, description="Check timestamp")
    version: Optional[str] = Field(default=None, description="Application version")

