"""
Pydantic Schemas for Writer Configuration
"""

from typing import Dict, Any
from pydantic import BaseModel, ConfigDict, Field, field_validator


DEFAULT_WRITER_FACTORY = "csv-default-stream-writer"


class WriterFactoryConfig(BaseModel):
    """Schema for the writer factory section of a pipeline configuration"""

    model_config = ConfigDict(extra="forbid")

    type: str = Field(default=DEFAULT_WRITER_FACTORY, description="Writer factory alias")
    options: Dict[str, Any] = Field(
        default_factory=dict,
        description="Keyword arguments for the factory constructor",
    )

    @field_validator("type")
    @classmethod
    def validate_type(cls, v):
        v = v.strip()
        if not v:
            raise ValueError("type must be a non-empty alias")
        return v
