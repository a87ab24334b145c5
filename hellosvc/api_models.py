from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class GreetingResponse(BaseModel):
    model_config = ConfigDict(frozen=True)

    message: str = Field(..., description="Formatted greeting, e.g. 'Hello, World!'")


class VersionInfo(BaseModel):
    model_config = ConfigDict(frozen=True)

    version: str = Field(..., description="Release version, e.g. 1.1.0")
    description: str = Field(..., description="What changed in this release")
