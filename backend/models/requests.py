from pydantic import Field

from models.schemas.base import CamelModel


class ProfileSnapshot(CamelModel):
    """Skills from a stored user profile. Other profile fields are ignored."""
    skills: list[str] = Field(default_factory=list)


class CareerAnalyzeRequest(CamelModel):
    skills: list[str] = Field(..., description="Free-text skills, one per entry")
    profile: ProfileSnapshot | None = None
    include_trace: bool = False
