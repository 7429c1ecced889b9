"""Optional diagnostic trace emitted alongside an analysis."""

from models.schemas.base import CamelModel


class CategoryTrace(CamelModel):
    counts: dict[str, int] = {}
    matched_rules: list[str] = []
    skills_analyzed: int = 0
