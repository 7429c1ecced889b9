"""Full analyzer result: the recommendation plus supporting context."""

from models.schemas.base import CamelModel
from models.schemas.career_recommendation import AlternativePath, CareerRecommendation
from models.schemas.category_trace import CategoryTrace


class CareerAnalysis(CamelModel):
    recommendation: CareerRecommendation
    alternative_paths: list[AlternativePath] = []
    strength_areas: list[str] = []
    degraded: bool = False
    trace: CategoryTrace | None = None
