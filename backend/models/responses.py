from models.schemas.base import CamelModel
from models.schemas.career_recommendation import AlternativePath
from models.schemas.category_trace import CategoryTrace


class TopMatch(CamelModel):
    title: str
    match_score: int
    average_salary: int
    description: str


class CareerAnalysisData(CamelModel):
    user_skills: list[str] = []
    top_match: TopMatch
    recommendations: list[str] = []
    skill_gaps: list[str] = []
    alternative_paths: list[AlternativePath] = []
    strength_areas: list[str] = []
    degraded: bool = False
    trace: CategoryTrace | None = None
    timestamp: str


class CareerAnalysisResponse(CamelModel):
    success: bool = True
    message: str = "Career analysis completed"
    data: CareerAnalysisData


class CareerPathSummary(CamelModel):
    key: str
    title: str
    group: str
    average_salary: int
    description: str


class CareerPathsResponse(CamelModel):
    success: bool = True
    group: str | None = None
    total_paths: int = 0
    paths: list[CareerPathSummary] = []


class CategorySummary(CamelModel):
    name: str
    keyword_count: int


class CategoriesResponse(CamelModel):
    success: bool = True
    categories: list[CategorySummary] = []


class HealthResponse(CamelModel):
    status: str = "ok"
    message: str = "Career Compass API is running"
    timestamp: str
    categories: int = 0
    rules: int = 0
