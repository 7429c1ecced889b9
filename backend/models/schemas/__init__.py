"""Pydantic contracts shared by the career pipeline stages."""

from models.schemas.base import CamelModel
from models.schemas.career_recommendation import AlternativePath, CareerRecommendation
from models.schemas.category_trace import CategoryTrace
from models.schemas.career_analysis import CareerAnalysis

__all__ = [
    "CamelModel",
    "AlternativePath",
    "CareerRecommendation",
    "CategoryTrace",
    "CareerAnalysis",
]
