"""Classifier output: one selected career path."""

from models.schemas.base import CamelModel


class CareerRecommendation(CamelModel):
    """The single best-fit career chosen by the rule cascade.

    ``skill_gaps`` and ``recommendations`` are the fixed texts of the selected
    rule; they are picked by the input, never computed from it.
    """
    key: str
    title: str
    group: str
    match_score: int
    average_salary: int
    description: str
    skill_gaps: list[str] = []
    recommendations: list[str] = []


class AlternativePath(CamelModel):
    key: str
    title: str
    match_score: int
    average_salary: int
