"""Stage 1: Categorizer - skills to per-category counts."""

from typing import Any

from config import settings
from services.career.categorizer import CategoryCounts, count_categories
from services.career.taxonomy import DEFAULT_TAXONOMY, Taxonomy
from services.pipeline.base import BaseStageService


class CategorizerService(BaseStageService):
    stage_name = "categorizer"

    def __init__(self, taxonomy: Taxonomy | None = None) -> None:
        self._taxonomy = taxonomy
        self._source = "injected"

    def load(self) -> None:
        if self._taxonomy is None:
            if settings.taxonomy_path:
                self._taxonomy = Taxonomy.from_file(settings.taxonomy_path)
                self._source = settings.taxonomy_path
            else:
                self._taxonomy = DEFAULT_TAXONOMY
                self._source = "built-in"

    def describe(self) -> str:
        return f"{len(self._taxonomy)} categories ({self._source} taxonomy)"

    @property
    def taxonomy(self) -> Taxonomy:
        self.ensure_loaded()
        return self._taxonomy

    def predict(self, **kwargs: Any) -> CategoryCounts:
        self.ensure_loaded()
        skills: list[str] = kwargs["skills"]
        return count_categories(skills, self._taxonomy)
