"""Stage 2: Classifier - category counts to one career recommendation.

Pure rule cascade, no model artifacts. The rule table is validated against the
categorizer's taxonomy on load, so a rule naming an unknown category stops the
service from starting.
"""

from collections.abc import Mapping
from typing import Any

from models.schemas.career_recommendation import CareerRecommendation
from services.career.classifier import CareerClassifier
from services.pipeline.base import BaseStageService


class ClassifierService(BaseStageService):
    stage_name = "classifier"

    def __init__(self, classifier: CareerClassifier | None = None) -> None:
        self._classifier = classifier

    def load(self) -> None:
        if self._classifier is None:
            from services.pipeline.registry import get_stage

            taxonomy = get_stage("categorizer").taxonomy
            self._classifier = CareerClassifier(taxonomy=taxonomy)

    def describe(self) -> str:
        return f"{len(self._classifier.rules)} rules, default '{self._classifier.default.title}'"

    @property
    def engine(self) -> CareerClassifier:
        self.ensure_loaded()
        return self._classifier

    def predict(self, **kwargs: Any) -> CareerRecommendation:
        self.ensure_loaded()
        counts: Mapping[str, int] = kwargs["counts"]
        return self._classifier.classify(counts)
