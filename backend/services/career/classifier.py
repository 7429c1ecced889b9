"""First-match-wins career rule cascade."""

import logging
from collections.abc import Mapping, Sequence

from models.schemas.career_recommendation import AlternativePath, CareerRecommendation
from services.career.career_paths import CAREER_RULES, EXPLORER_RULE
from services.career.rules import CareerRule, RuleTableError, validate_rules
from services.career.taxonomy import DEFAULT_TAXONOMY, Taxonomy

logger = logging.getLogger(__name__)


def to_recommendation(rule: CareerRule, counts: Mapping[str, int]) -> CareerRecommendation:
    return CareerRecommendation(
        key=rule.key,
        title=rule.title,
        group=rule.group,
        match_score=rule.score.compute(counts),
        average_salary=rule.average_salary,
        description=rule.description,
        skill_gaps=list(rule.skill_gaps),
        recommendations=list(rule.recommendations),
    )


def to_alternative(rule: CareerRule, counts: Mapping[str, int]) -> AlternativePath:
    return AlternativePath(
        key=rule.key,
        title=rule.title,
        match_score=rule.score.compute(counts),
        average_salary=rule.average_salary,
    )


class CareerClassifier:
    """Selects exactly one career record for a category count vector.

    Rules are tried strictly in table order and the first guard that holds
    wins, even when a later rule's counts look like a closer fit. When no guard
    holds the default record is returned.
    """

    def __init__(
        self,
        rules: Sequence[CareerRule] = CAREER_RULES,
        taxonomy: Taxonomy = DEFAULT_TAXONOMY,
        default: CareerRule = EXPLORER_RULE,
    ) -> None:
        validate_rules(rules, taxonomy)
        if any(rule.key == default.key for rule in rules):
            raise RuleTableError(f"Default rule key '{default.key}' clashes with a cascade rule")
        self._rules = tuple(rules)
        self._default = default
        self._taxonomy = taxonomy

    @property
    def rules(self) -> tuple[CareerRule, ...]:
        return self._rules

    @property
    def default(self) -> CareerRule:
        return self._default

    def select(self, counts: Mapping[str, int]) -> CareerRule:
        for rule in self._rules:
            if rule.matches(counts):
                return rule
        return self._default

    def classify(self, counts: Mapping[str, int]) -> CareerRecommendation:
        rule = self.select(counts)
        if rule is self._default:
            logger.debug("No career rule matched, using %s", rule.title)
        return to_recommendation(rule, counts)

    def matching_rules(self, counts: Mapping[str, int]) -> list[CareerRule]:
        """Every rule whose guard holds, in cascade order."""
        return [rule for rule in self._rules if rule.matches(counts)]

    def catalog(self, group: str | None = None) -> list[CareerRule]:
        if group is None:
            return list(self._rules)
        return [rule for rule in self._rules if rule.group == group]
