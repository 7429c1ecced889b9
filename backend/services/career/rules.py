"""Building blocks of the career rule cascade.

A rule's guard is a small boolean expression over category counts built from
``AtLeast`` terms joined with ``AllOf`` / ``AnyOf`` (or the ``&`` / ``|``
operators). Evaluation is left to right and short-circuits, exactly like the
hand-written conditions the table was derived from.
"""

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from typing import Literal

from services.career.taxonomy import Taxonomy

RuleGroup = Literal["medical", "technology", "interdisciplinary", "general", "default"]

RULE_GROUPS: tuple[str, ...] = ("medical", "technology", "interdisciplinary", "general")


class RuleTableError(ValueError):
    """Raised when the rule table is inconsistent with itself or the taxonomy."""


class Guard:
    def evaluate(self, counts: Mapping[str, int]) -> bool:
        raise NotImplementedError

    def categories(self) -> set[str]:
        raise NotImplementedError

    def __and__(self, other: "Guard") -> "AllOf":
        return AllOf(self, other)

    def __or__(self, other: "Guard") -> "AnyOf":
        return AnyOf(self, other)


@dataclass(frozen=True)
class AtLeast(Guard):
    category: str
    threshold: int

    def evaluate(self, counts: Mapping[str, int]) -> bool:
        return counts.get(self.category, 0) >= self.threshold

    def categories(self) -> set[str]:
        return {self.category}

    def __str__(self) -> str:
        return f"{self.category} >= {self.threshold}"


@dataclass(frozen=True, init=False)
class AllOf(Guard):
    terms: tuple[Guard, ...]

    def __init__(self, *terms: Guard) -> None:
        object.__setattr__(self, "terms", terms)

    def evaluate(self, counts: Mapping[str, int]) -> bool:
        return all(term.evaluate(counts) for term in self.terms)

    def categories(self) -> set[str]:
        return set().union(*(term.categories() for term in self.terms))

    def __str__(self) -> str:
        return "(" + " and ".join(str(t) for t in self.terms) + ")"


@dataclass(frozen=True, init=False)
class AnyOf(Guard):
    terms: tuple[Guard, ...]

    def __init__(self, *terms: Guard) -> None:
        object.__setattr__(self, "terms", terms)

    def evaluate(self, counts: Mapping[str, int]) -> bool:
        return any(term.evaluate(counts) for term in self.terms)

    def categories(self) -> set[str]:
        return set().union(*(term.categories() for term in self.terms))

    def __str__(self) -> str:
        return "(" + " or ".join(str(t) for t in self.terms) + ")"


class Never(Guard):
    """Guard of the default record; it is selected only when nothing else fires."""

    def evaluate(self, counts: Mapping[str, int]) -> bool:
        return False

    def categories(self) -> set[str]:
        return set()

    def __str__(self) -> str:
        return "never"


@dataclass(frozen=True)
class ScoreFormula:
    """``min(cap, base + sum(weight * count))`` as an integer."""

    base: int
    cap: int
    weights: tuple[tuple[str, int], ...] = ()

    def compute(self, counts: Mapping[str, int]) -> int:
        raw = self.base + sum(weight * counts.get(category, 0) for category, weight in self.weights)
        return int(min(self.cap, raw))

    def categories(self) -> set[str]:
        return {category for category, _ in self.weights}


def score(base: int, cap: int, **weights: int) -> ScoreFormula:
    return ScoreFormula(base=base, cap=cap, weights=tuple(weights.items()))


@dataclass(frozen=True)
class CareerRule:
    key: str
    title: str
    group: RuleGroup
    guard: Guard
    score: ScoreFormula
    average_salary: int
    description: str
    skill_gaps: tuple[str, ...] = field(default=())
    recommendations: tuple[str, ...] = field(default=())

    def matches(self, counts: Mapping[str, int]) -> bool:
        return self.guard.evaluate(counts)

    def referenced_categories(self) -> set[str]:
        return self.guard.categories() | self.score.categories()


def validate_rules(rules: Iterable[CareerRule], taxonomy: Taxonomy) -> None:
    """Reject tables that would misbehave at request time."""
    rules = list(rules)
    if not rules:
        raise RuleTableError("Rule table is empty")

    seen: set[str] = set()
    for rule in rules:
        if rule.key in seen:
            raise RuleTableError(f"Duplicate rule key: {rule.key}")
        seen.add(rule.key)

        if rule.group not in RULE_GROUPS:
            raise RuleTableError(f"Rule '{rule.key}' has unknown group '{rule.group}'")

        unknown = sorted(c for c in rule.referenced_categories() if c not in taxonomy)
        if unknown:
            raise RuleTableError(
                f"Rule '{rule.key}' references undefined categories: {', '.join(unknown)}"
            )

        if rule.score.base > rule.score.cap:
            raise RuleTableError(f"Rule '{rule.key}' base score exceeds its cap")
        if rule.average_salary < 0:
            raise RuleTableError(f"Rule '{rule.key}' has a negative salary")
