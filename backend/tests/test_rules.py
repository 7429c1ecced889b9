"""Tests for guard expressions, score formulas and rule-table validation."""

import pytest

from services.career.career_paths import CAREER_RULES, EXPLORER_RULE
from services.career.classifier import CareerClassifier
from services.career.rules import (
    AllOf,
    AnyOf,
    AtLeast,
    CareerRule,
    Guard,
    RuleTableError,
    ScoreFormula,
    score,
    validate_rules,
)
from services.career.taxonomy import DEFAULT_TAXONOMY, Taxonomy


class _Recorder(Guard):
    """Guard that records when it is evaluated."""

    def __init__(self, name, result, log):
        self.name = name
        self.result = result
        self.log = log

    def evaluate(self, counts):
        self.log.append(self.name)
        return self.result

    def categories(self):
        return set()


def _rule(key="r1", guard=None, base=70, cap=90, group="technology", salary=1000, **weights):
    return CareerRule(
        key=key,
        title=key.title(),
        group=group,
        guard=guard or AtLeast("frontend", 1),
        score=score(base, cap, **weights),
        average_salary=salary,
        description="",
    )


class TestGuards:
    def test_at_least(self):
        guard = AtLeast("surgery", 3)
        assert guard.evaluate({"surgery": 3})
        assert not guard.evaluate({"surgery": 2})
        assert not guard.evaluate({})

    def test_operators_build_composites(self):
        guard = AtLeast("a", 1) | (AtLeast("b", 2) & AtLeast("c", 2))
        assert isinstance(guard, AnyOf)
        assert guard.evaluate({"a": 1})
        assert guard.evaluate({"b": 2, "c": 2})
        assert not guard.evaluate({"b": 2, "c": 1})
        assert guard.categories() == {"a", "b", "c"}

    def test_any_of_short_circuits_left_to_right(self):
        log = []
        AnyOf(_Recorder("x", True, log), _Recorder("y", True, log)).evaluate({})
        assert log == ["x"]

    def test_all_of_short_circuits_left_to_right(self):
        log = []
        AllOf(_Recorder("x", False, log), _Recorder("y", True, log)).evaluate({})
        assert log == ["x"]

    def test_guard_str(self):
        guard = AtLeast("a", 1) | (AtLeast("b", 2) & AtLeast("c", 3))
        assert str(guard) == "(a >= 1 or (b >= 2 and c >= 3))"

    def test_guards_are_hashable_values(self):
        assert AtLeast("a", 1) == AtLeast("a", 1)
        assert hash(AllOf(AtLeast("a", 1))) == hash(AllOf(AtLeast("a", 1)))


class TestScoreFormula:
    def test_linear_combination(self):
        formula = ScoreFormula(base=80, cap=95, weights=(("clinical", 3), ("medical_foundation", 2)))
        assert formula.compute({"clinical": 2, "medical_foundation": 1}) == 88

    def test_capped(self):
        formula = score(85, 98, surgery=4)
        assert formula.compute({"surgery": 1_000_000}) == 98

    def test_missing_counts_are_zero(self):
        assert score(60, 60).compute({}) == 60

    def test_result_is_int(self):
        assert isinstance(score(70, 85, nursing=3).compute({"nursing": 1}), int)


@pytest.mark.parametrize("rule", CAREER_RULES, ids=lambda r: r.key)
def test_every_rule_score_is_capped(rule):
    huge = {name: 10_000 for name in DEFAULT_TAXONOMY.all_categories()}
    assert rule.score.compute(huge) == rule.score.cap


@pytest.mark.parametrize("rule", CAREER_RULES, ids=lambda r: r.key)
def test_every_rule_references_known_categories(rule):
    assert rule.referenced_categories() <= set(DEFAULT_TAXONOMY.all_categories())


def test_rule_table_shape():
    assert len(CAREER_RULES) == 24
    groups = [rule.group for rule in CAREER_RULES]
    # medical, then technology, then interdisciplinary, then general
    assert groups == ["medical"] * 10 + ["technology"] * 10 + ["interdisciplinary"] * 2 + ["general"] * 2
    assert len({rule.key for rule in CAREER_RULES}) == 24


def test_explorer_record():
    assert EXPLORER_RULE.title == "Career Explorer"
    assert EXPLORER_RULE.score.compute({}) == 60
    assert EXPLORER_RULE.average_salary == 65000
    assert not EXPLORER_RULE.matches({name: 99 for name in DEFAULT_TAXONOMY.all_categories()})


class TestValidateRules:
    def test_default_table_is_valid(self):
        validate_rules(CAREER_RULES, DEFAULT_TAXONOMY)

    def test_empty_table(self):
        with pytest.raises(RuleTableError, match="empty"):
            validate_rules([], DEFAULT_TAXONOMY)

    def test_duplicate_key(self):
        with pytest.raises(RuleTableError, match="Duplicate"):
            validate_rules([_rule("a"), _rule("a")], DEFAULT_TAXONOMY)

    def test_guard_with_undefined_category(self):
        rule = _rule(guard=AtLeast("astronomy", 2))
        with pytest.raises(RuleTableError, match="astronomy"):
            validate_rules([rule], DEFAULT_TAXONOMY)

    def test_score_with_undefined_category(self):
        rule = _rule(astronomy=2)
        with pytest.raises(RuleTableError, match="astronomy"):
            validate_rules([rule], DEFAULT_TAXONOMY)

    def test_base_above_cap(self):
        with pytest.raises(RuleTableError, match="cap"):
            validate_rules([_rule(base=99, cap=90)], DEFAULT_TAXONOMY)

    def test_negative_salary(self):
        with pytest.raises(RuleTableError, match="salary"):
            validate_rules([_rule(salary=-1)], DEFAULT_TAXONOMY)

    def test_unknown_group(self):
        with pytest.raises(RuleTableError, match="group"):
            validate_rules([_rule(group="finance")], DEFAULT_TAXONOMY)

    def test_default_table_against_reduced_taxonomy(self):
        taxonomy = Taxonomy({"surgery": ["surgery"]})
        with pytest.raises(RuleTableError):
            CareerClassifier(taxonomy=taxonomy)

    def test_default_key_clash(self):
        clash = _rule(key=EXPLORER_RULE.key)
        with pytest.raises(RuleTableError, match="clashes"):
            CareerClassifier(rules=[clash])
