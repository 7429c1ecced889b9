"""Tests for skill-to-category counting."""

import random

from services.career.categorizer import CategoryCounts, count_categories
from services.career.taxonomy import DEFAULT_TAXONOMY, Taxonomy


def _counts(skills):
    return count_categories(skills, DEFAULT_TAXONOMY)


def test_empty_input_gives_all_zero_counts():
    counts = _counts([])
    assert set(counts) == set(DEFAULT_TAXONOMY.all_categories())
    assert all(v == 0 for v in counts.values())
    assert counts.total() == 0


def test_surgery_example():
    counts = _counts(["surgery", "surgical", "operating room"])
    assert counts["surgery"] == 3
    assert counts["medical_foundation"] == 0


def test_matching_is_case_insensitive():
    counts = _counts(["PYTHON"])
    assert counts["data_science"] == 1
    assert counts["backend"] == 1
    assert counts["game_dev"] == 1


def test_substring_not_token_match():
    counts = _counts(["pythonic design"])
    assert counts["data_science"] == 1
    assert counts["uiux"] == 1


def test_one_skill_counts_once_per_category():
    # "surgical surgery" hits several surgery keywords but is a single skill
    assert _counts(["surgical surgery"])["surgery"] == 1


def test_duplicates_count_each_time():
    assert _counts(["surgery", "surgery"])["surgery"] == 2


def test_short_keywords_match_inside_words():
    # "r" is a data science keyword, "or" a surgery keyword
    counts = _counts(["unrelated", "information"])
    assert counts["data_science"] == 2
    assert counts["surgery"] == 1


def test_skill_matching_nothing():
    counts = _counts(["knitting", "baking"])
    assert counts.total() == 0


def test_counts_never_exceed_input_length():
    skills = ["react", "node.js", "sql", "express", "mongodb", "python", "docker"]
    counts = _counts(skills)
    assert all(0 <= v <= len(skills) for v in counts.values())


def test_order_does_not_change_counts():
    skills = ["react", "html", "css", "node.js", "django", "flask", "postgresql"]
    shuffled = skills[:]
    random.Random(7).shuffle(shuffled)
    assert _counts(skills) == _counts(shuffled)


def test_input_is_not_mutated():
    skills = ["React", "HTML"]
    _counts(skills)
    assert skills == ["React", "HTML"]


def test_custom_taxonomy():
    taxonomy = Taxonomy({"web": ["react", "css"], "ops": ["docker"]})
    counts = count_categories(["React Hooks", "Docker", "Tailwind CSS"], taxonomy)
    assert counts.as_dict() == {"web": 2, "ops": 1}


class TestCategoryCounts:
    def test_top_orders_by_count_then_declaration(self):
        counts = CategoryCounts({"a": 1, "b": 3, "c": 0, "d": 1})
        assert counts.top(3) == ["b", "a", "d"]

    def test_top_skips_zero_counts(self):
        counts = CategoryCounts({"a": 0, "b": 2})
        assert counts.top(5) == ["b"]

    def test_missing_category_defaults_to_zero_via_get(self):
        counts = CategoryCounts({"a": 1})
        assert counts.get("zzz", 0) == 0

    def test_as_dict_is_a_copy(self):
        counts = CategoryCounts({"a": 1})
        d = counts.as_dict()
        d["a"] = 99
        assert counts["a"] == 1
