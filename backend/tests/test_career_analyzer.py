"""Tests for the career analysis orchestrator."""

import pytest

from config import settings
from models.requests import ProfileSnapshot
from models.schemas.career_analysis import CareerAnalysis
from services import career_analyzer
from services.pipeline import registry
from services.pipeline.categorizer import CategorizerService

SURGEON_SKILLS = ["surgery", "surgical", "operating room"]


class _BrokenCategorizer(CategorizerService):
    def predict(self, **kwargs):
        raise RuntimeError("boom")


def test_returns_single_analysis():
    result = career_analyzer.analyze_skills(SURGEON_SKILLS)
    assert isinstance(result, CareerAnalysis)
    assert result.recommendation.title == "Surgeon / Surgical Specialist"
    assert result.degraded is False
    assert result.trace is None


def test_empty_skills_gives_explorer():
    result = career_analyzer.analyze_skills([])
    assert result.recommendation.title == "Career Explorer"
    assert result.recommendation.match_score == 60
    assert result.alternative_paths == []
    assert result.strength_areas == []


def test_alternative_paths_follow_cascade_order():
    skills = SURGEON_SKILLS + ["cardiology", "neurology", "dermatology"]
    result = career_analyzer.analyze_skills(skills)
    assert result.recommendation.key == "surgeon"
    assert result.alternative_paths[0].key == "physician"
    assert all(alt.key != "surgeon" for alt in result.alternative_paths)


def test_alternative_paths_are_limited(monkeypatch):
    monkeypatch.setattr(settings, "alternative_paths_limit", 1)
    skills = ["anatomy", "genetics", "immunology", "python", "pandas", "numpy", "keras"]
    result = career_analyzer.analyze_skills(skills)
    assert result.recommendation.key == "data_scientist"
    assert [alt.key for alt in result.alternative_paths] == ["health_informatics_specialist"]


def test_strength_areas_are_top_categories():
    result = career_analyzer.analyze_skills(["docker", "kubernetes", "terraform", "ansible"])
    # devops 4, data_science 3 ("r"), then surgery/database 1 each
    assert result.strength_areas == ["devops", "data_science", "surgery"]


def test_profile_skills_are_merged():
    profile = ProfileSnapshot(skills=["surgical", "operating room"])
    result = career_analyzer.analyze_skills(["surgery"], profile=profile)
    assert result.recommendation.key == "surgeon"


def test_without_profile_same_skill_is_explorer():
    assert career_analyzer.analyze_skills(["surgery"]).recommendation.key == "career_explorer"


def test_trace_on_request():
    result = career_analyzer.analyze_skills(SURGEON_SKILLS, include_trace=True)
    assert result.trace is not None
    assert result.trace.counts["surgery"] == 3
    assert len(result.trace.counts) == 21
    # "r" in every skill also lifts data_science to 3
    assert result.trace.matched_rules == ["surgeon", "technology_professional"]
    assert result.trace.skills_analyzed == 3


def test_trace_enabled_in_settings(monkeypatch):
    monkeypatch.setattr(settings, "trace_enabled", True)
    result = career_analyzer.analyze_skills([])
    assert result.trace is not None
    assert result.trace.matched_rules == []


def test_idempotent_and_order_independent():
    skills = ["react", "html", "css", "node.js", "django", "flask", "postgresql"]
    first = career_analyzer.analyze_skills(skills)
    assert career_analyzer.analyze_skills(skills) == first
    assert career_analyzer.analyze_skills(list(reversed(skills))).recommendation == first.recommendation


def test_engine_failure_degrades_to_explorer(caplog):
    registry.register(_BrokenCategorizer())
    with caplog.at_level("ERROR"):
        result = career_analyzer.analyze_skills(SURGEON_SKILLS)

    assert result.degraded is True
    assert result.recommendation.title == "Career Explorer"
    assert result.recommendation.match_score == 60
    assert "Career analysis failed" in caplog.text


def test_fallback_analysis_shape():
    result = career_analyzer.fallback_analysis()
    assert result.degraded is True
    assert result.recommendation.key == "career_explorer"
    assert result.recommendation.average_salary == 65000


def test_serializes_camel_case():
    payload = career_analyzer.analyze_skills(SURGEON_SKILLS).model_dump(by_alias=True)
    assert "alternativePaths" in payload
    assert "strengthAreas" in payload
    assert payload["recommendation"]["matchScore"] == 97
    assert payload["recommendation"]["averageSalary"] == 400000
    assert "skillGaps" in payload["recommendation"]


@pytest.mark.parametrize("skills", [["HTML", "CSS"], ["html", "css"]])
def test_case_insensitive_end_to_end(skills):
    assert career_analyzer.analyze_skills(skills).recommendation.key == "technology_professional"


def test_long_skill_list_is_analyzed():
    result = career_analyzer.analyze_skills(["knitting"] * 1000)
    assert result.recommendation.key == "career_explorer"
    assert result.degraded is False


def test_profile_fields_besides_skills_are_ignored():
    profile = ProfileSnapshot.model_validate({"name": "Sam", "skills": ["surgical"]})
    assert profile.skills == ["surgical"]
    assert not hasattr(profile, "name")


def test_winner_does_not_need_full_rule_scan(monkeypatch):
    monkeypatch.setattr(settings, "alternative_paths_limit", 0)
    engine = registry.get_stage("classifier").engine

    def fail(counts):
        raise AssertionError("matching_rules should not run")

    monkeypatch.setattr(engine, "matching_rules", fail)
    result = career_analyzer.analyze_skills(SURGEON_SKILLS)
    assert result.degraded is False
    assert result.recommendation.key == "surgeon"
    assert result.alternative_paths == []
