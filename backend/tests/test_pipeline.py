"""Tests for the pipeline stages and their registry."""

import json

import pytest

from config import settings
from services.career.rules import RuleTableError
from services.career.taxonomy import DEFAULT_TAXONOMY, Taxonomy, TaxonomyError
from services.pipeline import registry
from services.pipeline.categorizer import CategorizerService
from services.pipeline.classifier import ClassifierService


def test_stages_load_lazily():
    stage = registry.get_stage("categorizer")
    assert stage.is_loaded
    assert stage.taxonomy is DEFAULT_TAXONOMY


def test_get_stage_returns_singleton():
    assert registry.get_stage("classifier") is registry.get_stage("classifier")


def test_unknown_stage():
    with pytest.raises(ValueError, match="Unknown stage"):
        registry.get_stage("ranker")


def test_preload_loads_every_stage():
    registry.preload()
    assert registry.get_stage("categorizer").is_loaded
    assert registry.get_stage("classifier").is_loaded


def test_categorizer_predict():
    counts = registry.get_stage("categorizer").predict(skills=["docker", "kubernetes"])
    assert counts["devops"] == 2


def test_classifier_predict():
    rec = registry.get_stage("classifier").predict(counts={"surgery": 3})
    assert rec.key == "surgeon"
    assert rec.match_score == 97


def test_categorizer_reads_taxonomy_path(monkeypatch, tmp_path):
    path = tmp_path / "taxonomy.json"
    path.write_text(json.dumps({"web": ["react"]}))
    monkeypatch.setattr(settings, "taxonomy_path", str(path))

    stage = CategorizerService()
    stage.ensure_loaded()
    assert stage.taxonomy.all_categories() == ["web"]


def test_bad_taxonomy_path_fails_preload(monkeypatch, tmp_path):
    monkeypatch.setattr(settings, "taxonomy_path", str(tmp_path / "missing.json"))
    with pytest.raises(TaxonomyError):
        registry.preload()


def test_rules_are_checked_against_loaded_taxonomy():
    registry.register(CategorizerService(Taxonomy({"surgery": ["surgery"]})))
    with pytest.raises(RuleTableError):
        registry.preload()


def test_registered_classifier_is_used():
    registry.register(ClassifierService())
    stage = registry.get_stage("classifier")
    assert len(stage.engine.rules) == 24


def test_stage_logs_loaded_table(caplog):
    with caplog.at_level("INFO", logger="services.pipeline.base"):
        registry.preload()
    assert "Stage categorizer ready: 21 categories (built-in taxonomy)" in caplog.text
    assert "Stage classifier ready: 24 rules, default 'Career Explorer'" in caplog.text


def test_failed_load_leaves_stage_unloaded(caplog):
    stage = ClassifierService()
    registry.register(CategorizerService(Taxonomy({"surgery": ["surgery"]})))
    with caplog.at_level("ERROR", logger="services.pipeline.base"):
        with pytest.raises(RuleTableError):
            stage.ensure_loaded()
    assert not stage.is_loaded
    assert "Stage classifier failed to load" in caplog.text
