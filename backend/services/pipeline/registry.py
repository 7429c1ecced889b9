"""Lazy-loading stage registry for the career pipeline.

Global singletons, created on first use. The app lifespan preloads every stage
so that configuration errors surface at startup instead of on a request.
"""

import logging

from services.pipeline.base import BaseStageService

logger = logging.getLogger(__name__)

STAGES = ("categorizer", "classifier")

_registry: dict[str, BaseStageService] = {}


def _create_stage(name: str) -> BaseStageService:
    """Factory: create a stage service by name with deferred imports."""
    if name == "categorizer":
        from services.pipeline.categorizer import CategorizerService
        return CategorizerService()
    elif name == "classifier":
        from services.pipeline.classifier import ClassifierService
        return ClassifierService()
    else:
        raise ValueError(f"Unknown stage: {name}")


def register(stage: BaseStageService) -> None:
    """Install a pre-built stage (tests, alternative tables)."""
    _registry[stage.stage_name] = stage


def get_stage(name: str) -> BaseStageService:
    """Get a stage by name, creating and loading it on first access."""
    if name not in _registry:
        _registry[name] = _create_stage(name)
    svc = _registry[name]
    svc.ensure_loaded()
    return svc


def preload(*names: str) -> None:
    """Pre-load stages (e.g. at startup). Loads all stages when none are named."""
    for name in names or STAGES:
        get_stage(name)


def clear() -> None:
    """Drop all stages. Useful for testing."""
    _registry.clear()
