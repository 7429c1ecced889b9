"""Shared lifecycle for the career pipeline stages.

A stage owns one immutable table (the category taxonomy or the rule cascade).
The table is built once, on first use or at app startup, and a malformed table
raises out of ``ensure_loaded`` so the stage never serves a half-built state.
"""

from abc import ABC, abstractmethod
from typing import Any
import logging

logger = logging.getLogger(__name__)


class BaseStageService(ABC):
    """Base class for pipeline stages.

    Subclasses set ``stage_name`` and implement ``load``, ``describe`` and
    ``predict``.
    """

    stage_name: str = ""
    _loaded: bool = False

    @abstractmethod
    def load(self) -> None:
        """Build the stage table. Raises on malformed configuration."""

    @abstractmethod
    def describe(self) -> str:
        """One-line summary of the loaded table, used in startup logs."""

    @abstractmethod
    def predict(self, **kwargs: Any) -> Any:
        ...

    @property
    def is_loaded(self) -> bool:
        return self._loaded

    def ensure_loaded(self) -> None:
        if self._loaded:
            return
        try:
            self.load()
        except Exception:
            logger.error("Stage %s failed to load", self.stage_name)
            raise
        self._loaded = True
        logger.info("Stage %s ready: %s", self.stage_name, self.describe())
