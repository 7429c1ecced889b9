"""Static table of career domain categories and their keyword phrases."""

import json
import logging
from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass
from pathlib import Path

from services.career.keywords import CATEGORY_KEYWORDS

logger = logging.getLogger(__name__)


class TaxonomyError(ValueError):
    """Raised when a category table is malformed."""


@dataclass(frozen=True)
class Category:
    name: str
    keywords: tuple[str, ...]

    def matches(self, skill: str) -> bool:
        """True if any keyword occurs inside the (already lowercased) skill."""
        return any(keyword in skill for keyword in self.keywords)


def _normalize_keywords(name: str, keywords: Iterable[str]) -> tuple[str, ...]:
    if isinstance(keywords, str) or not isinstance(keywords, Iterable):
        raise TaxonomyError(f"Category '{name}' keywords must be a list of phrases")

    seen: dict[str, None] = {}
    for keyword in keywords:
        if not isinstance(keyword, str) or not keyword.strip():
            raise TaxonomyError(f"Category '{name}' has a blank keyword")
        seen.setdefault(keyword.lower(), None)
    if not seen:
        raise TaxonomyError(f"Category '{name}' has no keywords")
    return tuple(seen)


def _reject_duplicate_keys(pairs: list[tuple[str, object]]) -> dict[str, object]:
    # json.load would otherwise keep the last duplicate silently
    table: dict[str, object] = {}
    for key, value in pairs:
        if key in table:
            raise TaxonomyError(f"Duplicate category: {key}")
        table[key] = value
    return table


class Taxonomy:
    """Ordered, immutable collection of categories.

    Validation happens in the constructor so that a broken table is a startup
    failure rather than a category that silently never matches.
    """

    def __init__(self, categories: Mapping[str, Iterable[str]]) -> None:
        if not categories:
            raise TaxonomyError("Taxonomy must define at least one category")

        built: dict[str, Category] = {}
        for name, keywords in categories.items():
            if not isinstance(name, str) or not name.strip():
                raise TaxonomyError("Category names must be non-empty strings")
            if name in built:
                raise TaxonomyError(f"Duplicate category: {name}")
            built[name] = Category(name=name, keywords=_normalize_keywords(name, keywords))

        self._categories = built
        self._keyword_sets = {name: frozenset(c.keywords) for name, c in built.items()}

    @classmethod
    def from_file(cls, path: str | Path) -> "Taxonomy":
        """Load a ``{"category": ["keyword", ...]}`` JSON document."""
        path = Path(path)
        try:
            with path.open("r", encoding="utf-8") as handle:
                raw = json.load(handle, object_pairs_hook=_reject_duplicate_keys)
        except (OSError, json.JSONDecodeError) as e:
            raise TaxonomyError(f"Could not read taxonomy file {path}: {e}") from e

        if not isinstance(raw, dict):
            raise TaxonomyError(f"Taxonomy file {path} must contain a JSON object")
        taxonomy = cls(raw)
        logger.info("Loaded %d categories from %s", len(taxonomy), path)
        return taxonomy

    def keywords_for(self, category: str) -> frozenset[str]:
        return self._keyword_sets[category]

    def all_categories(self) -> list[str]:
        return list(self._categories)

    def get(self, category: str) -> Category:
        return self._categories[category]

    def __contains__(self, category: object) -> bool:
        return category in self._categories

    def __iter__(self) -> Iterator[Category]:
        return iter(self._categories.values())

    def __len__(self) -> int:
        return len(self._categories)


DEFAULT_TAXONOMY = Taxonomy(CATEGORY_KEYWORDS)
