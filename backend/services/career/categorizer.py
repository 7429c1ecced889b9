"""Bucket free-text skills into per-category counts.

A skill counts toward a category when it contains at least one of that
category's keywords as a substring (case-insensitive). Categories are checked
independently, so one skill can raise several counts.
"""

from collections.abc import Iterator, Mapping, Sequence

from services.career.taxonomy import Taxonomy


class CategoryCounts(Mapping[str, int]):
    """Read-only ``category -> count`` view covering every taxonomy category."""

    def __init__(self, counts: dict[str, int]) -> None:
        self._counts = counts

    def __getitem__(self, category: str) -> int:
        return self._counts[category]

    def __iter__(self) -> Iterator[str]:
        return iter(self._counts)

    def __len__(self) -> int:
        return len(self._counts)

    def __repr__(self) -> str:
        hits = {k: v for k, v in self._counts.items() if v}
        return f"CategoryCounts({hits})"

    def top(self, n: int = 3) -> list[str]:
        """Non-zero categories by descending count; ties keep taxonomy order."""
        ranked = sorted(
            (name for name, count in self._counts.items() if count > 0),
            key=lambda name: -self._counts[name],
        )
        return ranked[:n]

    def total(self) -> int:
        return sum(self._counts.values())

    def as_dict(self) -> dict[str, int]:
        return dict(self._counts)


def count_categories(skills: Sequence[str], taxonomy: Taxonomy) -> CategoryCounts:
    """Count, per category, how many skills match at least one keyword."""
    lowered = [skill.lower() for skill in skills]
    counts: dict[str, int] = {}
    for category in taxonomy:
        counts[category.name] = sum(1 for skill in lowered if category.matches(skill))
    return CategoryCounts(counts)
