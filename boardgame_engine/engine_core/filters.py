"""
Filter state shared by both dashboard charts
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import FrozenSet, Iterable, List, Optional, Sequence, Tuple

from ..data.records import GameRecord


def available_ages(records: Iterable[GameRecord]) -> List[float]:
    """Sorted unique minimum ages present in the data (None excluded)."""
    return sorted({r.age for r in records if r.age is not None})


def _unique(items: Iterable[str]) -> Tuple[str, ...]:
    seen = []
    for item in items:
        if item not in seen:
            seen.append(item)
    return tuple(seen)


@dataclass(frozen=True)
class FilterState:
    """
    Current selection of the dashboard controls.

    ages: accepted minimum ages; include None to accept games without one
    categories: selected projection categories, in label order
    """

    ages: FrozenSet[Optional[float]] = field(default_factory=frozenset)
    categories: Tuple[str, ...] = ()

    def __post_init__(self):
        object.__setattr__(self, "ages", frozenset(self.ages))
        object.__setattr__(self, "categories", _unique(self.categories))

    @classmethod
    def all_ages(
        cls,
        records: Iterable[GameRecord],
        categories: Sequence[str] = ()
    ) -> "FilterState":
        """State with every available age checked, as on first load."""
        return cls(ages=frozenset(available_ages(records)), categories=tuple(categories))

    def with_ages(self, ages: Iterable[Optional[float]]) -> "FilterState":
        return replace(self, ages=frozenset(ages))

    def with_categories(self, categories: Sequence[str]) -> "FilterState":
        return replace(self, categories=tuple(categories))

    def accepts_age(self, age: Optional[float]) -> bool:
        return age in self.ages

    def label_index(self, category: str) -> int:
        """Integer label of a selected category (ValueError if not selected)."""
        return self.categories.index(category)

    def to_dict(self) -> dict:
        return {
            "ages": sorted(self.ages, key=lambda a: (a is None, a if a is not None else 0)),
            "categories": list(self.categories),
        }
