"""
Game records - immutable views over the JSON game objects
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional, Tuple

from ..utils.number_cleaner import NonNumericValue, coerce_feature, parse_age


@dataclass(frozen=True)
class Rating:
    """Rating block of a game: average score and number of reviews."""

    score: Optional[float] = None
    num_of_reviews: Any = None
    raw_score: Any = field(default=None, compare=False, repr=False)

    @classmethod
    def from_value(cls, value: Any) -> Optional["Rating"]:
        if value is None:
            return None
        if isinstance(value, Mapping):
            return cls(
                score=_optional_score(value.get("rating")),
                num_of_reviews=value.get("num_of_reviews"),
                raw_score=value.get("rating"),
            )
        # Bare number: a score without a review count
        return cls(score=_optional_score(value), raw_score=value)


def _optional_score(value: Any) -> Optional[float]:
    if value is None:
        return None
    try:
        return coerce_feature(value)
    except NonNumericValue:
        return None


def _category_names(data: Mapping[str, Any]) -> Tuple[str, ...]:
    """
    Category names in listed order.

    Accepts the nested shape ({"types": {"categories": [{"name": ...}]}})
    and a flat list of names or name objects under "categories".
    """
    types = data.get("types")
    if isinstance(types, Mapping) and types.get("categories") is not None:
        raw = types.get("categories")
    else:
        raw = data.get("categories")

    if not raw:
        return ()

    names = []
    for entry in raw:
        if isinstance(entry, Mapping):
            name = entry.get("name")
        else:
            name = entry
        if isinstance(name, str) and name:
            names.append(name)
    return tuple(names)


@dataclass(frozen=True)
class GameRecord:
    """
    One board game as loaded from JSON.

    Numeric fields keep their raw JSON values so that placeholders such as
    "N/A" survive loading; coercion happens where a number is needed.
    """

    title: Optional[str] = None
    year: Any = None
    minage: Any = None
    minplayers: Any = None
    maxplayers: Any = None
    minplaytime: Any = None
    maxplaytime: Any = None
    rating: Optional[Rating] = None
    categories: Tuple[str, ...] = ()
    raw: Mapping[str, Any] = field(default_factory=dict, compare=False, repr=False)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "GameRecord":
        return cls(
            title=data.get("title"),
            year=data.get("year"),
            minage=data.get("minage"),
            minplayers=data.get("minplayers"),
            maxplayers=data.get("maxplayers"),
            minplaytime=data.get("minplaytime"),
            maxplaytime=data.get("maxplaytime"),
            rating=Rating.from_value(data.get("rating")),
            categories=_category_names(data),
            raw=dict(data),
        )

    @property
    def primary_category(self) -> Optional[str]:
        return self.categories[0] if self.categories else None

    @property
    def age(self) -> Optional[float]:
        return parse_age(self.minage)

    @property
    def rating_score(self) -> float:
        """Rating score, 0.0 when the game has no rating."""
        if self.rating is None or self.rating.score is None:
            return 0.0
        return self.rating.score

    @property
    def num_of_reviews(self) -> Any:
        return None if self.rating is None else self.rating.num_of_reviews

    def to_dict(self) -> Dict[str, Any]:
        """Flat dictionary used for JSON export and DataFrame views."""
        return {
            "title": self.title,
            "year": self.year,
            "minage": self.minage,
            "minplayers": self.minplayers,
            "maxplayers": self.maxplayers,
            "minplaytime": self.minplaytime,
            "maxplaytime": self.maxplaytime,
            "rating": None if self.rating is None else self.rating.score,
            "num_of_reviews": self.num_of_reviews,
            "categories": list(self.categories),
        }
