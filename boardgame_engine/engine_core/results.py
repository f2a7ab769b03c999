"""
Result values produced by the lenses.

All results are immutable; a new filter state produces new results.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, List, Optional, Sequence, Tuple

import pandas as pd

from ..data.records import GameRecord

MISSING_COLOR = "#ccc"
INSUFFICIENT_DATA_MESSAGE = "Please select at least two categories with data."


def _or(value: Any, placeholder: str) -> Any:
    return placeholder if value is None else value


def _format_rating(game: GameRecord) -> str:
    if game.rating is None or game.rating.score is None:
        return "N/A"
    return f"{game.rating.score:.2f}"


@dataclass(frozen=True)
class CategorySummary:
    """One pie slice: a category, its game count and its best-rated game."""

    name: str
    count: int
    top_game: GameRecord
    color: Optional[str] = None

    def tooltip(self) -> Dict[str, Any]:
        """Fields shown when hovering the slice."""
        game = self.top_game
        return {
            "category": self.name,
            "top_game": game.title,
            "rating": _format_rating(game),
            "year": _or(game.year, "N/A"),
            "players": f"{_or(game.minplayers, '?')} - {_or(game.maxplayers, '?')}",
            "min_age": _or(game.minage, "?"),
            "playtime": f"{_or(game.minplaytime, '?')} - {_or(game.maxplaytime, '?')} min",
        }

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "count": self.count,
            "color": self.color,
            "top_game": self.top_game.to_dict(),
        }


@dataclass(frozen=True)
class CategoryBreakdown:
    """Top categories for the current age filter, largest first."""

    summaries: Tuple[CategorySummary, ...]
    ages: Tuple[Optional[float], ...] = ()
    n_games: int = 0

    def __len__(self) -> int:
        return len(self.summaries)

    def __iter__(self):
        return iter(self.summaries)

    def __getitem__(self, index):
        return self.summaries[index]

    @property
    def names(self) -> List[str]:
        return [s.name for s in self.summaries]

    def counts(self) -> Dict[str, int]:
        return {s.name: s.count for s in self.summaries}

    def to_frame(self) -> pd.DataFrame:
        return pd.DataFrame(
            [
                {
                    "name": s.name,
                    "count": s.count,
                    "top_game": s.top_game.title,
                    "top_rating": s.top_game.rating_score,
                    "color": s.color,
                }
                for s in self.summaries
            ],
            columns=["name", "count", "top_game", "top_rating", "color"],
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "ages": list(self.ages),
            "n_games": self.n_games,
            "categories": [s.to_dict() for s in self.summaries],
        }


@dataclass(frozen=True)
class ProjectedPoint:
    """One scatter point: a game and its 2-D discriminant coordinates."""

    game: GameRecord
    x: float
    y: float
    label: str
    label_index: int
    color: Optional[str] = None

    @property
    def coords(self) -> Tuple[float, float]:
        return (self.x, self.y)

    def tooltip(self, selected_categories: Sequence[str]) -> Dict[str, Any]:
        """Fields shown when hovering the point."""
        game = self.game
        matching = [c for c in game.categories if c in selected_categories]
        return {
            "category": self.label,
            "title": game.title,
            "rating": _format_rating(game),
            "reviews": _or(game.num_of_reviews, "N/A"),
            "players": f"{_or(game.minplayers, '?')} - {_or(game.maxplayers, '?')}",
            "playtime": f"{_or(game.minplaytime, '?')} - {_or(game.maxplaytime, '?')} min",
            "min_age": f"{_or(game.minage, '?')}+",
            "categories": ", ".join(matching) or "None",
        }

    def to_dict(self) -> Dict[str, Any]:
        return {
            "title": self.game.title,
            "category": self.label,
            "label": self.label_index,
            "x": self.x,
            "y": self.y,
            "color": self.color,
        }


class ProjectionStatus(str, Enum):
    OK = "ok"
    INSUFFICIENT_DATA = "insufficient_data"


@dataclass(frozen=True)
class ProjectionResult:
    """
    Outcome of a projection request.

    With INSUFFICIENT_DATA there are no points and `message` explains why;
    callers show the message instead of plotting.
    """

    status: ProjectionStatus
    points: Tuple[ProjectedPoint, ...] = ()
    categories: Tuple[str, ...] = ()
    colors: Tuple[Tuple[str, str], ...] = ()
    message: Optional[str] = None

    @classmethod
    def insufficient(cls, categories: Sequence[str]) -> "ProjectionResult":
        return cls(
            status=ProjectionStatus.INSUFFICIENT_DATA,
            categories=tuple(categories),
            message=INSUFFICIENT_DATA_MESSAGE,
        )

    @property
    def insufficient_data(self) -> bool:
        return self.status is ProjectionStatus.INSUFFICIENT_DATA

    def __len__(self) -> int:
        return len(self.points)

    def coordinates(self) -> List[Tuple[float, float]]:
        return [p.coords for p in self.points]

    def legend(self) -> List[Tuple[str, str]]:
        """(category, color) per selected category, in selection order."""
        known = dict(self.colors)
        return [(c, known.get(c, MISSING_COLOR)) for c in self.categories]

    def to_frame(self) -> pd.DataFrame:
        return pd.DataFrame(
            [
                {
                    "title": p.game.title,
                    "category": p.label,
                    "x": p.x,
                    "y": p.y,
                    "color": p.color,
                }
                for p in self.points
            ],
            columns=["title", "category", "x", "y", "color"],
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "status": self.status.value,
            "message": self.message,
            "categories": list(self.categories),
            "legend": [{"category": c, "color": col} for c, col in self.legend()],
            "points": [p.to_dict() for p in self.points],
        }
