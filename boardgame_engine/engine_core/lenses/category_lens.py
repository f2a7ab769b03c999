"""
Category Lens - Top board game categories by count

Groups the age-filtered games by category tag and keeps the best-rated
game of each group. Feeds the category pie chart.
"""

from typing import Dict, Any, Optional, Sequence
import logging
import time

import pandas as pd

from ...data.records import GameRecord
from ..colors import ColorAssigner
from ..filters import FilterState
from ..results import CategoryBreakdown, CategorySummary
from .base_lens import BaseLens

logger = logging.getLogger(__name__)

DEFAULT_TOP_N = 10


def _check_top_n(top_n: int) -> int:
    if top_n < 0:
        raise ValueError(f"top_n must be non-negative, got {top_n}")
    return top_n


def aggregate(
    records: Sequence[GameRecord],
    filter_state: FilterState,
    colors: Optional[ColorAssigner] = None,
    top_n: int = DEFAULT_TOP_N
) -> CategoryBreakdown:
    """
    Count games per category for the accepted ages.

    A game tagged with several categories counts once in each. The top game
    of a category only changes on a strictly higher rating, so the first
    seen game wins ties. Categories are ordered by count, descending; equal
    counts keep first-seen order.

    Args:
        records: All loaded games
        filter_state: Only `ages` is used
        colors: Pie chart color assigner; emitted categories get a color
        top_n: Number of categories to keep

    Returns:
        CategoryBreakdown with at most top_n summaries

    Raises:
        ValueError: If top_n is negative
    """
    _check_top_n(top_n)

    groups: Dict[str, Dict[str, Any]] = {}
    n_games = 0

    for game in records:
        if not filter_state.accepts_age(game.age):
            continue
        n_games += 1
        rating = game.rating_score
        # A duplicated tag on one game still counts once
        for category in dict.fromkeys(game.categories):
            entry = groups.get(category)
            if entry is None:
                groups[category] = {"count": 1, "top_game": game}
            else:
                entry["count"] += 1
                if rating > entry["top_game"].rating_score:
                    entry["top_game"] = game

    # sorted() is stable: equal counts keep insertion (first-seen) order
    ranked = sorted(groups.items(), key=lambda item: item[1]["count"], reverse=True)

    summaries = []
    for name, entry in ranked[:top_n]:
        color = colors.color_for(name) if colors is not None else None
        summaries.append(
            CategorySummary(
                name=name,
                count=entry["count"],
                top_game=entry["top_game"],
                color=color,
            )
        )

    ages = sorted(filter_state.ages, key=lambda a: (a is None, a if a is not None else 0))
    return CategoryBreakdown(summaries=tuple(summaries), ages=tuple(ages), n_games=n_games)


class CategoryLens(BaseLens):
    """
    Category Lens: category counts for the pie chart.

    Provides:
    - Top categories by number of games
    - Best-rated game per category
    - Stable slice colors across filter changes
    """

    name = "categories"
    description = "Top board game categories by count, filtered by minimum age"
    chart = "pie"

    def __init__(
        self,
        colors: Optional[ColorAssigner] = None,
        top_n: int = DEFAULT_TOP_N,
        **kwargs
    ):
        super().__init__(**kwargs)
        self.colors = colors
        self.top_n = _check_top_n(top_n)

    def analyze(
        self,
        records: Sequence[GameRecord],
        filter_state: FilterState,
        top_n: Optional[int] = None,
        **kwargs
    ) -> CategoryBreakdown:
        """
        Compute the category breakdown.

        Args:
            records: All loaded games
            filter_state: Current selection
            top_n: Override the lens' top_n

        Returns:
            CategoryBreakdown
        """
        start_time = time.time()

        self.validate_input(records)
        result = aggregate(
            records,
            filter_state,
            colors=self.colors,
            top_n=self.top_n if top_n is None else top_n,
        )

        self._computation_time = time.time() - start_time
        self._last_result = result

        logger.info(
            f"Category lens: {result.n_games} games matched "
            f"{len(filter_state.ages)} ages, {len(result)} categories emitted"
        )
        return result

    def to_frame(self, result: CategoryBreakdown) -> pd.DataFrame:
        return result.to_frame()
