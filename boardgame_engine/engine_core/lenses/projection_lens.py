"""
Projection Lens - Linear discriminant projection of games

Standardizes seven numeric game features and projects them into two
discriminant dimensions supervised by each game's first category.
Feeds the category scatter plot.
"""

from typing import Optional, Sequence
import logging
import time

import pandas as pd

from ...data.records import GameRecord
from ..colors import ColorAssigner
from ..features import build_feature_matrix, lda_projection, standardize
from ..filters import FilterState
from ..results import ProjectedPoint, ProjectionResult, ProjectionStatus
from .base_lens import BaseLens

logger = logging.getLogger(__name__)

MIN_CATEGORIES = 2
MIN_GAMES = 2
N_COMPONENTS = 2


def project(
    records: Sequence[GameRecord],
    filter_state: FilterState,
    colors: Optional[ColorAssigner] = None,
    ridge: float = 1e-6
) -> ProjectionResult:
    """
    Project the games of the selected categories into two dimensions.

    Only games whose first category is selected take part, and games with a
    non-numeric feature are left out. Points come back in input order for
    the remaining games.

    Args:
        records: All loaded games
        filter_state: Only `categories` is used; order gives the labels
        colors: Scatter color assigner; each game's category gets a color
        ridge: Within-class scatter regularization

    Returns:
        ProjectionResult, INSUFFICIENT_DATA when fewer than two categories
        are selected or fewer than two games remain
    """
    categories = filter_state.categories
    matrix, labels, games = build_feature_matrix(records, categories)

    if colors is not None:
        for game in games:
            colors.color_for(game.primary_category)

    if len(games) < MIN_GAMES or len(categories) < MIN_CATEGORIES:
        logger.info(
            f"Projection skipped: {len(categories)} categories selected, "
            f"{len(games)} games eligible"
        )
        return ProjectionResult.insufficient(categories)

    X = standardize(matrix)
    projected = lda_projection(X, labels, n_components=N_COMPONENTS, ridge=ridge)

    points = []
    for game, label, row in zip(games, labels, projected):
        category = categories[label]
        points.append(
            ProjectedPoint(
                game=game,
                x=float(row[0]),
                y=float(row[1]),
                label=category,
                label_index=int(label),
                color=colors.get(category) if colors is not None else None,
            )
        )

    legend_colors = ()
    if colors is not None:
        legend_colors = tuple((c, colors.get(c)) for c in categories if c in colors)

    return ProjectionResult(
        status=ProjectionStatus.OK,
        points=tuple(points),
        categories=tuple(categories),
        colors=legend_colors,
    )


class ProjectionLens(BaseLens):
    """
    Projection Lens: discriminant projection for the scatter plot.

    Provides:
    - 2-D coordinates per eligible game
    - An explicit insufficient-data state
    - Stable point colors across selection changes
    """

    name = "projection"
    description = "LDA projection of selected board game categories"
    chart = "scatter"

    def __init__(
        self,
        colors: Optional[ColorAssigner] = None,
        ridge: float = 1e-6,
        **kwargs
    ):
        super().__init__(**kwargs)
        self.colors = colors
        self.ridge = ridge

    def analyze(
        self,
        records: Sequence[GameRecord],
        filter_state: FilterState,
        **kwargs
    ) -> ProjectionResult:
        """
        Run the projection.

        Args:
            records: All loaded games
            filter_state: Current selection

        Returns:
            ProjectionResult
        """
        start_time = time.time()

        self.validate_input(records)
        result = project(
            records,
            filter_state,
            colors=self.colors,
            ridge=kwargs.get("ridge", self.ridge),
        )

        self._computation_time = time.time() - start_time
        self._last_result = result

        if not result.insufficient_data:
            logger.info(
                f"Projection lens: {len(result)} games projected "
                f"over {len(filter_state.categories)} categories"
            )
        return result

    def to_frame(self, result: ProjectionResult) -> pd.DataFrame:
        return result.to_frame()
