"""
Dashboard Engine - High-level API for the two dashboard charts
"""

from dataclasses import dataclass
from typing import Any, Callable, Dict, Iterable, List, Optional, Sequence, Union
from pathlib import Path
from datetime import datetime
import json
import logging

from ...config import load_settings
from ...data.loader import load_games
from ...data.records import GameRecord
from ..colors import ColorAssigner
from ..filters import FilterState, available_ages
from ..lenses.category_lens import CategoryLens
from ..lenses.projection_lens import ProjectionLens
from ..results import CategoryBreakdown, ProjectionResult

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DashboardSnapshot:
    """Both chart results for one filter state."""

    filter_state: FilterState
    categories: CategoryBreakdown
    projection: ProjectionResult
    timestamp: str = ""

    def to_dict(self) -> Dict[str, Any]:
        return {
            "timestamp": self.timestamp,
            "filters": self.filter_state.to_dict(),
            "categories": self.categories.to_dict(),
            "projection": self.projection.to_dict(),
        }


Subscriber = Callable[[DashboardSnapshot], None]


class DashboardEngine:
    """
    High-level interface for the dashboard.

    Provides a simple API to:
    1. Hold the loaded games and the current filter state
    2. Recompute both charts on every filter change
    3. Notify the rendering layer with the new results
    """

    def __init__(
        self,
        records: Sequence[GameRecord],
        filter_state: Optional[FilterState] = None,
        config: Optional[Dict] = None
    ):
        """
        Initialize the dashboard engine.

        Args:
            records: Loaded games
            filter_state: Initial selection (default: all ages, configured categories)
            config: Settings dictionary (default: load_settings())
        """
        self.config = config if config is not None else load_settings()
        self.records: List[GameRecord] = list(records)

        cat_cfg = self.config.get("categories", {})
        proj_cfg = self.config.get("projection", {})

        self.pie_colors = ColorAssigner(cat_cfg["palette"])
        self.scatter_colors = ColorAssigner(
            proj_cfg["palette"],
            presets=proj_cfg.get("presets"),
        )

        self.category_lens = CategoryLens(
            colors=self.pie_colors,
            top_n=cat_cfg.get("top_n", 10),
        )
        self.projection_lens = ProjectionLens(
            colors=self.scatter_colors,
            ridge=proj_cfg.get("ridge", 1e-6),
        )

        if filter_state is None:
            filter_state = FilterState.all_ages(
                self.records,
                categories=proj_cfg.get("default_categories", ()),
            )
        self.filter_state = filter_state

        self._subscribers: List[Subscriber] = []
        self.last_snapshot: Optional[DashboardSnapshot] = None

    @classmethod
    def from_json(
        cls,
        path: Union[str, Path],
        config: Optional[Dict] = None,
        **kwargs
    ) -> "DashboardEngine":
        """Load games from a JSON file and build an engine over them."""
        return cls(load_games(path), config=config, **kwargs)

    @property
    def available_ages(self) -> List[int]:
        return available_ages(self.records)

    def subscribe(self, callback: Subscriber) -> None:
        """Register a callback receiving every new snapshot."""
        if callback not in self._subscribers:
            self._subscribers.append(callback)

    def unsubscribe(self, callback: Subscriber) -> None:
        if callback in self._subscribers:
            self._subscribers.remove(callback)

    def refresh(self) -> DashboardSnapshot:
        """
        Recompute both charts for the current filter state.

        Returns:
            The new snapshot, also passed to every subscriber
        """
        state = self.filter_state
        logger.info(
            f"Recomputing dashboard: {len(state.ages)} ages, "
            f"{len(state.categories)} categories"
        )

        snapshot = DashboardSnapshot(
            filter_state=state,
            categories=self.category_lens.analyze(self.records, state),
            projection=self.projection_lens.analyze(self.records, state),
            timestamp=datetime.now().isoformat(),
        )
        self.last_snapshot = snapshot

        for callback in list(self._subscribers):
            callback(snapshot)

        return snapshot

    def update(
        self,
        ages: Optional[Iterable[Optional[float]]] = None,
        categories: Optional[Sequence[str]] = None
    ) -> DashboardSnapshot:
        """
        Apply a control change and recompute.

        Args:
            ages: New accepted ages (unchanged if None)
            categories: New selected categories (unchanged if None)

        Returns:
            The new snapshot
        """
        state = self.filter_state
        if ages is not None:
            state = state.with_ages(ages)
        if categories is not None:
            state = state.with_categories(categories)
        self.filter_state = state
        return self.refresh()

    def export(self, path: Union[str, Path]) -> Path:
        """
        Write the last snapshot as JSON.

        Raises:
            ValueError: If nothing has been computed yet
        """
        if self.last_snapshot is None:
            raise ValueError("No results to export. Run refresh() first.")

        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "w") as f:
            json.dump(self.last_snapshot.to_dict(), f, indent=2, default=str)

        logger.info(f"Dashboard snapshot saved: {path}")
        return path
