"""
Base Lens - Abstract interface for the dashboard lenses
"""

from abc import ABC, abstractmethod
from typing import Dict, Any, Optional, Sequence
from pathlib import Path
from datetime import datetime
import json
import logging

import numpy as np
import pandas as pd

from ...data.records import GameRecord
from ..filters import FilterState

logger = logging.getLogger(__name__)


class BaseLens(ABC):
    """
    Abstract base class for the dashboard lenses.

    Each lens turns the full game list plus the current filter state into
    the data one chart draws. All lenses must implement:
    - analyze(): Compute the chart data
    - to_frame(): Tabular view of a result
    """

    # Lens metadata
    name: str = "base"
    description: str = "Base lens class"
    chart: str = "none"

    def __init__(self, checkpoint_dir: Optional[Path] = None):
        """
        Initialize lens.

        Args:
            checkpoint_dir: Directory for saving result exports
        """
        self.checkpoint_dir = Path(checkpoint_dir) if checkpoint_dir else Path("output/lens_outputs")
        self._last_result: Optional[Any] = None
        self._computation_time: float = 0.0

    @abstractmethod
    def analyze(
        self,
        records: Sequence[GameRecord],
        filter_state: FilterState,
        **kwargs
    ) -> Any:
        """
        Run the lens.

        Args:
            records: All loaded games
            filter_state: Current control selection
            **kwargs: Lens-specific parameters

        Returns:
            Immutable result value
        """
        pass

    @abstractmethod
    def to_frame(self, result: Any) -> pd.DataFrame:
        """DataFrame view of a result returned by analyze()."""
        pass

    def validate_input(self, records: Sequence[GameRecord]) -> bool:
        """
        Validate input records.

        Args:
            records: Input games

        Returns:
            True if valid

        Raises:
            ValueError: If invalid
        """
        if records is None:
            raise ValueError("Input records are missing")

        for i, record in enumerate(records):
            if not isinstance(record, GameRecord):
                raise ValueError(
                    f"Record {i} must be a GameRecord, got {type(record).__name__}"
                )

        return True

    @property
    def last_result(self) -> Optional[Any]:
        return self._last_result

    def save_checkpoint(self, result: Any, name: Optional[str] = None) -> Path:
        """
        Save a result as JSON.

        Args:
            result: Result returned by analyze()
            name: Optional custom name

        Returns:
            Path to saved file
        """
        self.checkpoint_dir.mkdir(parents=True, exist_ok=True)
        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        name = name or self.name
        checkpoint_path = self.checkpoint_dir / f"{name}_{timestamp}.json"

        def convert(obj):
            if hasattr(obj, "to_dict") and not isinstance(obj, (pd.DataFrame, pd.Series)):
                return obj.to_dict()
            if isinstance(obj, np.ndarray):
                return obj.tolist()
            if isinstance(obj, pd.DataFrame):
                return obj.to_dict(orient="records")
            if isinstance(obj, pd.Series):
                return obj.to_dict()
            if isinstance(obj, (np.integer,)):
                return int(obj)
            if isinstance(obj, (np.floating,)):
                return float(obj)
            return obj

        with open(checkpoint_path, "w") as f:
            json.dump(convert(result), f, indent=2, default=str)

        logger.info(f"Checkpoint saved: {checkpoint_path}")
        return checkpoint_path

    def get_metadata(self) -> Dict[str, Any]:
        """Get lens metadata."""
        return {
            "name": self.name,
            "description": self.description,
            "chart": self.chart,
            "last_computation_time": self._computation_time,
        }

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(name='{self.name}')"
