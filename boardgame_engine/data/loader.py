"""
Game data loader

Reads the JSON array of game objects once and turns it into GameRecords.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Iterable, List, Mapping, Union

import pandas as pd

from .records import GameRecord

logger = logging.getLogger(__name__)


class DataLoadError(Exception):
    """Raised when the game data file cannot be loaded."""
    pass


def parse_games(items: Iterable[Any]) -> List[GameRecord]:
    """
    Convert raw JSON items to GameRecords.

    Non-object items are skipped with a warning.
    """
    records = []
    for i, item in enumerate(items):
        if not isinstance(item, Mapping):
            logger.warning(f"Skipping entry {i}: expected object, got {type(item).__name__}")
            continue
        records.append(GameRecord.from_dict(item))
    return records


def load_games(path: Union[str, Path]) -> List[GameRecord]:
    """
    Load game records from a JSON file.

    Args:
        path: Path to a JSON file holding an array of game objects

    Returns:
        List of GameRecords in file order

    Raises:
        DataLoadError: If the file is missing, invalid, or not an array
    """
    path = Path(path)
    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except FileNotFoundError:
        raise DataLoadError(f"Data file not found: {path}")
    except json.JSONDecodeError as e:
        raise DataLoadError(f"Invalid JSON in {path}: {e}")
    except OSError as e:
        raise DataLoadError(f"Error reading {path}: {e}")

    if not isinstance(data, list):
        raise DataLoadError(
            f"{path} must contain a JSON array, got {type(data).__name__}"
        )

    records = parse_games(data)
    logger.info(f"Loaded {len(records)} games from {path}")
    return records


def records_to_frame(records: Iterable[GameRecord]) -> pd.DataFrame:
    """DataFrame view of the records, one row per game."""
    return pd.DataFrame([r.to_dict() for r in records])
