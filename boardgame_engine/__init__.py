"""
Board Game Engine

Category counts and discriminant projections of board game data, ready
for a pie chart and a scatter plot.

Usage:
    from boardgame_engine import DashboardEngine

    engine = DashboardEngine.from_json("data/boardgames_40.json")
    snapshot = engine.update(ages=[8, 10], categories=["Fantasy", "Adventure"])
    print(snapshot.categories.to_frame())
"""

from .config import __version__, __author__, __project__
from .data import GameRecord, load_games
from .engine_core import (
    ColorAssigner,
    FilterState,
    DashboardEngine,
    aggregate,
    project,
)

__all__ = [
    '__version__',
    '__author__',
    '__project__',
    'GameRecord',
    'load_games',
    'ColorAssigner',
    'FilterState',
    'DashboardEngine',
    'aggregate',
    'project',
]
