"""
Board Game Engine - Data loading
"""

from .records import GameRecord, Rating
from .loader import DataLoadError, load_games, parse_games, records_to_frame

__all__ = [
    'GameRecord',
    'Rating',
    'DataLoadError',
    'load_games',
    'parse_games',
    'records_to_frame',
]
