"""
Pytest fixtures for Board Game Engine tests
"""

import pytest
import numpy as np


def make_game(
    title,
    categories,
    minage=10,
    rating=7.0,
    reviews=100,
    minplayers=2,
    maxplayers=4,
    minplaytime=30,
    maxplaytime=60,
    year=2015,
):
    """Game object in the nested JSON shape of the source data."""
    game = {
        "title": title,
        "year": year,
        "minage": minage,
        "minplayers": minplayers,
        "maxplayers": maxplayers,
        "minplaytime": minplaytime,
        "maxplaytime": maxplaytime,
        "types": {"categories": [{"name": c} for c in categories]},
    }
    if rating is not None:
        game["rating"] = {"rating": rating, "num_of_reviews": reviews}
    return game


@pytest.fixture
def game_factory():
    return make_game


@pytest.fixture
def scenario_records():
    """Three games: Fantasy / Fantasy+Adventure / Adventure, ages 8, 8, 10."""
    from boardgame_engine.data import parse_games

    return parse_games([
        make_game("Dragon Keep", ["Fantasy"], minage=8, rating=7.5),
        make_game("Quest Road", ["Fantasy", "Adventure"], minage=8, rating=8.0),
        make_game("Lost Isles", ["Adventure"], minage=10, rating=6.5),
    ])


@pytest.fixture
def sample_records():
    """Forty games over five categories with varied numeric features."""
    from boardgame_engine.data import parse_games

    np.random.seed(42)

    categories = ["Fantasy", "Adventure", "Economic", "Science Fiction", "Fighting"]
    extra_tags = ["Card Game", "Dice", "Miniatures"]
    games = []
    for i in range(40):
        primary = categories[i % len(categories)]
        offset = categories.index(primary)
        tags = [primary] + ([extra_tags[i % 3]] if i % 2 == 0 else [])
        games.append(make_game(
            f"Game {i + 1}",
            tags,
            minage=[8, 10, 12, 14][i % 4],
            rating=round(float(6 + offset * 0.4 + np.random.rand()), 2),
            reviews=int(200 + offset * 150 + np.random.randint(0, 100)),
            minplayers=1 + (offset % 3),
            maxplayers=4 + offset + int(np.random.randint(0, 2)),
            minplaytime=20 + offset * 15 + int(np.random.randint(0, 10)),
            maxplaytime=60 + offset * 20 + int(np.random.randint(0, 20)),
            year=2000 + i,
        ))
    return parse_games(games)


@pytest.fixture
def test_settings():
    """Bundled default settings."""
    from boardgame_engine.config import load_settings

    return load_settings()
