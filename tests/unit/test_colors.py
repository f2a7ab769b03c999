"""
Tests for ColorAssigner
"""

import pytest


class TestColorAssigner:

    def test_round_robin(self):
        from boardgame_engine.engine_core import ColorAssigner

        colors = ColorAssigner(["red", "green"])

        assert [colors.color_for(n) for n in ["a", "b", "c"]] == ["red", "green", "red"]

    def test_idempotent(self):
        from boardgame_engine.engine_core import ColorAssigner

        colors = ColorAssigner(["red", "green", "blue"])
        first = colors.color_for("Fantasy")
        colors.color_for("Adventure")

        assert colors.color_for("Fantasy") == first
        assert len(colors) == 2

    def test_presets_advance_rotation(self):
        from boardgame_engine.engine_core import ColorAssigner

        colors = ColorAssigner(["red", "green", "blue"], presets={"Fantasy": "gold"})

        assert colors.color_for("Fantasy") == "gold"
        assert colors.color_for("Party") == "green"

    def test_get_does_not_assign(self):
        from boardgame_engine.engine_core import ColorAssigner

        colors = ColorAssigner(["red"])

        assert colors.get("Fantasy") is None
        assert "Fantasy" not in colors

    def test_separate_assigners_are_independent(self):
        from boardgame_engine.engine_core import ColorAssigner

        pie = ColorAssigner(["red", "green"])
        scatter = ColorAssigner(["blue", "gold"])
        pie.color_for("Dice")

        assert scatter.color_for("Fantasy") == "blue"
        assert "Fantasy" not in pie

    def test_empty_palette_rejected(self):
        from boardgame_engine.engine_core import ColorAssigner

        with pytest.raises(ValueError, match="at least one"):
            ColorAssigner([])
