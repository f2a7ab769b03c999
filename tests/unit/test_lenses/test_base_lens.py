"""
Tests for BaseLens functionality
"""

import pytest


class TestBaseLensValidation:
    """Test input validation."""

    def test_validate_rejects_missing_records(self):
        from boardgame_engine.engine_core import CategoryLens

        lens = CategoryLens()

        with pytest.raises(ValueError, match="missing"):
            lens.validate_input(None)

    def test_validate_rejects_raw_dicts(self, game_factory):
        from boardgame_engine.engine_core import ProjectionLens

        lens = ProjectionLens()

        with pytest.raises(ValueError, match="GameRecord"):
            lens.validate_input([game_factory("Raw", ["Fantasy"])])

    def test_validate_accepts_empty_list(self):
        from boardgame_engine.engine_core import CategoryLens

        assert CategoryLens().validate_input([])


class TestBaseLensMetadata:
    """Test metadata and registry lookup."""

    def test_metadata(self, scenario_records):
        from boardgame_engine.engine_core import CategoryLens, FilterState

        lens = CategoryLens()
        lens.analyze(scenario_records, FilterState(ages={8}))
        meta = lens.get_metadata()

        assert meta["name"] == "categories"
        assert meta["chart"] == "pie"
        assert meta["last_computation_time"] >= 0
        assert lens.last_result is not None

    def test_get_lens(self):
        from boardgame_engine.engine_core import ProjectionLens, get_lens

        assert isinstance(get_lens("projection"), ProjectionLens)

    def test_get_lens_unknown(self):
        from boardgame_engine.engine_core import get_lens

        with pytest.raises(ValueError, match="Unknown lens"):
            get_lens("pca")
