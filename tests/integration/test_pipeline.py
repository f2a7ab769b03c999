"""
Integration tests for the dashboard pipeline
"""

import json

import pytest
import pandas as pd


class TestDashboardEngine:
    """Test the high-level DashboardEngine."""

    def test_initial_state_selects_all_ages(self, sample_records, test_settings):
        from boardgame_engine.engine_core import DashboardEngine

        engine = DashboardEngine(sample_records, config=test_settings)

        assert engine.filter_state.ages == {8, 10, 12, 14}
        assert engine.filter_state.categories == tuple(
            test_settings["projection"]["default_categories"]
        )

    def test_refresh_builds_both_charts(self, sample_records, test_settings):
        from boardgame_engine.engine_core import DashboardEngine

        engine = DashboardEngine(sample_records, config=test_settings)
        snapshot = engine.refresh()

        assert len(snapshot.categories) > 0
        assert not snapshot.projection.insufficient_data
        assert len(snapshot.projection) == len(sample_records)

    def test_subscribers_get_one_snapshot_per_update(self, sample_records, test_settings):
        from boardgame_engine.engine_core import DashboardEngine

        engine = DashboardEngine(sample_records, config=test_settings)
        received = []
        engine.subscribe(received.append)

        engine.update(ages=[8])
        engine.update(categories=["Fantasy"])

        assert len(received) == 2
        assert received[0].filter_state.ages == {8}
        assert received[1].projection.insufficient_data
        # Age selection survives a category change
        assert received[1].filter_state.ages == {8}

    def test_unsubscribe(self, sample_records, test_settings):
        from boardgame_engine.engine_core import DashboardEngine

        engine = DashboardEngine(sample_records, config=test_settings)
        received = []
        engine.subscribe(received.append)
        engine.unsubscribe(received.append)

        engine.refresh()

        assert received == []

    def test_pie_colors_survive_filter_changes(self, sample_records, test_settings):
        from boardgame_engine.engine_core import DashboardEngine

        engine = DashboardEngine(sample_records, config=test_settings)
        first = {s.name: s.color for s in engine.refresh().categories}
        second = engine.update(ages=[12]).categories

        for summary in second:
            assert summary.color == first[summary.name]

    def test_export(self, sample_records, test_settings, tmp_path):
        from boardgame_engine.engine_core import DashboardEngine

        engine = DashboardEngine(sample_records, config=test_settings)
        engine.update(ages=[8, 10], categories=["Fantasy", "Economic"])
        path = engine.export(tmp_path / "snapshot.json")

        with open(path) as f:
            saved = json.load(f)
        assert saved["filters"] == {"ages": [8, 10], "categories": ["Fantasy", "Economic"]}
        assert saved["projection"]["status"] == "ok"

    def test_export_requires_results(self, sample_records, test_settings, tmp_path):
        from boardgame_engine.engine_core import DashboardEngine

        engine = DashboardEngine(sample_records, config=test_settings)

        with pytest.raises(ValueError, match="refresh"):
            engine.export(tmp_path / "snapshot.json")


class TestCLI:
    """Test the command-line front end."""

    @pytest.fixture
    def data_file(self, tmp_path, sample_records):
        path = tmp_path / "games.json"
        path.write_text(json.dumps([dict(r.raw) for r in sample_records]))
        return path

    def test_ages(self, data_file, capsys):
        from boardgame_engine.cli import main

        assert main(["ages", str(data_file)]) == 0
        assert capsys.readouterr().out.split() == ["8", "10", "12", "14"]

    def test_categories_json(self, data_file, tmp_path):
        from boardgame_engine.cli import main

        output = tmp_path / "categories.json"
        assert main(["categories", str(data_file), "--ages", "8", "--top", "3", "--output", str(output)]) == 0

        with open(output) as f:
            saved = json.load(f)
        assert saved["ages"] == [8]
        assert len(saved["categories"]) <= 3

    def test_project_insufficient(self, data_file, capsys):
        from boardgame_engine.cli import main

        assert main(["project", str(data_file), "--categories", "Fantasy"]) == 0
        assert "at least two categories" in capsys.readouterr().out

    def test_project_table(self, data_file, capsys):
        from boardgame_engine.cli import main

        assert main(["project", str(data_file), "--categories", "Fantasy", "Adventure"]) == 0
        out = capsys.readouterr().out
        assert "Fantasy" in out and "Adventure" in out

    def test_missing_data_file(self, tmp_path):
        from boardgame_engine.cli import main

        assert main(["ages", str(tmp_path / "missing.json")]) == 1

    def test_top_zero_is_respected(self, data_file, tmp_path):
        from boardgame_engine.cli import main

        output = tmp_path / "categories.json"
        assert main(["categories", str(data_file), "--top", "0", "--output", str(output)]) == 0

        with open(output) as f:
            assert json.load(f)["categories"] == []

    def test_negative_top_rejected(self, data_file):
        from boardgame_engine.cli import main

        with pytest.raises(SystemExit):
            main(["categories", str(data_file), "--top", "-1"])

    def test_fractional_age_option(self, tmp_path, game_factory):
        from boardgame_engine.cli import main

        path = tmp_path / "games.json"
        path.write_text(json.dumps([
            game_factory("Halfway", ["Party"], minage=8.5),
            game_factory("Eight", ["Euro"], minage=8),
        ]))
        output = tmp_path / "categories.json"

        assert main(["categories", str(path), "--ages", "8.5", "--output", str(output)]) == 0
        with open(output) as f:
            saved = json.load(f)
        assert saved["ages"] == [8.5]
        assert [c["name"] for c in saved["categories"]] == ["Party"]

    def test_data_path_from_settings(self, data_file, tmp_path, capsys):
        from boardgame_engine.cli import main

        config = tmp_path / "settings.yaml"
        config.write_text(f"data:\n  path: {data_file}\n")

        assert main(["--config", str(config), "ages"]) == 0
        assert capsys.readouterr().out.split() == ["8", "10", "12", "14"]

    def test_default_data_path_is_bundled_sample(self, capsys):
        from boardgame_engine.cli import main

        assert main(["ages"]) == 0
        assert capsys.readouterr().out.split()
