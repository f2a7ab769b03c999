"""
Tests for settings loading
"""

import pytest


class TestLoadSettings:

    def test_defaults(self, test_settings):
        assert test_settings["categories"]["top_n"] == 10
        assert len(test_settings["categories"]["palette"]) == 10
        assert test_settings["projection"]["presets"]["Fantasy"] == "#1f77b4"

    def test_override_merges(self, tmp_path):
        from boardgame_engine.config import load_settings

        path = tmp_path / "override.yaml"
        path.write_text("categories:\n  top_n: 5\n")

        settings = load_settings(path)

        assert settings["categories"]["top_n"] == 5
        assert len(settings["categories"]["palette"]) == 10

    def test_env_var_override(self, tmp_path, monkeypatch):
        from boardgame_engine.config import CONFIG_ENV_VAR, load_settings

        path = tmp_path / "override.yaml"
        path.write_text("projection:\n  ridge: 0.001\n")
        monkeypatch.setenv(CONFIG_ENV_VAR, str(path))

        assert load_settings()["projection"]["ridge"] == 0.001

    def test_invalid_yaml(self, tmp_path):
        from boardgame_engine.config import ConfigError, load_settings

        path = tmp_path / "broken.yaml"
        path.write_text("categories: [unclosed\n")

        with pytest.raises(ConfigError, match="Invalid YAML"):
            load_settings(path)

    def test_missing_file(self, tmp_path):
        from boardgame_engine.config import ConfigError, load_settings

        with pytest.raises(ConfigError, match="not found"):
            load_settings(tmp_path / "nope.yaml")


class TestDataPath:

    def test_default_is_bundled_sample(self, test_settings):
        from boardgame_engine.config import PROJECT_ROOT, resolve_data_path

        path = resolve_data_path(test_settings)

        assert path == PROJECT_ROOT / "data" / "boardgames_sample.json"
        assert path.exists()

    def test_absolute_path_kept(self, tmp_path):
        from boardgame_engine.config import resolve_data_path

        target = tmp_path / "games.json"

        assert resolve_data_path({"data": {"path": str(target)}}) == target

    def test_missing_key(self):
        from boardgame_engine.config import ConfigError, resolve_data_path

        with pytest.raises(ConfigError, match="data.path"):
            resolve_data_path({})
