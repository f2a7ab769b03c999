"""
Board Game Engine Configuration
===============================

Project metadata, path resolution and the YAML settings loader.
"""

from __future__ import annotations

__version__ = "0.1.0"
__author__ = "Board Game Engine Contributors"
__project__ = "Board Game Engine"

# Project paths are computed relative to this file
import copy
import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

logger = logging.getLogger(__name__)

PACKAGE_DIR = Path(__file__).parent.resolve()
DEFAULT_SETTINGS_PATH = PACKAGE_DIR / "settings.yaml"

ROOT_ENV_VAR = "BOARDGAME_ENGINE_ROOT"
CONFIG_ENV_VAR = "BOARDGAME_ENGINE_CONFIG"


class ConfigError(Exception):
    """Raised when a settings file cannot be loaded."""
    pass


def get_project_root() -> Path:
    """
    Get project root directory.

    Resolution order:
    1. BOARDGAME_ENGINE_ROOT environment variable (if set and existing)
    2. Parent of the package directory (standard checkout)

    Returns:
        Path to the project root directory
    """
    env_root = os.environ.get(ROOT_ENV_VAR)
    if env_root:
        env_path = Path(env_root)
        if env_path.exists():
            return env_path

    return PACKAGE_DIR.parent


PROJECT_ROOT = get_project_root()

LOGS_DIR = PROJECT_ROOT / "logs"


def load_yaml_file(filepath: Path) -> Dict[str, Any]:
    """
    Load a single YAML file.

    Args:
        filepath: Path to the YAML file

    Returns:
        Parsed YAML contents as dictionary

    Raises:
        ConfigError: If file cannot be loaded or is not a mapping
    """
    try:
        with open(filepath) as f:
            data = yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {filepath}: {e}")
    except FileNotFoundError:
        raise ConfigError(f"Settings file not found: {filepath}")
    except OSError as e:
        raise ConfigError(f"Error loading {filepath}: {e}")

    if not isinstance(data, dict):
        raise ConfigError(f"Settings file {filepath} must contain a mapping")
    return data


def _merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    """Recursively merge override into a copy of base."""
    result = copy.deepcopy(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(result.get(key), dict):
            result[key] = _merge(result[key], value)
        else:
            result[key] = value
    return result


def load_settings(path: Optional[Path] = None) -> Dict[str, Any]:
    """
    Load engine settings.

    The bundled settings.yaml provides every default. A user file, given
    explicitly or through BOARDGAME_ENGINE_CONFIG, is merged over it.

    Args:
        path: Optional user settings file

    Returns:
        Settings dictionary
    """
    settings = load_yaml_file(DEFAULT_SETTINGS_PATH)

    if path is None and os.environ.get(CONFIG_ENV_VAR):
        path = Path(os.environ[CONFIG_ENV_VAR])

    if path is not None:
        logger.info(f"Loading settings override: {path}")
        settings = _merge(settings, load_yaml_file(Path(path)))

    return settings


def resolve_data_path(settings: Dict[str, Any]) -> Path:
    """
    Default games file from settings; relative paths resolve against PROJECT_ROOT.

    Raises:
        ConfigError: If settings have no data.path
    """
    raw = settings.get("data", {}).get("path")
    if not raw:
        raise ConfigError("No data file given and settings have no data.path")

    path = Path(raw).expanduser()
    if not path.is_absolute():
        path = PROJECT_ROOT / path
    return path
