#!/usr/bin/env python3
"""
Board Game Engine CLI
=====================

Commands:
    ages [DATA]                     List the minimum ages present in the data
    categories [DATA] [--ages ...]  Top categories by count for the given ages
    project [DATA] --categories ... LDA projection of the selected categories

DATA defaults to data.path from the settings.

Examples:
    boardgame-engine ages
    boardgame-engine categories data/boardgames_sample.json --ages 8 10 --top 5
    boardgame-engine project data/boardgames_sample.json --categories Fantasy Adventure
"""

import argparse
import json
import logging
import sys
from pathlib import Path

import pandas as pd

from .config import ConfigError, load_settings, resolve_data_path
from .data.loader import DataLoadError, load_games
from .engine_core.colors import ColorAssigner
from .engine_core.filters import FilterState, available_ages
from .engine_core.lenses.category_lens import CategoryLens
from .engine_core.lenses.projection_lens import ProjectionLens
from .utils.logging_config import setup_logging
from .utils.number_cleaner import parse_age

logger = logging.getLogger(__name__)

DATA_HELP = "JSON file with an array of games (default: data.path from settings)"


def _age_arg(value):
    age = parse_age(value)
    if age is None:
        raise argparse.ArgumentTypeError(f"invalid age: {value!r}")
    return age


def _top_arg(value):
    top = int(value)
    if top < 0:
        raise argparse.ArgumentTypeError(f"must be non-negative: {value}")
    return top


def parse_args(argv=None):
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog="boardgame-engine",
        description="Board game category counts and LDA projections",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )

    parser.add_argument(
        "--config",
        default=None,
        help="YAML settings file merged over the defaults",
    )

    parser.add_argument(
        "--log-level",
        default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: from settings)",
    )

    sub = parser.add_subparsers(dest="command", required=True)

    ages = sub.add_parser("ages", help="List available minimum ages")
    ages.add_argument("data", nargs="?", default=None, help=DATA_HELP)

    cats = sub.add_parser("categories", help="Top categories by count")
    cats.add_argument("data", nargs="?", default=None, help=DATA_HELP)
    cats.add_argument(
        "--ages",
        nargs="+",
        type=_age_arg,
        default=None,
        help="Accepted minimum ages (default: all)",
    )
    cats.add_argument(
        "--include-missing-age",
        action="store_true",
        help="Also accept games without a minimum age",
    )
    cats.add_argument("--top", type=_top_arg, default=None, help="Number of categories")
    cats.add_argument("--output", default=None, help="Write JSON to this file")

    proj = sub.add_parser("project", help="LDA projection of selected categories")
    proj.add_argument("data", nargs="?", default=None, help=DATA_HELP)
    proj.add_argument(
        "--categories",
        nargs="+",
        default=None,
        help="Selected categories (default: from settings)",
    )
    proj.add_argument("--output", default=None, help="Write JSON to this file")

    return parser.parse_args(argv)


def _write_json(payload, output):
    path = Path(output)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w") as f:
        json.dump(payload, f, indent=2, default=str)
    logger.info(f"Saved {path}")


def _load(args, settings):
    path = args.data if args.data is not None else resolve_data_path(settings)
    return load_games(path)


def cmd_ages(args, settings):
    records = _load(args, settings)
    for age in available_ages(records):
        print(age)
    return 0


def cmd_categories(args, settings):
    records = _load(args, settings)
    cat_cfg = settings["categories"]

    ages = set(args.ages) if args.ages is not None else set(available_ages(records))
    if args.include_missing_age:
        ages.add(None)

    lens = CategoryLens(
        colors=ColorAssigner(cat_cfg["palette"]),
        top_n=args.top if args.top is not None else cat_cfg.get("top_n", 10),
    )
    result = lens.analyze(records, FilterState(ages=ages))

    if args.output:
        _write_json(result.to_dict(), args.output)
    else:
        frame = result.to_frame()
        if frame.empty:
            print("No games match the selected ages.")
        else:
            with pd.option_context("display.width", 120):
                print(frame.to_string(index=False))
    return 0


def cmd_project(args, settings):
    records = _load(args, settings)
    proj_cfg = settings["projection"]

    categories = args.categories or proj_cfg.get("default_categories", [])
    lens = ProjectionLens(
        colors=ColorAssigner(proj_cfg["palette"], presets=proj_cfg.get("presets")),
        ridge=proj_cfg.get("ridge", 1e-6),
    )
    result = lens.analyze(records, FilterState(categories=categories))

    if args.output:
        _write_json(result.to_dict(), args.output)
    elif result.insufficient_data:
        print(result.message)
    else:
        with pd.option_context("display.width", 120):
            print(result.to_frame().to_string(index=False))
    return 0


COMMANDS = {
    "ages": cmd_ages,
    "categories": cmd_categories,
    "project": cmd_project,
}


def main(argv=None):
    args = parse_args(argv)

    try:
        settings = load_settings(args.config)
    except ConfigError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    log_cfg = settings.get("logging", {})
    setup_logging(
        level=args.log_level or log_cfg.get("level", "INFO"),
        log_file=log_cfg.get("log_file", False),
    )

    try:
        return COMMANDS[args.command](args, settings)
    except ConfigError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2
    except DataLoadError as e:
        logger.error(str(e))
        return 1


if __name__ == "__main__":
    sys.exit(main())
