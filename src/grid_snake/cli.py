"""Command-line launcher for Grid Snake."""

from __future__ import annotations

import argparse
import logging
import sys

from grid_snake.config import GameConfig

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="grid-snake",
        description="Single-player grid snake game.",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true",
        help="Log at DEBUG level.",
    )
    sub = parser.add_subparsers(dest="command", help="Available commands.")

    # --- play ---
    play_p = sub.add_parser("play", help="Play in a desktop window.")
    _add_config_flags(play_p)

    # --- config ---
    config_p = sub.add_parser(
        "config", help="Write the effective configuration to a JSON file.",
    )
    _add_config_flags(config_p)
    config_p.add_argument("output", help="Path for the JSON file.")

    return parser


def _add_config_flags(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--config", type=str, default=None,
        help="Path to a JSON config file; other flags override it.",
    )
    parser.add_argument("--width", type=int, default=None)
    parser.add_argument("--height", type=int, default=None)
    parser.add_argument("--cell-size", type=int, default=None)
    parser.add_argument("--tick-ms", type=int, default=None)
    parser.add_argument("--refresh-ms", type=int, default=None)
    parser.add_argument("--seed", type=int, default=None)


def _resolve_config(args: argparse.Namespace) -> GameConfig:
    config = GameConfig.load(args.config) if args.config else GameConfig()

    overrides: dict = {}
    for name in ("width", "height", "cell_size", "tick_ms", "refresh_ms", "seed"):
        val = getattr(args, name, None)
        if val is not None:
            overrides[name] = val
    if overrides:
        config = config.replace(**overrides)
    return config


def _run_play(args: argparse.Namespace) -> int:
    from grid_snake.window import run_window

    config = _resolve_config(args)
    logger.info(
        "Opening %dx%d window (%d columns × %d rows).",
        config.width, config.height, config.columns, config.rows,
    )
    return run_window(config)


def _run_config(args: argparse.Namespace) -> int:
    _resolve_config(args).save(args.output)
    return 0


def main(argv: list[str] | None = None) -> int:
    """Entry point for the ``grid-snake`` CLI."""
    parser = _build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )

    if args.command is None:
        parser.print_help()
        return 1

    handlers = {
        "play": _run_play,
        "config": _run_config,
    }
    try:
        return handlers[args.command](args)
    except ValueError as exc:
        parser.error(str(exc))


if __name__ == "__main__":
    sys.exit(main())
