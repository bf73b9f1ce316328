"""Executable entrypoint for Star Defender."""

from __future__ import annotations

from pathlib import Path
import argparse

from .game import StarDefenderGame
from .log import setup_logging
from .settings import SettingsManager


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line options."""
    parser = argparse.ArgumentParser(prog="stardefender", description="Defend the planet from the descending fleet.")
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="logging verbosity",
    )
    parser.add_argument("--fullscreen", action="store_true", help="start in fullscreen mode")
    parser.add_argument("--seed", type=int, default=None, help="seed for enemy fire selection")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> None:
    """Launch the game."""
    args = parse_args(argv)
    setup_logging(args.log_level)

    settings_manager = SettingsManager()
    if args.fullscreen:
        settings_manager.settings.display.fullscreen = True

    root = Path(__file__).resolve().parents[2]
    StarDefenderGame(root=root, settings_manager=settings_manager, seed=args.seed).run()


if __name__ == "__main__":
    main()
