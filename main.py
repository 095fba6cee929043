"""
Monster Map Solver - Entry Point

Assembles the tile image from a puzzle input, scans it for sea monsters
and prints the answer.

Example:
    python main.py
    python main.py data/tiles.txt --strategy corners
    python main.py --debug  # Also save a rendered image under ./debug
"""

import sys
import logging
import argparse
from pathlib import Path
from typing import Any, Dict, Optional

from monster_map.debug import save_debug_image
from monster_map.settings import load_settings, save_settings
from monster_map.solver import (
    Pattern,
    Solution,
    SolutionContext,
    create_strategy,
    get_strategy_info,
    get_strategy_names,
    sea_monster,
)
from monster_map.tiles import load_tiles


logger = logging.getLogger(__name__)

LOG_FILE = "monster_map.log"


def configure_logging(debug: bool = False) -> None:
    """Configure logging - output to both console and file."""
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
        handlers=[
            logging.StreamHandler(),  # Console output
            logging.FileHandler(LOG_FILE, mode='w', encoding='utf-8')  # File output
        ]
    )


class Application:
    """
    Main application controller.

    Resolves settings against command line flags, loads the inputs and
    runs the selected strategy.
    """

    def __init__(self, args: argparse.Namespace, settings: Optional[Dict[str, Any]] = None):
        """
        Initialize the application.

        Args:
            args: Parsed command line arguments
            settings: Saved settings (loaded from config.json if omitted)
        """
        self.args = args
        self.settings = settings if settings is not None else load_settings()

        # CLI flags override saved settings
        self.input_path = Path(args.input or self.settings["input_path"])
        self.strategy_name = args.strategy or self.settings["strategy_name"]
        self.pattern_path = args.pattern or self.settings.get("pattern_path")
        self.debug_mode = args.debug or bool(self.settings.get("debug_enabled", False))

    def load_pattern(self) -> Pattern:
        if self.pattern_path:
            logger.info(f"Loading pattern from {self.pattern_path}")
            return Pattern.load(self.pattern_path)
        return sea_monster()

    def run(self) -> Solution:
        """
        Solve the puzzle.

        Returns:
            Solution from the selected strategy

        Raises:
            PuzzleError: If the input or pattern is invalid
            ValueError: If the strategy name is unknown
        """
        strategy = create_strategy(self.strategy_name)
        context = SolutionContext(
            tiles=load_tiles(self.input_path),
            pattern=self.load_pattern(),
            progress_callback=self._on_progress,
        )

        logger.info(f"Running strategy '{strategy.name}' on {self.input_path}")
        solution = strategy.solve(context)
        logger.info(
            f"Answer: {solution.answer} "
            f"({solution.metrics.computation_time_ms:.1f}ms, strategy={solution.metrics.strategy_name})"
        )

        if self.debug_mode and solution.scan is not None:
            logger.debug("Composite with pattern cells marked:\n" + solution.scan.render())
            save_debug_image(solution.scan)

        if self.args.save_settings:
            self._save_settings()

        return solution

    def _on_progress(self, percent: float, message: str) -> None:
        logger.debug(f"Progress {percent * 100:.0f}%: {message}")

    def _save_settings(self) -> None:
        """Persist the effective settings."""
        self.settings.update({
            "debug_enabled": self.debug_mode,
            "strategy_name": self.strategy_name,
            "input_path": str(self.input_path),
            "pattern_path": self.pattern_path,
        })
        save_settings(self.settings)


def parse_args(argv=None):
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Monster Map Solver - Assemble image tiles and scan for sea monsters"
    )
    parser.add_argument(
        "input",
        nargs="?",
        help="Tile input file (default: input_path setting, data/tiles.txt)"
    )
    parser.add_argument(
        "--strategy", "-s",
        choices=get_strategy_names(),
        help="Strategy to run (default: strategy_name setting, roughness)"
    )
    parser.add_argument(
        "--pattern", "-p",
        help="Pattern file to search for instead of the sea monster"
    )
    parser.add_argument(
        "--debug", "-d",
        action="store_true",
        help="Enable debug logging and save a rendered composite image"
    )
    parser.add_argument(
        "--save-settings",
        action="store_true",
        help="Save the effective options to config.json"
    )
    parser.add_argument(
        "--list-strategies",
        action="store_true",
        help="List available strategies and exit"
    )
    return parser.parse_args(argv)


def main(argv=None) -> int:
    """Run the Monster Map solver and print the answer."""
    args = parse_args(argv)

    if args.list_strategies:
        for info in get_strategy_info():
            print(f"{info['name']}: {info['description']}")
        return 0

    settings = load_settings()
    configure_logging(args.debug or bool(settings.get("debug_enabled", False)))

    application = Application(args, settings)
    try:
        solution = application.run()
    except (ValueError, OSError) as e:
        logger.error(f"Failed to solve {application.input_path}: {e}")
        return 1

    print(solution.answer)
    return 0


if __name__ == "__main__":
    sys.exit(main())
