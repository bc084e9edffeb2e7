"""Main entry point for the Dragon/Crow game."""

import argparse
import logging
import sys
import time
from datetime import datetime
from pathlib import Path

from pydantic import ValidationError

from dragoncrow.config import Config, load_config
from dragoncrow.errors import ConfigError
from dragoncrow.game.controller import GameController
from dragoncrow.game.validator import ActionResult
from dragoncrow.logging import GameLogConfig, GameLogger
from dragoncrow.strategy.simple import SimpleStrategy
from dragoncrow.utils.logger import GameDisplay, setup_logging

logger = logging.getLogger(__name__)

# Safety stop for automatic games
MAX_AUTO_TURNS = 500

HELP_TEXT = """Commands:
  d        draw from the deck
  t N      take the top of discard pile N
  h N      swap the revealed card with hand slot N
  r        discard the revealed card without swapping
  p N      put the released card on discard pile N
  restart  start a new game
  q        quit"""


def generate_log_filename(log_dir: str) -> str:
    """Generate log filename with timestamp.

    Args:
        log_dir: Directory for log files.

    Returns:
        Full path to log file.
    """
    timestamp = datetime.now().strftime("%Y%m%dT%H%M%S")
    return str(Path(log_dir) / f"{timestamp}_dragoncrow.jsonl")


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Dragon/Crow card matching game"
    )
    parser.add_argument(
        "-c",
        "--config",
        type=Path,
        help="Path to config file (YAML)",
    )
    parser.add_argument(
        "-s",
        "--seed",
        type=int,
        help="Random seed for shuffling (overrides config)",
    )
    parser.add_argument(
        "--auto",
        action="store_true",
        help="Let the simple strategy play every seat",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable verbose output",
    )
    parser.add_argument(
        "--show-hands",
        action="store_true",
        help="Show face-down card values",
    )
    parser.add_argument(
        "--game-log",
        type=Path,
        help="Directory for game log files (filename auto-generated)",
    )
    return parser.parse_args(argv)


def run_command(game: GameController, line: str) -> ActionResult | None:
    """Translate one line of user input into a game action.

    Returns:
        The action result, or None if the line was not a game command.
    """
    parts = line.split()
    if not parts:
        return None
    cmd, args = parts[0].lower(), parts[1:]

    try:
        number = int(args[0]) if args else None
    except ValueError:
        print(f"Not a number: {args[0]}")
        return None

    if cmd == "d":
        return game.draw_from_deck()
    if cmd == "r":
        return game.click_revealed_card()
    if cmd == "restart":
        return game.restart()
    if cmd in ("t", "h", "p"):
        if number is None:
            print(f"'{cmd}' needs a number")
            return None
        if cmd == "t":
            return game.select_discard_top(number)
        if cmd == "h":
            return game.click_hand_card(game.current_player, number)
        return game.choose_discard_pile(number)

    print(HELP_TEXT)
    return None


def run_interactive(game: GameController, display: GameDisplay) -> None:
    """Play with text commands for every seat."""
    print(HELP_TEXT)
    while True:
        display.print_table(game)
        if game.is_game_over():
            print("Type 'restart' for a new game or 'q' to quit.")
        try:
            line = input(f"P{game.current_player}> ").strip()
        except EOFError:
            break
        if line.lower() in ("q", "quit", "exit"):
            break
        run_command(game, line)


def run_auto(game: GameController, display: GameDisplay) -> None:
    """Let the simple strategy play until the game ends."""
    strategy = SimpleStrategy()
    turns = 0
    while not game.is_game_over():
        if turns >= MAX_AUTO_TURNS:
            logger.warning(f"Stopping after {MAX_AUTO_TURNS} turns without a winner")
            break
        results = strategy.play_turn(game)
        if not all(results):
            logger.error(f"Strategy action rejected: {results[-1].reason.value}")
            break
        turns += 1
    display.print_table(game)


def deal(game: GameController, delay: float) -> None:
    """Run the initial deal, pausing between cards if configured."""
    for _ in game.deal_steps():
        if delay > 0:
            time.sleep(delay)


def main(argv: list[str] | None = None) -> int:
    """Main entry point.

    Returns:
        Exit code (0 for success)
    """
    args = parse_args(argv)

    # Load config
    try:
        config: Config = load_config(args.config)
    except ValidationError as e:
        logger.error(f"Invalid configuration: {e}")
        return 2

    # Apply command-line overrides
    if args.seed is not None:
        config.game.seed = args.seed
    if args.verbose:
        config.logging.level = "DEBUG"
    if args.show_hands:
        config.logging.show_hands = True

    # Game log directory (CLI argument overrides config file)
    game_log_enabled = args.game_log is not None or config.game_log.enabled
    game_log_dir = str(args.game_log) if args.game_log else config.game_log.output_path

    setup_logging(config.logging.level)

    display = GameDisplay(show_hands=config.logging.show_hands)

    if game_log_enabled:
        log_path = generate_log_filename(game_log_dir)
        game_log_config = GameLogConfig(enabled=True, output_path=log_path)
        print(f"Game log: {log_path}")
    else:
        game_log_config = GameLogConfig(enabled=False)

    try:
        with GameLogger(game_log_config) as game_logger:
            game = GameController(config, listeners=[display, game_logger])
            deal(game, config.game.deal_delay)

            if args.auto:
                run_auto(game, display)
            else:
                run_interactive(game, display)
        return 0

    except ConfigError as e:
        logger.error(f"Invalid configuration: {e}")
        return 2
    except KeyboardInterrupt:
        print("\nInterrupted by user")
        return 1
    except Exception as e:
        logger.exception(f"Game error: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
