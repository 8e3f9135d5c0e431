"""
Minesweeper - command line entry point.

Usage:
    minesweeper play [--size N] [--mines M] [--seed S]
    minesweeper demo [--games G] [--size N] [--mines M] [--seed S] [--delay D]
"""
import argparse
import time
from typing import List, Optional

import numpy as np

from .board import BoardConfig, DEFAULT_CONFIG
from .environment import MinesweeperEnv
from .terminal import play as play_game


def _config_from_args(args: argparse.Namespace) -> Optional[BoardConfig]:
    """Build a board config, printing the reason if it is invalid."""
    try:
        return BoardConfig(size=args.size, num_mines=args.mines)
    except ValueError as error:
        print(f"Invalid board: {error}")
        return None


def play(args: argparse.Namespace) -> int:
    """Play an interactive game in the terminal."""
    config = _config_from_args(args)
    if config is None:
        return 2

    print(f"Board: {config.size}x{config.size} with {config.num_mines} mines")
    play_game(config, np.random.default_rng(args.seed))
    return 0


def demo(args: argparse.Namespace) -> int:
    """Watch a random player clear cells until each game ends."""
    config = _config_from_args(args)
    if config is None:
        return 2

    env = MinesweeperEnv(config=config, render_mode="ansi")
    env.action_space.seed(args.seed)
    num_cells = config.total_cells

    print(
        f"Board: {config.size}x{config.size} with {config.num_mines} mines "
        f"({100 * config.num_mines / num_cells:.1f}% density)"
    )

    wins = 0
    for game in range(args.games):
        seed = None if args.seed is None else args.seed + game
        _, info = env.reset(seed=seed)
        done = False
        step = 0

        while not done:
            # Random player only clears
            mask = env.get_action_mask()
            mask[num_cells:] = False
            action = env.action_space.sample(mask=mask.astype(np.int8))
            row, col = divmod(int(action), config.size)

            _, _, terminated, truncated, info = env.step(action)
            done = terminated or truncated
            step += 1

            print(f"\n=== Game {game + 1}/{args.games} | Step {step} ===")
            print(f"Last move: ({row}, {col})")
            print(env.render())
            if args.delay > 0:
                time.sleep(args.delay)

        if info["game_state"] == "WON":
            wins += 1
            print("\n*** WIN! ***")
        else:
            print("\n*** LOST (hit mine) ***")

    print(f"\n=== Final: {wins}/{args.games} wins ===")
    return 0


def _add_board_arguments(parser: argparse.ArgumentParser) -> None:
    """Add the --size, --mines and --seed options shared by subcommands."""
    parser.add_argument(
        "--size", type=int, default=DEFAULT_CONFIG.size, help="Board size (NxN)"
    )
    parser.add_argument(
        "--mines", type=int, default=DEFAULT_CONFIG.num_mines,
        help="Number of mines",
    )
    parser.add_argument(
        "--seed", type=int, default=None, help="Random seed for mine placement"
    )


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser with its subcommands."""
    parser = argparse.ArgumentParser(
        prog="minesweeper", description="Minesweeper in the terminal"
    )
    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    play_parser = subparsers.add_parser("play", help="Play a game")
    _add_board_arguments(play_parser)

    demo_parser = subparsers.add_parser(
        "demo", help="Watch a random player"
    )
    _add_board_arguments(demo_parser)
    demo_parser.add_argument(
        "--games", type=int, default=3, help="Number of games"
    )
    demo_parser.add_argument(
        "--delay", type=float, default=0.3, help="Delay between moves"
    )

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Parse arguments and run the appropriate command."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command == "play":
        return play(args)
    if args.command == "demo":
        return demo(args)
    parser.print_help()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
