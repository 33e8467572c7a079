#!/usr/bin/env python3
"""
Minesweeper - Main entry point.

Usage:
    python main.py play [--height H] [--width W] [--mines PCT] [--seed N]
    python main.py demo [--games N] [--delay S]
"""
import argparse
import logging
import os
import time

from src.minesweeper.board import Board, BoardConfig, Outcome
from src.minesweeper.console import apply_command, parse_command, render_board
from src.minesweeper.environment import MinesweeperEnv
from src.minesweeper.errors import MinesweeperError

logger = logging.getLogger(__name__)

END_MESSAGES = {
    Outcome.WON: "Congratulations! You Won!",
    Outcome.LOST: "Boom! Game Over!",
}


def clear_screen():
    os.system('cls' if os.name == 'nt' else 'clear')


def play(args: argparse.Namespace) -> None:
    """Play an interactive game in the terminal."""
    board = Board(
        BoardConfig(width=args.width, height=args.height, mine_percent=args.mines),
        seed=args.seed,
    )
    print("Commands: 'r ROW COL' reveals, 'f ROW COL' toggles a flag, 'q' quits.")

    while board.is_playing:
        print()
        print(render_board(board))
        print(f"Flags: {board.flag_count}")
        try:
            text = input("> ").strip()
        except EOFError:
            break
        if text.lower() in ("q", "quit"):
            break
        if not text:
            continue

        try:
            outcome = apply_command(board, parse_command(text))
        except MinesweeperError as exc:
            print(f"Error: {exc}")
            continue

        if outcome in END_MESSAGES:
            print()
            print(render_board(board))
            print(END_MESSAGES[outcome])


def demo(args: argparse.Namespace) -> None:
    """Watch a random player reveal cells through the Gymnasium env."""
    config = BoardConfig(width=args.width, height=args.height, mine_percent=args.mines)
    env = MinesweeperEnv(config=config, render_mode="ansi")

    print(f"Board: {config.height}x{config.width} at {config.mine_percent}% mine density")
    wins = 0

    for game in range(args.games):
        env.reset(seed=None if args.seed is None else args.seed + game)
        done = False
        step = 0

        while not done:
            action = env.action_space.sample(mask=env.get_action_mask())
            _, reward, terminated, truncated, info = env.step(action)
            done = terminated or truncated
            step += 1

            clear_screen()
            print(f"=== Game {game + 1}/{args.games} | Step {step} ===")
            print(f"Wins so far: {wins}")
            print(f"Revealed this step: {len(info['last_revealed'])} (reward {reward:+.1f})\n")
            print(env.render())

            if done:
                if info["game_state"] == "WON":
                    wins += 1
                    print(f"\n*** WIN! ***")
                else:
                    print(f"\n*** LOST (hit mine) ***")

            time.sleep(args.delay)

    print(f"\n=== Final: {wins}/{args.games} wins ({100 * wins / args.games:.0f}%) ===")


def add_board_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--height", type=int, default=10, help="Number of rows")
    parser.add_argument("--width", type=int, default=10, help="Number of columns")
    parser.add_argument(
        "--mines", type=int, default=10, help="Chance of each cell being a mine (1-99%%)"
    )
    parser.add_argument("--seed", type=int, default=None, help="Random seed")


def main() -> None:
    """Parse arguments and run the appropriate command."""
    parser = argparse.ArgumentParser(description="Minesweeper in the terminal")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    play_parser = subparsers.add_parser("play", help="Play an interactive game")
    add_board_arguments(play_parser)

    demo_parser = subparsers.add_parser("demo", help="Watch random play")
    add_board_arguments(demo_parser)
    demo_parser.add_argument("--games", type=int, default=5, help="Number of games")
    demo_parser.add_argument(
        "--delay", type=float, default=0.3, help="Delay between moves"
    )

    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(name)s %(levelname)s: %(message)s",
    )

    try:
        if args.command == "play":
            play(args)
        elif args.command == "demo":
            demo(args)
        else:
            parser.print_help()
    except MinesweeperError as exc:
        logger.error("%s", exc)
        raise SystemExit(2)


if __name__ == "__main__":
    main()
