#!/usr/bin/env python3
"""
Minefield - Main entry point.

Usage:
    python main.py play [--width W] [--height H] [--mines N] [--seed S]
    python main.py demo [--games N] [--size N] [--mines N] [--seed S]

Run after `pip install -e .` so the minefield package is importable.
"""
import argparse
from typing import Optional, Tuple

import numpy as np

from minefield.board import Board, BoardConfig
from minefield.environment import MinesweeperEnv
from minefield.outcome import OutcomeKind
from minefield.presentation import render_text, window_title


HELP = "Commands: r X Y (reveal), f X Y (flag), n (new game), q (quit)"


def parse_command(line: str) -> Optional[Tuple[str, int, int]]:
    """
    Parse one line of player input.

    Returns:
        (command, x, y) for reveal/flag, (command, -1, -1) for new/quit,
        or None if the line is not understood.
    """
    parts = line.strip().lower().split()
    if not parts:
        return None
    command = parts[0]
    if command in ("n", "q") and len(parts) == 1:
        return command, -1, -1
    if command in ("r", "f") and len(parts) == 3:
        try:
            return command, int(parts[1]), int(parts[2])
        except ValueError:
            return None
    return None


def show(board: Board) -> None:
    """Print the title line and the board."""
    print(window_title(board.flagged_count, board.mine_count))
    print(render_text(board))


def ask_yes_no(prompt: str) -> bool:
    return input(f"{prompt} [y/N] ").strip().lower() in ("y", "yes")


def play(args: argparse.Namespace) -> None:
    """Play an interactive game in the terminal."""
    config = BoardConfig(args.width, args.height, args.mines)
    run_game(Board(config, rng=args.seed))


def run_game(board: Board) -> None:
    """Read commands from the player until they quit or input ends."""
    print(HELP)
    show(board)

    while True:
        try:
            line = input("> ")
        except EOFError:
            break

        parsed = parse_command(line)
        if parsed is None:
            print(HELP)
            continue

        command, x, y = parsed
        if command == "q":
            break
        if command == "n":
            board.reset()
        elif command == "f":
            if board.toggle_flag(x, y) == 0:
                print(f"Cannot flag ({x}, {y}): {board.check_flag(x, y).name}")
        else:
            outcome = board.reveal(x, y)
            if outcome.kind == OutcomeKind.REJECTED:
                print(f"Cannot reveal ({x}, {y}): {outcome.error.name}")
            elif outcome.kind == OutcomeKind.LOST:
                show(board)
                print(f"\n*** BOOM at {outcome.position} ***")
                if ask_yes_no("Ignore it and flag the mine?"):
                    board.toggle_flag(x, y)
                else:
                    board.reset()
            elif outcome.kind == OutcomeKind.WON:
                show(board)
                print("\n*** WIN! ***")
                board.reset()

        show(board)


def demo(args: argparse.Namespace) -> None:
    """Let a random player reveal cells until each game ends."""
    config = BoardConfig(args.size, args.size, args.mines)
    env = MinesweeperEnv(config=config, render_mode="ansi")
    rng = np.random.default_rng(args.seed)
    cells = config.width * config.height

    print(
        f"Board: {config.width}x{config.height} with {config.num_mines} mines "
        f"({100 * config.num_mines / cells:.1f}% density)"
    )

    wins = 0
    for game in range(args.games):
        obs, info = env.reset(seed=None if args.seed is None else args.seed + game)
        done = False
        while not done:
            reveal_mask = env.get_action_mask()[:cells]
            action = int(rng.choice(np.flatnonzero(reveal_mask)))
            obs, reward, terminated, truncated, info = env.step(action)
            done = terminated or truncated

        print(f"\n=== Game {game + 1}/{args.games} | Steps {info['steps']} ===")
        print(env.render())
        if info["game_state"] == "WON":
            wins += 1
            print("*** WIN! ***")
        else:
            print(f"*** LOST after {info['revealed']}/{info['total_safe']} safe cells ***")

    print(f"\n=== Final: {wins}/{args.games} wins ({100 * wins / args.games:.0f}%) ===")


def positive_int(value: str) -> int:
    """Argparse type for counts and sizes that must be at least 1."""
    number = int(value)
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be a positive integer, got {value}")
    return number


def build_parser() -> argparse.ArgumentParser:
    """Create the command line parser."""
    parser = argparse.ArgumentParser(description="Minefield - Minesweeper board engine")
    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    play_parser = subparsers.add_parser("play", help="Play in the terminal")
    play_parser.add_argument("--width", type=positive_int, default=16, help="Board width")
    play_parser.add_argument("--height", type=positive_int, default=16, help="Board height")
    play_parser.add_argument("--mines", type=int, default=40, help="Number of mines")
    play_parser.add_argument("--seed", type=int, default=None, help="Random seed")

    demo_parser = subparsers.add_parser("demo", help="Watch random play")
    demo_parser.add_argument("--games", type=positive_int, default=5, help="Number of games")
    demo_parser.add_argument("--size", type=positive_int, default=9, help="Board size (NxN)")
    demo_parser.add_argument("--mines", type=int, default=10, help="Number of mines")
    demo_parser.add_argument("--seed", type=int, default=None, help="Random seed")
    return parser


def main() -> None:
    """Parse arguments and run the appropriate command."""
    parser = build_parser()
    args = parser.parse_args()

    if args.command == "play":
        play(args)
    elif args.command == "demo":
        demo(args)
    else:
        parser.print_help()


if __name__ == "__main__":
    main()
