#!/usr/bin/env python3
"""
Minefield - Main entry point.

Usage:
    python main.py play [--level NAME] [--seed N]
"""
import argparse
import sys
from pathlib import Path
from typing import Optional

import numpy as np

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent / "src"))

from minefield import (  # noqa: E402
    INITIAL_LEVEL,
    LEVELS,
    GameState,
    Outcome,
    apply,
    flag,
    flagged_count,
    index_of,
    mine_count,
    new_game,
    outcome,
    render,
    reset,
    reveal,
)


PLAY_HELP = """Commands:
  r <row> <col>   reveal a tile
  f <row> <col>   flag or unflag a tile
  n [level]       new game ({levels})
  q               quit""".format(levels=", ".join(LEVELS))

STATUS = {
    Outcome.PLAYING: "Playing...",
    Outcome.WON: "YOU WON!",
    Outcome.LOST: "YOU LOST!",
}


def print_state(state: GameState) -> None:
    """Print status line, flag readout and board."""
    print(f"[{state.level_id}] {STATUS[outcome(state)]}")
    print(f"{flagged_count(state)} / {mine_count(state)} mines flagged\n")
    print(render(state))


def handle_input(
    state: GameState, line: str, rng: np.random.Generator
) -> Optional[GameState]:
    """
    Turn one line of player input into a new state.

    Returns:
        The next state, or None when the player quits.

    Raises:
        ValueError: If the line is not a valid command.
        IndexError: If the target tile is off the board.
    """
    parts = line.split()
    if not parts:
        return state

    command, args = parts[0].lower(), parts[1:]
    if command == "q":
        return None
    if command == "n":
        level_id = args[0] if args else state.level_id
        return apply(state, reset(level_id, rng=rng))
    if command in ("r", "f"):
        if len(args) != 2:
            raise ValueError(f"Usage: {command} <row> <col>")
        row, col = int(args[0]), int(args[1])
        side = state.side
        if not (0 <= row < side and 0 <= col < side):
            raise IndexError(f"({row}, {col}) is off the {side}x{side} board")
        # Input is locked once the game is over; only a new game is accepted
        if outcome(state) != Outcome.PLAYING:
            return state
        index = index_of(side, row, col)
        return apply(state, reveal(index) if command == "r" else flag(index))
    raise ValueError(f"Unknown command: {command}")


def play(args: argparse.Namespace) -> None:
    """Play an interactive game in the terminal."""
    rng = np.random.default_rng(args.seed)
    state = new_game(args.level, rng=rng)
    print(PLAY_HELP)

    while True:
        print()
        print_state(state)
        try:
            line = input("> ")
        except EOFError:
            break
        try:
            next_state = handle_input(state, line, rng)
        except (ValueError, IndexError) as exc:
            print(f"Error: {exc}")
            continue
        if next_state is None:
            break
        state = next_state


def main() -> None:
    """Parse arguments and run the appropriate command."""
    parser = argparse.ArgumentParser(
        description="Minefield - Minesweeper in the terminal"
    )
    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    play_parser = subparsers.add_parser("play", help="Play a game")
    play_parser.add_argument(
        "--level", choices=list(LEVELS), default=INITIAL_LEVEL, help="Difficulty"
    )
    play_parser.add_argument("--seed", type=int, default=None, help="Random seed")

    args = parser.parse_args()

    if args.command == "play":
        play(args)
    else:
        parser.print_help()


if __name__ == "__main__":
    main()
