#!/usr/bin/env python3
"""
Minesweeper - Terminal front end.

Usage:
    python main.py [--level {easy,medium,hard}] [--seed N]
    python main.py --rows R --cols C --mines M

Commands during play:
    r ROW COL   reveal a cell
    f ROW COL   toggle a flag
    n           new game with the same settings
    q           quit
"""
import argparse
import logging
import random
import time
from typing import Callable, List, Optional

from src.minesweeper import (
    Board,
    BoardConfig,
    MinesweeperError,
    PRESETS,
    render_text,
)


WIN_MESSAGE = "Congratulations, you won!"
LOSS_MESSAGE = "Sorry, you lost. Try again."


def build_config(args: argparse.Namespace) -> BoardConfig:
    """Pick a preset, overridden by any explicit dimensions."""
    preset = PRESETS[args.level]
    return BoardConfig(
        rows=args.rows if args.rows is not None else preset.rows,
        cols=args.cols if args.cols is not None else preset.cols,
        num_mines=args.mines if args.mines is not None else preset.num_mines,
    )


def print_board(board: Board, elapsed: int) -> None:
    """Print the mine counter, elapsed time and grid."""
    status = board.get_status()
    print(f"\nMines: {status.mines_remaining}   Time: {elapsed}s")
    header = " ".join(str(col % 10) for col in range(status.ncols))
    print(f"    {header}")
    for row, line in enumerate(render_text(board).splitlines()):
        print(f"{row:>3} {line}")


def handle_move(board: Board, words: List[str]) -> None:
    """Apply a reveal or flag command."""
    if len(words) != 3:
        print("Usage: r ROW COL | f ROW COL")
        return
    try:
        row, col = int(words[1]), int(words[2])
    except ValueError:
        print("Row and column must be integers")
        return

    if words[0] == "r":
        board.reveal(row, col)
    else:
        board.toggle_flag(row, col)


def play(board: Board, clock: Callable[[], float] = time.monotonic) -> None:
    """
    Run the interactive loop until the player quits.

    The timer stops when the game ends and restarts with each new game.
    """
    started = clock()
    finished = None
    print_board(board, int(clock() - started))

    while True:
        try:
            words = input("> ").split()
        except EOFError:
            print()
            return
        if not words:
            continue

        command = words[0].lower()
        if command == "q":
            return
        if command == "n":
            board.reset()
            started = clock()
            finished = None
        elif command in ("r", "f"):
            try:
                handle_move(board, [command] + words[1:])
            except MinesweeperError as error:
                print(error)
                continue
        else:
            print(f"Unknown command: {command}")
            continue

        status = board.get_status()
        if status.done and finished is None:
            finished = clock()
        end = finished if finished is not None else clock()
        print_board(board, int(end - started))
        if status.done:
            print(LOSS_MESSAGE if status.exploded else WIN_MESSAGE)
            print("Type 'n' for a new game or 'q' to quit.")


def main(argv: Optional[List[str]] = None) -> None:
    """Parse arguments and start a game."""
    parser = argparse.ArgumentParser(description="Play Minesweeper in the terminal")
    parser.add_argument(
        "--level",
        choices=sorted(PRESETS),
        default="easy",
        help="Difficulty preset",
    )
    parser.add_argument("--rows", type=int, help="Number of rows")
    parser.add_argument("--cols", type=int, help="Number of columns")
    parser.add_argument("--mines", type=int, help="Number of mines")
    parser.add_argument("--seed", type=int, help="Seed for mine placement")
    parser.add_argument(
        "--verbose", action="store_true", help="Enable debug logging"
    )
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG)

    try:
        config = build_config(args)
    except MinesweeperError as error:
        parser.error(str(error))

    board = Board(config, rng=random.Random(args.seed))
    play(board)


if __name__ == "__main__":
    main()
