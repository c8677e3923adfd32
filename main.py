#!/usr/bin/env python3
"""
Minefield - terminal front end.

Usage:
    python main.py [--rows N] [--cols N] [--probability P] [--radius R]
                   [--seed S]

Commands while playing:
    p ROW COL   primary action (first one pre-solves around the tile)
    s ROW COL   toggle a flag
    q           quit
"""
import argparse
import random
import sys
from typing import Optional, TextIO, Tuple

from minefield import BoardConfig, GameController, MinefieldError, render_text


def parse_command(line: str) -> Optional[Tuple[str, int, int]]:
    """
    Parse ``p ROW COL`` / ``s ROW COL`` into (kind, row, col).

    Returns:
        None for a blank line; raises ValueError for anything malformed.
    """
    parts = line.split()
    if not parts:
        return None
    if len(parts) != 3 or parts[0] not in ("p", "s"):
        raise ValueError("expected 'p ROW COL', 's ROW COL' or 'q'")
    return parts[0], int(parts[1]), int(parts[2])


def play(
    controller: GameController,
    stdin: TextIO = sys.stdin,
    stdout: TextIO = sys.stdout,
) -> None:
    """Run a session reading commands from ``stdin`` until it ends."""
    board = controller.board
    print(render_text(board), file=stdout)

    while not controller.is_over:
        print(
            f"[{board.remaining_hazards} hazards unflagged] > ",
            end="", file=stdout, flush=True,
        )
        line = stdin.readline()
        if not line or line.strip() == "q":
            print("\nGave up.", file=stdout)
            return

        try:
            command = parse_command(line)
        except ValueError as exc:
            print(f"Bad command: {exc}", file=stdout)
            continue
        if command is None:
            continue

        kind, row, col = command
        try:
            if kind == "p":
                controller.on_primary(row, col)
            else:
                controller.on_secondary(row, col)
        except MinefieldError as exc:
            print(f"Rejected: {exc}", file=stdout)
            continue

        print(render_text(board), file=stdout)

    print(controller.summary().message(), file=stdout)


def main() -> None:
    """Parse arguments and play one session."""
    parser = argparse.ArgumentParser(
        description="Minefield - flag every hazard without revealing one"
    )
    parser.add_argument("--rows", type=int, default=10, help="Grid rows")
    parser.add_argument("--cols", type=int, default=10, help="Grid columns")
    parser.add_argument(
        "--probability", type=int, default=20,
        help="Percent chance that a tile is a hazard",
    )
    parser.add_argument(
        "--radius", type=int, default=3,
        help="Radius pre-solved by the first move",
    )
    parser.add_argument(
        "--seed", type=int, default=None,
        help="Seed for a reproducible board (default: clock)",
    )
    args = parser.parse_args()

    try:
        config = BoardConfig(
            rows=args.rows,
            cols=args.cols,
            hazard_probability=args.probability,
            handicap_radius=args.radius,
        )
    except ValueError as exc:
        parser.error(str(exc))

    rng = random.Random(args.seed) if args.seed is not None else None
    play(GameController.new(config, rng))


if __name__ == "__main__":
    main()
