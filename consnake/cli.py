"""Command-line entry point for the console snake game."""

from __future__ import annotations

import argparse
import random
import sys
import time
from os import PathLike

from consnake.game import DEFAULT_HEIGHT, DEFAULT_WIDTH, Game
from consnake.obstacles import load_obstacles
from consnake.score import SCORES_FILE, format_scores, save_score
from consnake.terminal import clear_screen, raw_mode, read_key


def read_field_size(
    path: str | PathLike[str],
    default: tuple[int, int] = (DEFAULT_WIDTH, DEFAULT_HEIGHT),
) -> tuple[int, int]:
    """Read "width height" from a file, keeping defaults for what is missing."""
    size = list(default)
    try:
        with open(path, encoding="utf-8") as handle:
            tokens = handle.read().split()
    except OSError:
        return default
    for index, token in enumerate(tokens[:2]):
        try:
            size[index] = int(token)
        except ValueError:
            break
    return size[0], size[1]


def _ask(prompt: str) -> str:
    try:
        return input(prompt)
    except EOFError:
        return ""


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="consnake", description="Console snake game.")
    parser.add_argument("--field", default="field_size.txt", help="field size file")
    parser.add_argument("--obstacles", default="obstacles.txt", help="obstacle file")
    parser.add_argument("--scores", default=SCORES_FILE, help="high score file")
    args = parser.parse_args(argv)

    width, height = read_field_size(args.field)
    name = _ask("Enter your name: ")
    obstacles = load_obstacles(args.obstacles, width, height)
    game = Game(width, height, obstacles, random.Random())

    with raw_mode(sys.stdin):
        while not game.over:
            clear_screen(sys.stdout)
            sys.stdout.write(game.render())
            sys.stdout.flush()
            key = read_key(sys.stdin)
            if key:
                game.steer(key)
            game.step()
            time.sleep(game.delay())

    save_score(name, game.length, args.scores)
    print("Game Over!")

    answer = _ask("Do you want to see the top scores? (y/n): ")
    if answer[:1] in ("y", "Y"):
        sys.stdout.write(format_scores(args.scores))
    return 0