"""Command-line entry point that answers contest-style input on stdin."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable, Iterator

from contestkit.codeforces import max_points
from contestkit.cses import number_spiral
from contestkit.icpc import arrange_pieces


def _take(tokens: Iterator[int], count: int) -> list[int]:
    values = [next(tokens) for _ in range(count)]
    return values


def _spiral(tokens: Iterator[int]) -> None:
    for _ in range(next(tokens)):
        row, col = _take(tokens, 2)
        print(number_spiral(row, col))


def _pieces(tokens: Iterator[int]) -> None:
    k, n = _take(tokens, 2)
    layout = arrange_pieces(k, n)
    print("*" if layout is None else layout)


def _points(tokens: Iterator[int]) -> None:
    for _ in range(next(tokens)):
        size = next(tokens)
        print(max_points(_take(tokens, size)))


_COMMANDS: dict[str, tuple[Callable[[Iterator[int]], None], str]] = {
    "spiral": (_spiral, "numbers of the number spiral at given cells"),
    "pieces": (_pieces, "lay out k pieces on a strip of n cells"),
    "points": (_points, "points earned by rearranging numbers"),
}


def main(argv: list[str] | None = None) -> int:
    """Run the chosen solver on whitespace-separated integers read from stdin."""
    parser = argparse.ArgumentParser(prog="contestkit")
    sub = parser.add_subparsers(dest="command", required=True)
    for name, (_, help_text) in _COMMANDS.items():
        sub.add_parser(name, help=help_text)
    args = parser.parse_args(argv)

    handler = _COMMANDS[args.command][0]
    try:
        tokens = iter([int(token) for token in sys.stdin.read().split()])
        handler(tokens)
    except StopIteration:
        parser.error("input ended early")
    except ValueError as exc:
        parser.error(str(exc))
    return 0