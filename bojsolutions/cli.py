"""Command line front end for the puzzles that read several test cases from standard input."""

from __future__ import annotations

import argparse
import sys
from typing import Callable, Iterator, Sequence

from bojsolutions.arithmetic import count_bridges
from bojsolutions.bitset import run_commands
from bojsolutions.grids import steal_documents
from bojsolutions.sequences import min_mbti_distance

_NO_ARGUMENT_COMMANDS = frozenset({"all", "empty"})


class _Tokens:
    """Whitespace separated tokens of an input text."""

    def __init__(self, text: str) -> None:
        self._words = iter(text.split())

    def word(self) -> str:
        try:
            return next(self._words)
        except StopIteration:
            raise ValueError("unexpected end of input") from None

    def integer(self) -> int:
        token = self.word()
        try:
            return int(token)
        except ValueError:
            raise ValueError(f"expected an integer, got {token!r}") from None

    def count(self) -> int:
        value = self.integer()
        if value < 0:
            raise ValueError(f"a count must not be negative, got {value}")
        return value


def _bridges(tokens: _Tokens) -> Iterator[str]:
    for _ in range(tokens.count()):
        west, east = tokens.integer(), tokens.integer()
        yield str(count_bridges(west, east))


def _mbti(tokens: _Tokens) -> Iterator[str]:
    for _ in range(tokens.count()):
        people = [tokens.word() for _ in range(tokens.count())]
        yield str(min_mbti_distance(people))


def _documents(tokens: _Tokens) -> Iterator[str]:
    for _ in range(tokens.count()):
        height, width = tokens.count(), tokens.count()
        grid = [tokens.word() for _ in range(height)]
        for row in grid:
            if len(row) != width:
                raise ValueError(f"expected a row of {width} cells, got {row!r}")
        yield str(steal_documents(grid, tokens.word()))


def _bitset(tokens: _Tokens) -> Iterator[str]:
    commands = []
    for _ in range(tokens.count()):
        name = tokens.word()
        commands.append(name if name in _NO_ARGUMENT_COMMANDS else f"{name} {tokens.word()}")
    yield from (str(result) for result in run_commands(commands))


_SOLVERS: dict[str, Callable[[_Tokens], Iterator[str]]] = {
    "bridges": _bridges,
    "mbti": _mbti,
    "documents": _documents,
    "bitset": _bitset,
}


def main(argv: Sequence[str] | None = None) -> int:
    """Solve the named puzzle for the input on standard input; return the exit status."""
    parser = argparse.ArgumentParser(
        prog="bojsolutions",
        description="Read a puzzle's input from standard input and print its answers.",
    )
    parser.add_argument("problem", choices=sorted(_SOLVERS))
    args = parser.parse_args(argv)

    try:
        answers = list(_SOLVERS[args.problem](_Tokens(sys.stdin.read())))
    except ValueError as error:
        print(f"error: {error}", file=sys.stderr)
        return 1
    for answer in answers:
        print(answer)
    return 0


if __name__ == "__main__":
    sys.exit(main())