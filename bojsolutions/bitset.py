"""A set of the integers 1 to 20 kept in a bit mask."""

from __future__ import annotations

from typing import Iterable, Iterator

UNIVERSE_SIZE = 20
_ALL = (1 << UNIVERSE_SIZE) - 1


class BitSet:
    """Subset of 1..20 supporting add, remove, check, toggle, fill and clear."""

    def __init__(self) -> None:
        self._bits = 0

    @staticmethod
    def _mask(x: int) -> int:
        if not 1 <= x <= UNIVERSE_SIZE:
            raise ValueError(f"element {x} is outside 1..{UNIVERSE_SIZE}")
        return 1 << (x - 1)

    def add(self, x: int) -> None:
        self._bits |= self._mask(x)

    def remove(self, x: int) -> None:
        self._bits &= _ALL ^ self._mask(x)

    def check(self, x: int) -> bool:
        return bool(self._bits & self._mask(x))

    def toggle(self, x: int) -> None:
        self._bits ^= self._mask(x)

    def fill(self) -> None:
        self._bits = _ALL

    def clear(self) -> None:
        self._bits = 0

    def __contains__(self, x: object) -> bool:
        return isinstance(x, int) and 1 <= x <= UNIVERSE_SIZE and self.check(x)

    def __iter__(self) -> Iterator[int]:
        return (x for x in range(1, UNIVERSE_SIZE + 1) if self._bits & (1 << (x - 1)))

    def __len__(self) -> int:
        return bin(self._bits).count("1")


def run_commands(commands: Iterable[str]) -> list[int]:
    """Apply text commands to a fresh set and return the results of each 'check' as 1 or 0."""
    bitset = BitSet()
    results: list[int] = []
    actions = {"add": bitset.add, "remove": bitset.remove, "toggle": bitset.toggle}
    for command in commands:
        name, *args = command.split()
        if name == "all" and not args:
            bitset.fill()
        elif name == "empty" and not args:
            bitset.clear()
        elif len(args) != 1:
            raise ValueError(f"malformed command {command!r}")
        elif name == "check":
            results.append(int(bitset.check(int(args[0]))))
        elif name in actions:
            actions[name](int(args[0]))
        else:
            raise ValueError(f"unknown command {name!r}")
    return results