"""Spritz permutation state and its primitives."""

from __future__ import annotations

from collections.abc import Iterable

__all__ = ["State", "DEFAULT_N"]

DEFAULT_N = 256


class State:
    """Spritz internal memory: the permutation ``s`` plus registers.

    Entries of ``s`` are plain ints so states larger than 256 work unchanged.
    """

    __slots__ = ("n", "s", "i", "j", "k", "w", "z", "a")

    def __init__(self, n: int = DEFAULT_N) -> None:
        self.initialize(n)

    def initialize(self, n: int = DEFAULT_N) -> None:
        """Reset to the identity permutation with all registers cleared."""
        if n <= 0 or n % 16:
            raise ValueError("state size must be a positive multiple of 16")
        self.n = n
        self.s = list(range(n))
        self.i = self.j = self.k = self.z = self.a = 0
        self.w = 1

    def clone(self) -> State:
        """Return an independent copy of array and registers."""
        other = State.__new__(State)
        other.n = self.n
        other.s = self.s[:]
        other.i, other.j, other.k = self.i, self.j, self.k
        other.w, other.z, other.a = self.w, self.z, self.a
        return other

    def __deepcopy__(self, memo=None) -> State:
        return self.clone()

    def update(self) -> None:
        n, s = self.n, self.s
        self.i = (self.i + self.w) % n
        y = (self.j + s[self.i]) % n
        self.j = (self.k + s[y]) % n
        self.k = (self.i + self.k + s[self.j]) % n
        s[self.i], s[self.j] = s[self.j], s[self.i]

    def output(self) -> int:
        n, s = self.n, self.s
        y1 = (self.z + self.k) % n
        x1 = (self.i + s[y1]) % n
        y2 = (self.j + s[x1]) % n
        self.z = s[y2]
        return self.z

    def crush(self) -> None:
        """Order each mirrored pair ``s[v]``, ``s[n-1-v]`` (not a full sort)."""
        s = self.s
        for v in range(self.n // 2):
            y = self.n - 1 - v
            if s[v] > s[y]:
                s[v], s[y] = s[y], s[v]

    def whip(self, rounds: int | None = None) -> None:
        if rounds is None:
            rounds = 2 * self.n
        for _ in range(rounds):
            self.update()
        self.w = (self.w + 2) % self.n

    def shuffle(self) -> None:
        self.whip()
        self.crush()
        self.whip()
        self.crush()
        self.whip()
        self.a = 0

    def absorb_stop(self) -> None:
        """Absorb the boundary symbol; advances ``a`` without touching ``s``."""
        if self.a == self.n // 2:
            self.shuffle()
        self.a = (self.a + 1) % self.n

    def absorb_nibble(self, x: int) -> None:
        n, s = self.n, self.s
        if self.a == n // 2:
            self.shuffle()
        y = (n // 2 + x) % n
        s[self.a], s[y] = s[y], s[self.a]
        self.a = (self.a + 1) % n

    def absorb_value(self, b: int) -> None:
        # low nibble first, then high
        d = self.n // 16
        self.absorb_nibble(b % d)
        self.absorb_nibble(b // d)

    def absorb(self, data: Iterable[int]) -> None:
        for b in data:
            self.absorb_value(b)

    def drip(self) -> int:
        if self.a > 0:
            self.shuffle()
        self.update()
        return self.output()

    def squeeze(self, count: int) -> list[int]:
        if self.a > 0:
            self.shuffle()
        return [self.drip() for _ in range(count)]

    def key_setup(self, key: Iterable[int]) -> None:
        self.absorb(key)
        if self.a > 0:
            self.shuffle()
