# Injectable random sources. The layout never touches the global `random`
# module, so a row is fully determined by the source it is given.

import random
from collections import deque
from dataclasses import dataclass, field
from typing import Deque, Iterable, Optional, Protocol

A = 16807
M = 0x7FFFFFFF  # 2^31-1
LOW16_SPAN = 0x8001  # low16_signed_abs yields 0..32768


class RandomContractError(RuntimeError):
    """A random source returned something outside its contract."""


class RandomSource(Protocol):
    def next_int(self, low: int, high: int) -> int:
        """Uniform int in [low, high] inclusive."""
        ...

    def next_bool(self) -> bool:
        ...


class SeededRandom:
    """Protocol adapter over a private `random.Random` instance."""

    def __init__(self, seed: Optional[int] = None) -> None:
        self.seed = seed
        self._r = random.Random(seed)

    def next_int(self, low: int, high: int) -> int:
        return self._r.randint(low, high)

    def next_bool(self) -> bool:
        return self._r.random() < 0.5


def pm_next(state: int) -> int:
    return (state * A) % M


def low16_signed_abs(x32: int) -> int:
    w = x32 & 0xFFFF
    if w & 0x8000:
        w = -((~w + 1) & 0xFFFF)
    return abs(w)


@dataclass
class PMRandom:
    """Park–Miller minimal standard generator; tiny, portable, reproducible."""
    state: int

    def __post_init__(self) -> None:
        self.state &= M
        if self.state == 0:
            # zero is a fixed point of the recurrence
            self.state = 1

    def next32(self) -> int:
        self.state = pm_next(self.state)
        return self.state

    def bounded(self, n: int) -> int:
        """Uniform 1..n; draws past the last whole multiple of n are rejected."""
        assert 0 < n <= LOW16_SPAN
        limit = LOW16_SPAN - (LOW16_SPAN % n)
        while True:
            w = low16_signed_abs(self.next32())
            if w < limit:
                return (w % n) + 1

    def next_int(self, low: int, high: int) -> int:
        return low + self.bounded(high - low + 1) - 1

    def next_bool(self) -> bool:
        return self.bounded(2) == 1


@dataclass
class ScriptedRandom:
    """
    Replays fixed draws: ints and bools come from separate queues.
    Running dry or scripting an out-of-range int is a contract violation.
    """
    ints: Deque[int] = field(default_factory=deque)
    bools: Deque[bool] = field(default_factory=deque)

    def __post_init__(self) -> None:
        self.ints = deque(self.ints)
        self.bools = deque(self.bools)

    @classmethod
    def of(cls, ints: Iterable[int], bools: Iterable[bool]) -> "ScriptedRandom":
        return cls(deque(ints), deque(bools))

    def next_int(self, low: int, high: int) -> int:
        if not self.ints:
            raise RandomContractError("scripted int draws exhausted")
        v = self.ints.popleft()
        if not (low <= v <= high):
            raise RandomContractError(f"scripted int {v} outside [{low}, {high}]")
        return v

    def next_bool(self) -> bool:
        if not self.bools:
            raise RandomContractError("scripted bool draws exhausted")
        return bool(self.bools.popleft())
