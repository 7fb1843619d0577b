"""Stack- and queue-based structures and algorithms."""

from __future__ import annotations

import random
from collections import deque
from collections.abc import Iterable, Sequence

MOD = 1_000_000_007

_OPERATORS = {
    "+": lambda a, b: a + b,
    "-": lambda a, b: a - b,
    "*": lambda a, b: a * b,
}


class RecentCounter:
    """Counts requests that happened within the last 3000 time units."""

    WINDOW = 3000

    def __init__(self) -> None:
        self._requests: deque[int] = deque()

    def ping(self, t: int) -> int:
        """Record a request at time ``t`` and return how many fall in ``[t - 3000, t]``."""
        self._requests.append(t)
        while self._requests[0] < t - self.WINDOW:
            self._requests.popleft()
        return len(self._requests)


class TwoStackQueue:
    """A FIFO queue built from two stacks."""

    def __init__(self) -> None:
        self._incoming: list[int] = []
        self._outgoing: list[int] = []

    def _shift(self) -> None:
        if not self._outgoing:
            while self._incoming:
                self._outgoing.append(self._incoming.pop())
        if not self._outgoing:
            raise IndexError("queue is empty")

    def push(self, x: int) -> None:
        self._incoming.append(x)

    def pop(self) -> int:
        self._shift()
        return self._outgoing.pop()

    def peek(self) -> int:
        self._shift()
        return self._outgoing[-1]

    def empty(self) -> bool:
        return not self._incoming and not self._outgoing

    def __len__(self) -> int:
        return len(self._incoming) + len(self._outgoing)


class RandomizedSet:
    """A set with O(1) insert, remove and uniform random choice."""

    def __init__(self, rng: random.Random | None = None) -> None:
        self._positions: dict[int, int] = {}
        self._values: list[int] = []
        self._rng = rng or random.Random()

    def insert(self, val: int) -> bool:
        """Add ``val``; return False if it was already present."""
        if val in self._positions:
            return False
        self._positions[val] = len(self._values)
        self._values.append(val)
        return True

    def remove(self, val: int) -> bool:
        """Remove ``val``; return False if it was absent."""
        position = self._positions.pop(val, None)
        if position is None:
            return False
        last = self._values.pop()
        if position < len(self._values):
            self._values[position] = last
            self._positions[last] = position
        return True

    def get_random(self) -> int:
        """Return a uniformly chosen member."""
        if not self._values:
            raise IndexError("cannot choose from an empty set")
        return self._rng.choice(self._values)

    def __contains__(self, val: object) -> bool:
        return val in self._positions

    def __len__(self) -> int:
        return len(self._values)


def asteroid_collision(asteroids: Iterable[int]) -> list[int]:
    """Return the asteroids left after all collisions."""
    stack: list[int] = []
    for asteroid in asteroids:
        if not stack or asteroid > 0 or not (stack[-1] > 0 and asteroid < 0):
            stack.append(asteroid)
            continue
        while stack and stack[-1] > 0 and stack[-1] < -asteroid:
            stack.pop()
        if not stack or stack[-1] < 0:
            stack.append(asteroid)
        elif stack[-1] == -asteroid:
            stack.pop()
    return stack


def remove_stars(s: str) -> str:
    """Each ``*`` removes itself and the closest non-star character to its left."""
    stack: list[str] = []
    for character in s:
        if character == "*":
            if not stack:
                raise ValueError("star with nothing to remove")
            stack.pop()
        else:
            stack.append(character)
    return "".join(stack)


def daily_temperatures(temperatures: Sequence[int]) -> list[int]:
    """For each day, the number of days until a warmer one, or 0."""
    answer = [0] * len(temperatures)
    stack: list[int] = []
    for index in reversed(range(len(temperatures))):
        while stack and temperatures[index] >= temperatures[stack[-1]]:
            stack.pop()
        if stack:
            answer[index] = stack[-1] - index
        stack.append(index)
    return answer


def _truncating_divide(a: int, b: int) -> int:
    quotient = abs(a) // abs(b)
    return quotient if (a < 0) == (b < 0) else -quotient


def eval_rpn(tokens: Iterable[str]) -> int:
    """Evaluate integer arithmetic in reverse Polish notation."""
    numbers: list[int] = []
    for token in tokens:
        if len(token) > 1 or token.isdigit():
            numbers.append(int(token))
            continue
        if token != "/" and token not in _OPERATORS:
            raise ValueError(f"unknown operator: {token!r}")
        if len(numbers) < 2:
            raise ValueError(f"operator {token!r} needs two operands")
        right = numbers.pop()
        left = numbers.pop()
        if token == "/":
            numbers.append(_truncating_divide(left, right))
        else:
            numbers.append(_OPERATORS[token](left, right))
    if not numbers:
        raise ValueError("no expression to evaluate")
    return numbers[-1]


def sum_subarray_mins(arr: Sequence[int]) -> int:
    """Sum of the minimum of every contiguous subarray, modulo 10**9 + 7."""
    size = len(arr)
    left = [0] * size
    right = [0] * size
    stack: list[int] = []
    for index, value in enumerate(arr):
        while stack and value < arr[stack[-1]]:
            stack.pop()
        left[index] = index - stack[-1] if stack else index + 1
        stack.append(index)
    stack.clear()
    for index in reversed(range(size)):
        while stack and arr[index] <= arr[stack[-1]]:
            stack.pop()
        right[index] = stack[-1] - index if stack else size - index
        stack.append(index)
    return sum(l * r * v for l, r, v in zip(left, right, arr)) % MOD