"""Stack-based algorithms and two small stack-backed containers."""

from __future__ import annotations

import re
from collections.abc import Iterable, Sequence

_CALC_LEXEME = re.compile(r"[0-9]+|\S")
_OPERATORS = frozenset("+-*/")
_CLOSE_TO_OPEN = {")": "(", "]": "[", "}": "{"}


def _truncating_div(a: int, b: int) -> int:
    """Integer division rounding toward zero."""
    quotient = abs(a) // abs(b)
    return quotient if (a < 0) == (b < 0) else -quotient


def asteroid_collision(asteroids: Iterable[int]) -> list[int]:
    """Asteroids left after all collisions; the sign gives the direction."""
    survivors: list[int] = []
    for asteroid in asteroids:
        alive = True
        while alive and survivors and survivors[-1] > 0 and asteroid < 0:
            size = -asteroid
            if size > survivors[-1]:
                survivors.pop()
            elif size < survivors[-1]:
                alive = False
            else:
                survivors.pop()
                alive = False
        if alive:
            survivors.append(asteroid)
    return survivors


def calculate(expression: str) -> int:
    """Evaluate non-negative integers joined by + - * /, with the usual precedence.

    Division truncates toward zero. A malformed expression raises ValueError.
    """
    terms: list[int] = []
    operator = "+"
    expect_number = True
    for match in _CALC_LEXEME.finditer(expression):
        lexeme = match.group()
        if expect_number:
            if not lexeme[0].isascii() or not lexeme.isdigit():
                raise ValueError(f"expected a number, got {lexeme!r}")
            value = int(lexeme)
            if operator == "+":
                terms.append(value)
            elif operator == "-":
                terms.append(-value)
            elif operator == "*":
                terms[-1] *= value
            else:
                terms[-1] = _truncating_div(terms[-1], value)
            expect_number = False
        else:
            if lexeme not in _OPERATORS:
                raise ValueError(f"expected an operator, got {lexeme!r}")
            operator = lexeme
            expect_number = True
    if expect_number:
        raise ValueError("incomplete expression")
    return sum(terms)


def daily_temperatures(temperatures: Sequence[int]) -> list[int]:
    """For each day, how many days until a warmer one; 0 if none comes."""
    waits = [0] * len(temperatures)
    pending: list[int] = []
    for day, temperature in enumerate(temperatures):
        while pending and temperature > temperatures[pending[-1]]:
            earlier = pending.pop()
            waits[earlier] = day - earlier
        pending.append(day)
    return waits


def decode_string(s: str) -> str:
    """Expand k[text] groups, which may nest, into text repeated k times."""
    frames: list[tuple[list[str], int]] = []
    current: list[str] = []
    digits = ""
    for char in s:
        if "0" <= char <= "9":
            digits += char
            continue
        if char == "[":
            frames.append((current, int(digits or "0")))
            current = []
            digits = ""
            continue
        if digits:
            current.append(digits)
            digits = ""
        if char == "]":
            if not frames:
                raise ValueError("unmatched ']'")
            outer, count = frames.pop()
            outer.append("".join(current) * count)
            current = outer
        else:
            current.append(char)
    if frames:
        raise ValueError("unmatched '['")
    current.append(digits)
    return "".join(current)


def eval_rpn(tokens: Iterable[str]) -> int:
    """Evaluate integer tokens in reverse Polish notation; division truncates."""
    stack: list[int] = []
    for item in tokens:
        if item in _OPERATORS:
            if len(stack) < 2:
                raise ValueError(f"not enough operands for {item!r}")
            right = stack.pop()
            left = stack.pop()
            if item == "+":
                stack.append(left + right)
            elif item == "-":
                stack.append(left - right)
            elif item == "*":
                stack.append(left * right)
            else:
                stack.append(_truncating_div(left, right))
        else:
            stack.append(int(item))
    if not stack:
        raise ValueError("no tokens to evaluate")
    return stack[-1]


def is_valid_parentheses(s: str) -> bool:
    """True if every bracket is closed by the matching kind in the right order."""
    stack: list[str] = []
    for char in s:
        opener = _CLOSE_TO_OPEN.get(char)
        if opener is None:
            stack.append(char)
        elif stack and stack[-1] == opener:
            stack.pop()
        else:
            return False
    return not stack


class MinStack:
    """A stack that also reports its smallest element in constant time."""

    def __init__(self) -> None:
        self._items: list[tuple[int, int]] = []

    def push(self, value: int) -> None:
        smallest = min(value, self._items[-1][1]) if self._items else value
        self._items.append((value, smallest))

    def pop(self) -> int:
        if not self._items:
            raise IndexError("pop from empty MinStack")
        return self._items.pop()[0]

    def top(self) -> int:
        if not self._items:
            raise IndexError("top of empty MinStack")
        return self._items[-1][0]

    def get_min(self) -> int:
        if not self._items:
            raise IndexError("get_min of empty MinStack")
        return self._items[-1][1]

    def __len__(self) -> int:
        return len(self._items)


class StackQueue:
    """A first-in, first-out queue built from two stacks."""

    def __init__(self) -> None:
        self._inbox: list[int] = []
        self._outbox: list[int] = []

    def _refill(self) -> None:
        if not self._outbox:
            while self._inbox:
                self._outbox.append(self._inbox.pop())
        if not self._outbox:
            raise IndexError("queue is empty")

    def push(self, value: int) -> None:
        self._inbox.append(value)

    def pop(self) -> int:
        self._refill()
        return self._outbox.pop()

    def peek(self) -> int:
        self._refill()
        return self._outbox[-1]

    def is_empty(self) -> bool:
        return not self._inbox and not self._outbox

    def __len__(self) -> int:
        return len(self._inbox) + len(self._outbox)