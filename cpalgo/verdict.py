"""Checker verdicts and the helpers the checkers share."""

from __future__ import annotations

import re
from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from functools import wraps
from typing import TypeVar

_INT32 = (-(2**31), 2**31 - 1)
_INT64 = (-(2**63), 2**63 - 1)
_INTEGER = re.compile(r"-?(0|[1-9][0-9]*)")
_REAL = re.compile(r"[-+]?([0-9]+\.?[0-9]*|\.[0-9]+)([eE][-+]?[0-9]+)?")


class Outcome(Enum):
    """Verdict a checker gives a participant's output."""

    OK = "ok"
    WRONG_ANSWER = "wrong answer"
    PRESENTATION_ERROR = "wrong output format"
    FAIL = "FAIL"
    POINTS = "points"


@dataclass(frozen=True)
class CheckResult:
    """A verdict, its explanation and, for scored checks, the points."""

    outcome: Outcome
    message: str
    points: float | None = None

    @property
    def accepted(self) -> bool:
        return self.outcome is Outcome.OK

    def __str__(self) -> str:
        return f"{self.outcome.value} {self.message}"


def ordinal_suffix(n: int) -> str:
    """English ordinal ending for ``n``: st, nd, rd or th."""
    if (abs(n) // 10) % 10 == 1:
        return "th"
    return {1: "st", 2: "nd", 3: "rd"}.get(abs(n) % 10, "th")


def compress(text: str) -> str:
    """Shorten text longer than 64 characters, keeping both ends."""
    if len(text) <= 64:
        return text
    return text[:30] + "..." + text[-31:]


class _Abort(Exception):
    def __init__(self, result: CheckResult) -> None:
        super().__init__(result.message)
        self.result = result


def _quit(outcome: Outcome, message: str) -> None:
    raise _Abort(CheckResult(outcome, message))


_F = TypeVar("_F", bound=Callable[..., CheckResult])


def _checker(func: _F) -> _F:
    """Turn an early verdict raised while reading into the returned result."""

    @wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except _Abort as abort:
            return abort.result

    return wrapper  # type: ignore[return-value]


class _Reader:
    """Whitespace-separated tokens of one stream; bad input ends the check."""

    def __init__(self, text: str, failure: Outcome) -> None:
        self._tokens = text.split()
        self._pos = 0
        self.failure = failure

    @property
    def at_end(self) -> bool:
        return self._pos >= len(self._tokens)

    def read_word(self) -> str:
        if self.at_end:
            _quit(self.failure, "Unexpected end of file - token expected")
        token = self._tokens[self._pos]
        self._pos += 1
        return token

    def to_long(self, token: str, bounds: tuple[int, int] = _INT64) -> int:
        if not _INTEGER.fullmatch(token) or token == "-0":
            _quit(self.failure, f'Expected integer, but "{compress(token)}" found')
        value = int(token)
        if not bounds[0] <= value <= bounds[1]:
            _quit(self.failure, f'Integer "{compress(token)}" violates the range')
        return value

    def read_long(self) -> int:
        return self.to_long(self.read_word())

    def read_int(self) -> int:
        return self.to_long(self.read_word(), _INT32)

    def read_double(self) -> float:
        token = self.read_word()
        if not _REAL.fullmatch(token):
            _quit(self.failure, f'Expected double, but "{compress(token)}" found')
        return float(token)


def _accept(output: _Reader, message: str) -> CheckResult:
    if not output.at_end:
        return CheckResult(Outcome.PRESENTATION_ERROR, "Extra information in the output file")
    return CheckResult(Outcome.OK, message)