"""Checkers comparing tokens, lines and 'Case k:' blocks of output and answer."""

from __future__ import annotations

from collections.abc import Callable
from typing import TypeVar

from cpalgo.verdict import (
    CheckResult,
    Outcome,
    _accept,
    _checker,
    _quit,
    _Reader,
    compress,
    ordinal_suffix,
)

_WA = Outcome.WRONG_ANSWER
_T = TypeVar("_T")

YES = "YES"
NO = "NO"


def _streams(answer: str, output: str) -> tuple[_Reader, _Reader]:
    return _Reader(answer, Outcome.FAIL), _Reader(output, Outcome.PRESENTATION_ERROR)


@_checker
def compare_tokens(answer: str, output: str) -> CheckResult:
    """Compare two sequences of whitespace-separated tokens."""
    ans, out = _streams(answer, output)
    n = 0
    j = p = ""
    while not ans.at_end and not out.at_end:
        n += 1
        j = ans.read_word()
        p = out.read_word()
        if j != p:
            return CheckResult(
                _WA,
                f"{n}{ordinal_suffix(n)} words differ - "
                f"expected: '{compress(j)}', found: '{compress(p)}'",
            )
    if ans.at_end and out.at_end:
        return CheckResult(Outcome.OK, f'"{compress(j)}"' if n == 1 else f"{n} tokens")
    if ans.at_end:
        return CheckResult(_WA, "Participant output contains extra tokens")
    return CheckResult(_WA, "Unexpected EOF in the participants output")


class _Lines:
    def __init__(self, text: str, failure: Outcome) -> None:
        lines = text.split("\n")
        if lines[-1] == "":
            lines.pop()
        self._lines = [line.removesuffix("\r") for line in lines]
        self._pos = 0
        self.failure = failure

    @property
    def eof(self) -> bool:
        return self._pos >= len(self._lines)

    def read(self) -> str:
        if self.eof:
            _quit(self.failure, "Unexpected end of file - string expected")
        line = self._lines[self._pos]
        self._pos += 1
        return line

    def rest_blank(self) -> bool:
        return all(not line.strip() for line in self._lines[self._pos :])


def _compare_by_line(
    answer: str, output: str, same: Callable[[str, str], bool], report_output: bool
) -> CheckResult:
    ans = _Lines(answer, Outcome.FAIL)
    out = _Lines(output, Outcome.PRESENTATION_ERROR)
    shown = ""
    n = 0
    while not ans.eof:
        j = ans.read()
        if j == "" and ans.eof:
            break
        p = out.read()
        shown = p if report_output else j
        n += 1
        if not same(j, p):
            return CheckResult(
                _WA,
                f"{n}{ordinal_suffix(n)} lines differ - "
                f"expected: '{compress(j)}', found: '{compress(p)}'",
            )
    if not out.rest_blank():
        return CheckResult(
            Outcome.PRESENTATION_ERROR, "Extra information in the output file"
        )
    if n == 1:
        return CheckResult(Outcome.OK, f"single line: '{compress(shown)}'")
    return CheckResult(Outcome.OK, f"{n} lines")


@_checker
def compare_lines(answer: str, output: str) -> CheckResult:
    """Compare files line by line, exactly."""
    return _compare_by_line(answer, output, str.__eq__, report_output=False)


@_checker
def compare_line_tokens(answer: str, output: str) -> CheckResult:
    """Compare files line by line, as sequences of tokens on each line."""
    return _compare_by_line(
        answer, output, lambda a, b: a.split() == b.split(), report_output=True
    )


@_checker
def compare_yes_no(answer: str, output: str) -> CheckResult:
    """Compare single YES/NO words, ignoring case."""
    ans, out = _streams(answer, output)
    ja = ans.read_word().upper()
    pa = out.read_word().upper()
    if ja not in (YES, NO):
        return CheckResult(
            Outcome.FAIL, f"{YES} or {NO} expected in answer, but {compress(ja)} found"
        )
    if pa not in (YES, NO):
        return CheckResult(
            Outcome.PRESENTATION_ERROR,
            f"{YES} or {NO} expected, but {compress(pa)} found",
        )
    if ja != pa:
        return CheckResult(_WA, f"expected {compress(ja)}, found {compress(pa)}")
    return _accept(out, f"answer is {ja}")


def _expect_header(reader: _Reader, case: int, read_case_word: bool) -> None:
    if read_case_word:
        word = reader.read_word()
        if word != "Case":
            _quit(
                reader.failure,
                f"Expected 'Case' but found '{compress(word)}' [test case {case}]",
            )
    expected = f"{case}:"
    number = reader.read_word()
    if number != expected:
        _quit(
            reader.failure,
            f"Expected '{compress(expected)}' but found '{compress(number)}' "
            f"[test case {case}]",
        )


def _summary(values: list[int]) -> str:
    shown = values if len(values) <= 5 else values[:3] + ["..."] + values[-2:]
    return "".join(f" {x}" for x in shown)


@_checker
def compare_cases_single(answer: str, output: str) -> CheckResult:
    """Compare 'Case k: <number>' blocks holding one 64-bit integer each."""
    ans, out = _streams(answer, output)

    def read_all(reader: _Reader) -> list[int]:
        values: list[int] = []
        while not reader.at_end:
            _expect_header(reader, len(values) + 1, True)
            values.append(reader.read_long())
        return values

    ja = read_all(ans)
    pa = read_all(out)
    for case, (j, p) in enumerate(zip(ja, pa), start=1):
        if j != p:
            return CheckResult(_WA, f"Expected {j} found {p} [test case {case}]")
    if len(ja) != len(pa):
        return CheckResult(
            Outcome.PRESENTATION_ERROR,
            f"Expected {len(ja)} test case(s) but found {len(pa)}",
        )
    return CheckResult(Outcome.OK, f"{len(ja)} case(s):" + _summary(ja))


def _read_case(
    reader: _Reader, case: int, preread: bool, convert: Callable[[_Reader, str], _T]
) -> tuple[list[_T], bool]:
    _expect_header(reader, case, not preread)
    values: list[_T] = []
    while not reader.at_end:
        token = reader.read_word()
        if token == "Case":
            preread = True
            break
        values.append(convert(reader, token))
    return values, preread


def _compare_cases(
    answer: str,
    output: str,
    convert: Callable[[_Reader, str], _T],
    describe: Callable[[list[_T]], str],
) -> CheckResult:
    ans, out = _streams(answer, output)
    case = 0
    ans_preread = out_preread = False
    while not ans.at_end:
        case += 1
        ja, ans_preread = _read_case(ans, case, ans_preread, convert)
        pa, out_preread = _read_case(out, case, out_preread, convert)
        if ja != pa:
            return CheckResult(
                _WA,
                f"Sequences differ: jury has {describe(ja)}, "
                f"but participant has {describe(pa)} [test case {case}]",
            )
    return _accept(out, f"{case} test cases(s)")


def _describe_longs(values: list[int]) -> str:
    if not values:
        return '"" [size=0]'
    return f'"{_summary(values).strip()}" [size={len(values)}]'


def _describe_tokens(values: list[str]) -> str:
    if not values:
        return '"" [size=0]'
    return f'"{compress(" ".join(values).strip())}" [size={len(values)}]'


@_checker
def compare_cases_ints(answer: str, output: str) -> CheckResult:
    """Compare 'Case k:' blocks each holding a sequence of 64-bit integers."""
    return _compare_cases(
        answer, output, lambda reader, token: reader.to_long(token), _describe_longs
    )


@_checker
def compare_cases_tokens(answer: str, output: str) -> CheckResult:
    """Compare 'Case k:' blocks each holding a sequence of tokens."""
    return _compare_cases(answer, output, lambda reader, token: token, _describe_tokens)