"""Checkers comparing numbers in a participant's output with the jury's answer."""

from __future__ import annotations

from cpalgo.verdict import (
    CheckResult,
    Outcome,
    _accept,
    _checker,
    _Reader,
    compress,
    ordinal_suffix,
)

_WA = Outcome.WRONG_ANSWER


def _streams(answer: str, output: str) -> tuple[_Reader, _Reader]:
    return _Reader(answer, Outcome.FAIL), _Reader(output, Outcome.PRESENTATION_ERROR)


@_checker
def compare_double(answer: str, output: str, eps: float = 1.5e-6) -> CheckResult:
    """Compare two reals with maximal absolute error ``eps``."""
    ans, out = _streams(answer, output)
    ja = ans.read_double()
    pa = out.read_double()
    if abs(ja - pa) > eps + 1e-15:
        return CheckResult(_WA, f"expected {ja:.10f}, found {pa:.10f}")
    return _accept(out, f"answer is {ja:.10f}")


@_checker
def compare_double_sequences(answer: str, output: str) -> CheckResult:
    """Compare sequences of reals with maximal absolute error 1.5e-5."""
    eps = 1.5e-5
    ans, out = _streams(answer, output)
    n = 0
    while not ans.at_end:
        n += 1
        j = ans.read_double()
        p = out.read_double()
        if abs(j - p) > eps + 1e-15:
            return CheckResult(
                _WA,
                f"{n}{ordinal_suffix(n)} numbers differ - "
                f"expected: '{j:.10f}', found: '{p:.10f}'",
            )
    return _accept(out, f"{n} numbers")


@_checker
def compare_int(answer: str, output: str) -> CheckResult:
    """Compare two signed 32-bit integers."""
    ans, out = _streams(answer, output)
    ja = ans.read_int()
    pa = out.read_int()
    if ja != pa:
        return CheckResult(_WA, f"expected {ja}, found {pa}")
    return _accept(out, f"answer is {ja}")


@_checker
def compare_long_sequences(answer: str, output: str) -> CheckResult:
    """Compare ordered sequences of signed 64-bit integers."""
    ans, out = _streams(answer, output)
    n = 0
    first: list[str] = []
    while not ans.at_end and not out.at_end:
        n += 1
        j = ans.read_long()
        p = out.read_long()
        if j != p:
            return CheckResult(
                _WA,
                f"{n}{ordinal_suffix(n)} numbers differ - expected: '{j}', found: '{p}'",
            )
        if n <= 5:
            first.append(str(j))
    extra_ans = 0
    while not ans.at_end:
        ans.read_long()
        extra_ans += 1
    extra_out = 0
    while not out.at_end:
        out.read_long()
        extra_out += 1
    if extra_ans:
        return CheckResult(
            _WA,
            f"Answer contains longer sequence [length = {n + extra_ans}], "
            f"but output contains {n} elements",
        )
    if extra_out:
        return CheckResult(
            _WA,
            f"Output contains longer sequence [length = {n + extra_out}], "
            f"but answer contains {n} elements",
        )
    if n <= 5:
        return _accept(out, f'{n} number(s): "{compress(" ".join(first))}"')
    return _accept(out, f"{n} numbers")


@_checker
def compare_unordered(answer: str, output: str) -> CheckResult:
    """Compare sequences of signed 64-bit integers as multisets."""
    ans, out = _streams(answer, output)
    ja: list[int] = []
    while not ans.at_end:
        ja.append(ans.read_long())
    pa: list[int] = []
    while not out.at_end:
        pa.append(out.read_long())
    if len(ja) != len(pa):
        return CheckResult(_WA, f"Expected {len(ja)} elements, but {len(pa)} found")
    ja.sort()
    pa.sort()
    if ja != pa:
        return CheckResult(
            _WA,
            "Expected sequence and output are different "
            f"(as unordered sequences) [size={len(ja)}]",
        )
    if len(ja) == 1:
        message = "1 number:"
    elif not ja:
        message = "empty sequence"
    else:
        message = f"{len(ja)} numbers (in increasing order):"
    shown = ja if len(ja) <= 5 else ja[:2] + ["..."] + ja[-2:]
    message += "".join(f" {x}" for x in shown)
    return _accept(out, message)


def _is_numeric(text: str) -> bool:
    return text == "0" or (
        text.lstrip("-") == text[1:] if text.startswith("-") else True
    ) and _huge_pattern(text)


def _huge_pattern(text: str) -> bool:
    digits = text[1:] if text.startswith("-") else text
    if text == "0":
        return True
    return bool(digits) and digits.isascii() and digits.isdigit() and digits[0] != "0"


@_checker
def compare_huge_int(answer: str, output: str) -> CheckResult:
    """Compare two signed integers of any length as exact strings."""
    ans, out = _streams(answer, output)
    ja = ans.read_word()
    pa = out.read_word()
    if not _is_numeric(ja):
        return CheckResult(Outcome.FAIL, f"{compress(ja)} is not a valid integer")
    if not ans.at_end:
        return CheckResult(Outcome.FAIL, "expected exactly one token in the answer file")
    if not _is_numeric(pa):
        return CheckResult(
            Outcome.PRESENTATION_ERROR, f"{compress(pa)} is not a valid integer"
        )
    if ja != pa:
        return CheckResult(_WA, f"expected '{compress(ja)}', found '{compress(pa)}'")
    return _accept(out, f"answer is '{compress(ja)}'")


@_checker
def score_points(answer: str, output: str) -> CheckResult:
    """Score the output by its absolute distance from the answer."""
    ans, out = _streams(answer, output)
    ja = ans.read_double()
    pa = out.read_double()
    return CheckResult(Outcome.POINTS, f"ja={ja:.4f} pa={pa:.4f}", points=abs(ja - pa))