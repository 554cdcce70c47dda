from cpalgo.token_checkers import (
    compare_cases_ints,
    compare_cases_single,
    compare_cases_tokens,
    compare_line_tokens,
    compare_lines,
    compare_tokens,
    compare_yes_no,
)
from cpalgo.verdict import Outcome


def test_compare_tokens_ignores_whitespace_layout():
    assert compare_tokens("a b\nc", "a\n b  c\n").outcome is Outcome.OK


def test_compare_tokens_different_word():
    result = compare_tokens("a b c", "a x c")
    assert result.outcome is Outcome.WRONG_ANSWER
    assert "words differ" in result.message


def test_compare_tokens_extra_and_missing():
    extra = compare_tokens("a", "a b")
    assert extra.message == "Participant output contains extra tokens"
    missing = compare_tokens("a b", "a")
    assert missing.message == "Unexpected EOF in the participants output"


def test_compare_lines_equal_and_trailing_newline():
    assert compare_lines("x y\nz\n", "x y\nz").outcome is Outcome.OK
    assert compare_lines("x\n\n", "x\n").outcome is Outcome.OK


def test_compare_lines_exact_spacing_matters():
    result = compare_lines("x y\n", "x  y\n")
    assert result.outcome is Outcome.WRONG_ANSWER
    assert "lines differ" in result.message


def test_compare_lines_missing_output_line():
    assert compare_lines("a\nb\n", "a\n").outcome is Outcome.PRESENTATION_ERROR


def test_compare_line_tokens_ignores_spacing_within_line():
    assert compare_line_tokens("x y\nz\n", "x   y\n z \n").outcome is Outcome.OK
    assert compare_line_tokens("x y\n", "x z\n").outcome is Outcome.WRONG_ANSWER


def test_compare_yes_no():
    assert compare_yes_no("YES", "yes").outcome is Outcome.OK
    assert compare_yes_no("NO", "Yes").outcome is Outcome.WRONG_ANSWER
    assert compare_yes_no("maybe", "YES").outcome is Outcome.FAIL
    assert compare_yes_no("NO", "maybe").outcome is Outcome.PRESENTATION_ERROR


def test_compare_cases_single():
    answer = "Case 1: 5\nCase 2: 7\n"
    assert compare_cases_single(answer, answer).outcome is Outcome.OK
    assert compare_cases_single(answer, "Case 1: 5\nCase 2: 8").outcome is Outcome.WRONG_ANSWER


def test_compare_cases_single_format_errors():
    answer = "Case 1: 5\nCase 2: 7\n"
    assert compare_cases_single(answer, "case 1: 5\nCase 2: 7").outcome is Outcome.PRESENTATION_ERROR
    assert compare_cases_single(answer, "Case 1: 5").outcome is Outcome.PRESENTATION_ERROR
    assert compare_cases_single("Case 2: 5", "Case 1: 5").outcome is Outcome.FAIL


def test_compare_cases_ints():
    answer = "Case 1: 1 2 3\nCase 2:\nCase 3: 4\n"
    assert compare_cases_ints(answer, answer).outcome is Outcome.OK
    assert compare_cases_ints(answer, "Case 1: 1 2\nCase 2:\nCase 3: 4").outcome is Outcome.WRONG_ANSWER
    assert compare_cases_ints("Case 1: 1", "Case 1: x").outcome is Outcome.PRESENTATION_ERROR


def test_compare_cases_tokens():
    answer = "Case 1: a b\nCase 2: c\n"
    assert compare_cases_tokens(answer, answer).outcome is Outcome.OK
    result = compare_cases_tokens(answer, "Case 1: a b\nCase 2: d\n")
    assert result.outcome is Outcome.WRONG_ANSWER
    assert result.message.endswith("[test case 2]")