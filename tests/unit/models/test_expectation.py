"""Tests for OutcomeExpectation."""

import pytest
from pydantic import ValidationError

from harness_outcomes.models.expectation import (
    SUCCESS,
    Expectation,
    OutcomeExpectation,
)
from harness_outcomes.models.outcome import Outcome
from harness_outcomes.models.result import Result, ResultValue


def test_default_expects_success_with_any_output() -> None:
    """The default expectation accepts any successful outcome."""
    outcome = Outcome.from_lines("x", Result.SUCCESS, ["line 1", "line 2"])

    assert SUCCESS.matches(outcome)


def test_result_mismatch_does_not_match() -> None:
    """A different result code never matches."""
    outcome = Outcome(name="x", result=Result.EXEC_FAILED)

    assert not SUCCESS.matches(outcome)


def test_pattern_must_match_whole_output() -> None:
    """The pattern is matched against the full output, across lines."""
    expectation = OutcomeExpectation(
        result=Result.EXEC_FAILED, pattern="expected.*error"
    )
    matching = Outcome.from_lines("x", Result.EXEC_FAILED, ["expected", "error"])
    partial = Outcome.from_line("x", Result.EXEC_FAILED, "expected an error, then more")

    assert expectation.matches(matching)
    assert not expectation.matches(partial)


def test_pattern_sees_sanitized_output() -> None:
    """Patterns are written against the escaped output."""
    expectation = OutcomeExpectation(pattern="a &lt; b")
    outcome = Outcome.from_line("x", Result.SUCCESS, "a < b")

    assert expectation.matches(outcome)


def test_invalid_pattern_is_rejected() -> None:
    """A pattern that does not compile fails validation."""
    with pytest.raises(ValidationError) as exc_info:
        OutcomeExpectation(pattern="(unclosed")

    assert "invalid pattern" in str(exc_info.value)


def test_is_an_expectation() -> None:
    """OutcomeExpectation satisfies the Expectation protocol."""
    assert isinstance(SUCCESS, Expectation)


def test_classifies_outcome() -> None:
    """Works as the collaborator of Outcome.get_result_value."""
    expectation = OutcomeExpectation(result=Result.EXEC_TIMEOUT)

    assert (
        Outcome(name="x", result=Result.EXEC_TIMEOUT).get_result_value(expectation)
        is ResultValue.OK
    )
    assert (
        Outcome(name="x", result=Result.SUCCESS).get_result_value(expectation)
        is ResultValue.FAIL
    )
    assert (
        Outcome(name="x", result=Result.UNSUPPORTED).get_result_value(expectation)
        is ResultValue.IGNORE
    )
