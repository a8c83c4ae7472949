"""Models for run definitions: recorded outcomes plus their expectations."""

from collections.abc import Mapping, Sequence
from datetime import datetime

from pydantic import Field

from harness_outcomes.models.base import Model
from harness_outcomes.models.expectation import SUCCESS, OutcomeExpectation
from harness_outcomes.models.outcome import Clock, Outcome, system_clock
from harness_outcomes.models.result import Result


class OutcomeRecord(Model):
    """Raw outcome as written by the harness, before sanitization."""

    name: str = Field(..., description="Dotted outcome name, optionally with '#'")
    result: Result = Field(..., description="Result code reported by the harness")
    output: Sequence[str] = Field(
        default_factory=list, description="Raw output lines"
    )
    date: datetime | None = Field(
        default=None, description="When the outcome was recorded"
    )

    def to_outcome(self, clock: Clock = system_clock) -> Outcome:
        """Convert into a sanitized Outcome, reading the clock if undated."""
        return Outcome.from_lines(
            self.name, self.result, self.output, date=self.date, clock=clock
        )


class RunDefinition(Model):
    """Complete run definition loaded from a JSON file."""

    outcomes: Sequence[OutcomeRecord] = Field(
        default_factory=list, description="Outcomes recorded during the run"
    )
    expectations: Mapping[str, OutcomeExpectation] = Field(
        default_factory=dict,
        description="Expectations keyed by outcome name or suite name",
    )
    default_expectation: OutcomeExpectation = Field(
        default=SUCCESS,
        description="Expectation for outcomes without a specific entry",
    )

    def expectation_for(self, outcome: Outcome) -> OutcomeExpectation:
        """Look up by full name, then by suite name, then use the default."""
        if (expectation := self.expectations.get(outcome.name)) is not None:
            return expectation
        if (expectation := self.expectations.get(outcome.suite_name)) is not None:
            return expectation
        return self.default_expectation

    def to_outcomes(self, clock: Clock = system_clock) -> Sequence[Outcome]:
        """Convert every record into an Outcome."""
        return [record.to_outcome(clock) for record in self.outcomes]
