"""Expectations that decide whether an outcome is the correct one."""

import re
from typing import TYPE_CHECKING, Protocol, runtime_checkable

from pydantic import Field, field_validator

from harness_outcomes.models.base import Model
from harness_outcomes.models.result import Result

if TYPE_CHECKING:
    from harness_outcomes.models.outcome import Outcome


@runtime_checkable
class Expectation(Protocol):
    """Anything able to judge an outcome."""

    def matches(self, outcome: "Outcome") -> bool:
        """Return whether the outcome is what was expected."""
        ...


class OutcomeExpectation(Model):
    """Expected result code and output shape for an outcome."""

    result: Result = Field(default=Result.SUCCESS, description="Expected result")
    pattern: str = Field(
        default=".*",
        description="Regular expression the whole sanitized output must match",
    )
    description: str | None = Field(default=None, description="Why it is expected")

    @field_validator("pattern")
    @classmethod
    def _compiles(cls, value: str) -> str:
        try:
            re.compile(value)
        except re.error as e:
            raise ValueError(f"invalid pattern {value!r}: {e}") from e
        return value

    def matches(self, outcome: "Outcome") -> bool:
        """Match on result code first, then on the full output."""
        if outcome.result != self.result:
            return False
        return re.fullmatch(self.pattern, outcome.output, re.DOTALL) is not None


SUCCESS = OutcomeExpectation(description="Outcome succeeded with any output")
