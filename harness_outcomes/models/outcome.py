"""The recorded outcome of a single harness action."""

import operator
import re
import traceback
from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import TypeAlias

from harness_outcomes.models.expectation import Expectation
from harness_outcomes.models.result import Result, ResultValue, matters
from harness_outcomes.strings import join, sanitize_line, sanitize_lines

Clock: TypeAlias = Callable[[], datetime]

DEFAULT_SUITE_NAME = "defaultpackage"

_PATH_SEPARATORS = re.compile(r"[.#]")


def system_clock() -> datetime:
    """Current wall-clock time in UTC."""
    return datetime.now(UTC)


def exception_to_lines(exc: BaseException) -> Sequence[str]:
    """Render an exception and its causes as trace lines.

    The first line is ``Type: message``; frame lines follow, then one
    ``Caused by:`` block per chained exception. Blank lines are dropped.
    """
    lines: list[str] = []
    seen: set[int] = set()
    current: BaseException | None = exc
    prefix = ""
    while current is not None and id(current) not in seen:
        seen.add(id(current))
        header = traceback.format_exception_only(current)
        body = traceback.format_tb(current.__traceback__)
        chunk = [line for text in header + body for line in text.split("\n")]
        chunk = [line for line in chunk if line.strip()]
        if chunk:
            chunk[0] = prefix + chunk[0]
        lines.extend(chunk)
        prefix = "Caused by: "
        if current.__cause__ is not None:
            current = current.__cause__
        elif not current.__suppress_context__:
            current = current.__context__
        else:
            current = None
    return lines


@dataclass(frozen=True, kw_only=True)
class Outcome:
    """Outcome of an action.

    Some actions have several outcomes; a JUnit-style suite has one per test
    method. ``output`` is always stored sanitized, and ``date`` takes no
    part in equality or hashing.
    """

    name: str
    result: Result
    output: str = ""
    date: datetime = field(default_factory=system_clock, compare=False)

    def __post_init__(self) -> None:
        self._check_fields()
        object.__setattr__(self, "output", sanitize_line(self.output))

    def _check_fields(self) -> None:
        if not isinstance(self.name, str):
            raise TypeError(f"Outcome name must be a str, got {type(self.name)!r}")
        if not isinstance(self.result, Result):
            raise TypeError(
                f"Outcome result must be a Result, got {type(self.result)!r}"
            )
        if not isinstance(self.output, str):
            raise TypeError(
                f"Outcome output must be a str, got {type(self.output)!r}"
            )

    @classmethod
    def _from_sanitized(
        cls, name: str, result: Result, output: str, date: datetime
    ) -> "Outcome":
        # Output is already sanitized; skip __post_init__ so it is not redone.
        outcome = object.__new__(cls)
        for attr, value in (
            ("name", name),
            ("result", result),
            ("output", output),
            ("date", date),
        ):
            object.__setattr__(outcome, attr, value)
        outcome._check_fields()
        return outcome

    @classmethod
    def from_lines(
        cls,
        name: str,
        result: Result,
        lines: Iterable[str],
        date: datetime | None = None,
        clock: Clock = system_clock,
    ) -> "Outcome":
        """Build from raw output lines, sanitizing each before joining."""
        if isinstance(lines, str):
            raise TypeError("lines must be an iterable of lines, not a str")
        return cls._from_sanitized(
            name,
            result,
            sanitize_lines(lines),
            date if date is not None else clock(),
        )

    @classmethod
    def from_line(
        cls,
        name: str,
        result: Result,
        line: str,
        date: datetime | None = None,
        clock: Clock = system_clock,
    ) -> "Outcome":
        """Build from a single raw output string."""
        return cls._from_sanitized(
            name,
            result,
            sanitize_line(line),
            date if date is not None else clock(),
        )

    @classmethod
    def from_exception(
        cls,
        name: str,
        result: Result,
        exc: BaseException,
        clock: Clock = system_clock,
    ) -> "Outcome":
        """Build from a caught exception; its trace becomes the output."""
        return cls.from_lines(name, result, exception_to_lines(exc), clock=clock)

    @property
    def output_lines(self) -> Sequence[str]:
        """Output split back into its lines."""
        return self.output.split("\n")

    @property
    def suite_name(self) -> str:
        """Suite part of the name, such as ``java.lang.IntegerTest``."""
        split = _split_point(self.name)
        return DEFAULT_SUITE_NAME if split == -1 else self.name[:split]

    @property
    def test_name(self) -> str:
        """Specific test part of the name, such as ``testBitTwiddle``."""
        split = _split_point(self.name)
        return self.name if split == -1 else self.name[split + 1 :]

    @property
    def path(self) -> str:
        """Name as a slash separated path; every ``.`` and ``#`` separates.

        Trailing empty segments are dropped, so ``pkg.Test#`` gives ``pkg/Test``.
        """
        segments = _PATH_SEPARATORS.split(self.name)
        while segments and not segments[-1]:
            segments.pop()
        return join(segments, "/")

    def matters(self) -> bool:
        """Whether the expectation is worth consulting at all."""
        return matters(self.result)

    def get_result_value(self, expectation: Expectation) -> ResultValue:
        """Compare against the expectation; unsupported outcomes are ignored."""
        if not self.matters():
            return ResultValue.IGNORE
        return ResultValue.OK if expectation.matches(self) else ResultValue.FAIL


def _split_point(name: str) -> int:
    # "#" separates class from method and wins over any dot.
    last_hash = name.rfind("#")
    return last_hash if last_hash != -1 else name.rfind(".")


def compare_by_name(a: Outcome, b: Outcome) -> int:
    """Three-way comparison of outcome names by code point."""
    return (a.name > b.name) - (a.name < b.name)


ORDER_BY_NAME = operator.attrgetter("name")


def sorted_by_name(outcomes: Iterable[Outcome]) -> list[Outcome]:
    """Outcomes sorted by name, ties kept in input order."""
    return sorted(outcomes, key=ORDER_BY_NAME)
