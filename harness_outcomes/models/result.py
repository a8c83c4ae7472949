"""Result codes recorded for an outcome and the verdicts derived from them."""

from enum import StrEnum
from typing import assert_never


class Result(StrEnum):
    """Status reported by the harness when an action finishes."""

    SUCCESS = "success"
    EXEC_FAILED = "exec_failed"
    EXEC_TIMEOUT = "exec_timeout"
    COMPILE_FAILED = "compile_failed"
    ERROR = "error"
    UNSUPPORTED = "unsupported"


class ResultValue(StrEnum):
    """Verdict of an outcome once compared against its expectation."""

    OK = "ok"
    FAIL = "fail"
    IGNORE = "ignore"


def matters(result: Result) -> bool:
    """Return whether outcomes with this result are worth checking.

    Skipped actions (``UNSUPPORTED``) carry nothing to compare, so their
    expectation is never consulted.
    """
    match result:
        case Result.UNSUPPORTED:
            return False
        case (
            Result.SUCCESS
            | Result.EXEC_FAILED
            | Result.EXEC_TIMEOUT
            | Result.COMPILE_FAILED
            | Result.ERROR
        ):
            return True
        case _:
            assert_never(result)
