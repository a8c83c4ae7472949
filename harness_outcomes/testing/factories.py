"""Test factories for generating outcome data."""

from datetime import UTC, datetime

from polyfactory import Use
from polyfactory.factories import DataclassFactory
from polyfactory.factories.pydantic_factory import ModelFactory

from harness_outcomes.models.definition import OutcomeRecord, RunDefinition
from harness_outcomes.models.expectation import OutcomeExpectation
from harness_outcomes.models.outcome import Outcome

FIXED_DATE = datetime(2024, 1, 1, tzinfo=UTC)


class OutcomeFactory(DataclassFactory[Outcome]):
    """Factory for Outcome."""

    __model__ = Outcome

    output = ""
    date = FIXED_DATE


class OutcomeRecordFactory(ModelFactory[OutcomeRecord]):
    """Factory for OutcomeRecord."""

    output = Use(list[str])
    date = FIXED_DATE


class OutcomeExpectationFactory(ModelFactory[OutcomeExpectation]):
    """Factory for OutcomeExpectation."""

    pattern = ".*"
    description = None


class RunDefinitionFactory(ModelFactory[RunDefinition]):
    """Factory for RunDefinition."""

    outcomes = Use(list[OutcomeRecord])
    expectations = Use(dict)
    default_expectation = Use(OutcomeExpectation)
