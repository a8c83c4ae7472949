"""Classification of recorded outcomes against a run definition."""

import logging
from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass

from harness_outcomes.models.definition import RunDefinition
from harness_outcomes.models.outcome import Outcome, sorted_by_name
from harness_outcomes.models.result import ResultValue

log = logging.getLogger(__name__)


@dataclass(frozen=True, kw_only=True)
class ClassifiedOutcome:
    """An outcome together with its verdict."""

    outcome: Outcome
    value: ResultValue


@dataclass(frozen=True, kw_only=True)
class OutcomeClassifier:
    """Judges outcomes using the expectations of a single run definition."""

    definition: RunDefinition

    def classify(self, outcomes: Iterable[Outcome]) -> Sequence[ClassifiedOutcome]:
        """Classify outcomes, returned in name order.

        Args:
            outcomes: Outcomes to judge

        Returns:
            One classified outcome per input outcome, sorted by name

        """
        classified: list[ClassifiedOutcome] = []
        for outcome in sorted_by_name(outcomes):
            expectation = self.definition.expectation_for(outcome)
            value = outcome.get_result_value(expectation)
            log.debug(
                "Classified %s: result=%s value=%s",
                outcome.name,
                outcome.result,
                value,
            )
            classified.append(ClassifiedOutcome(outcome=outcome, value=value))

        log.info("Classified %d outcome(s)", len(classified))
        return classified


def group_by_suite(
    classified: Iterable[ClassifiedOutcome],
) -> Mapping[str, Sequence[ClassifiedOutcome]]:
    """Group classified outcomes by suite name, keeping their order."""
    suites: dict[str, list[ClassifiedOutcome]] = {}
    for item in classified:
        suites.setdefault(item.outcome.suite_name, []).append(item)
    return suites
