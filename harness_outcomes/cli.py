"""CLI entry point for classifying recorded harness outcomes."""

import argparse
import json
import logging
import sys
from collections.abc import Sequence
from pathlib import Path
from typing import Any

from harness_outcomes.classifier import (
    ClassifiedOutcome,
    OutcomeClassifier,
    group_by_suite,
)
from harness_outcomes.loader import RunDefinitionError, load_run_definition
from harness_outcomes.models.result import ResultValue

STATUS_SYMBOLS = {
    ResultValue.OK: "✅",
    ResultValue.FAIL: "❌",
    ResultValue.IGNORE: "➖",
}

EXIT_OK = 0
EXIT_FAILURES = 1
EXIT_BAD_DEFINITION = 2


def log_results_summary(
    log: logging.Logger, classified: Sequence[ClassifiedOutcome]
) -> None:
    """Log a summary of classified outcomes, grouped by suite."""
    log.info("=" * 80)
    log.info("Outcome Summary:")
    log.info("=" * 80)

    for suite_name, items in group_by_suite(classified).items():
        log.info("%s", suite_name)
        for item in items:
            symbol = STATUS_SYMBOLS.get(item.value, "?")
            log.info(
                "  %s %s: %s (%s)",
                symbol,
                item.outcome.test_name,
                item.value,
                item.outcome.result,
            )
            if item.value is ResultValue.FAIL and item.outcome.output:
                log.info("    Output: %s", item.outcome.output_lines[0])


def format_output(classified: Sequence[ClassifiedOutcome]) -> dict[str, Any]:
    """Format classified outcomes for JSON output."""
    results: list[dict[str, Any]] = [
        {
            "name": item.outcome.name,
            "suite": item.outcome.suite_name,
            "test": item.outcome.test_name,
            "path": item.outcome.path,
            "result": str(item.outcome.result),
            "value": str(item.value),
            "date": item.outcome.date.isoformat(),
            "output": item.outcome.output,
        }
        for item in classified
    ]

    return {
        "total": len(results),
        "ok": sum(1 for r in results if r["value"] == ResultValue.OK),
        "failed": sum(1 for r in results if r["value"] == ResultValue.FAIL),
        "ignored": sum(1 for r in results if r["value"] == ResultValue.IGNORE),
        "results": results,
    }


def run(definition_path: Path) -> int:
    """Classify the outcomes of a run definition and return the exit code."""
    log = logging.getLogger("harness_outcomes")

    try:
        definition = load_run_definition(definition_path)
    except (FileNotFoundError, RunDefinitionError) as e:
        log.error("Cannot load run definition: %s", e)
        return EXIT_BAD_DEFINITION

    classifier = OutcomeClassifier(definition=definition)
    classified = classifier.classify(definition.to_outcomes())

    log_results_summary(log, classified)
    print(json.dumps(format_output(classified), indent=2))

    has_failures = any(item.value is ResultValue.FAIL for item in classified)
    return EXIT_FAILURES if has_failures else EXIT_OK


def main(argv: Sequence[str] | None = None) -> None:
    """CLI entry point."""
    parser = argparse.ArgumentParser(
        description="Classify recorded test outcomes against their expectations"
    )
    parser.add_argument(
        "--definition",
        type=Path,
        required=True,
        help="Path to the JSON run definition (outcomes and expectations)",
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level for the summary written to stderr",
    )

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=args.log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )

    sys.exit(run(definition_path=args.definition))


if __name__ == "__main__":  # pragma: no cover
    main()
