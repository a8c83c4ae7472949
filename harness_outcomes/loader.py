"""Loading of run definitions from JSON files."""

import logging
from pathlib import Path

from pydantic import ValidationError

from harness_outcomes.models.definition import RunDefinition

log = logging.getLogger(__name__)


class RunDefinitionError(Exception):
    """Raised when a run definition file cannot be parsed."""


def load_run_definition(path: Path) -> RunDefinition:
    """Load a run definition.

    Args:
        path: Path to the JSON run definition

    Returns:
        The validated run definition

    Raises:
        FileNotFoundError: If the file does not exist
        RunDefinitionError: If the file is not a valid run definition

    """
    log.debug("Reading run definition from %s", path)
    content = path.read_text(encoding="utf-8")

    try:
        definition = RunDefinition.model_validate_json(content)
    except ValidationError as e:
        raise RunDefinitionError(f"Invalid run definition {path}: {e}") from e

    log.info(
        "Loaded %d outcome(s) and %d expectation(s) from %s",
        len(definition.outcomes),
        len(definition.expectations),
        path,
    )
    return definition
