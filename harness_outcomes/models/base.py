"""Base model configuration for records read from run definition files."""

from pydantic import BaseModel, ConfigDict


class Model(BaseModel):
    """Immutable base model; unknown fields are rejected."""

    model_config = ConfigDict(frozen=True, extra="forbid")
