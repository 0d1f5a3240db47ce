"""Base model configuration for serialised structures."""

from pydantic import BaseModel, ConfigDict


class Model(BaseModel):
    """Immutable base model shared by configuration and report entries."""

    model_config = ConfigDict(frozen=True, extra="forbid")
