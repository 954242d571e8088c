"""Base models for all domain entities."""

from pydantic import BaseModel, ConfigDict


class DomainModel(BaseModel):
    """Base class for immutable domain models.

    Provides common configuration for immutability and custom types.
    """

    model_config = ConfigDict(
        frozen=True,  # Replaced, never edited in place
        arbitrary_types_allowed=True,  # Allow custom value objects
    )


class AggregateModel(BaseModel):
    """Base class for mutable aggregate members.

    Threads and replies are loaded, mutated in memory and persisted as a
    whole, so their fields are assignable. Assignments are validated.
    """

    model_config = ConfigDict(
        validate_assignment=True,
        arbitrary_types_allowed=True,
    )
