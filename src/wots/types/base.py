"""Reusable, strict base models for the scheme."""

from typing import Any, Self

from pydantic import BaseModel, ConfigDict


class FrozenModel(BaseModel):
    """
    An immutable pydantic base model that may hold arbitrary Python objects.

    Used for values built around callables such as hash factories and random
    sources, which pydantic cannot validate structurally.
    """

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
        validate_default=True,
        arbitrary_types_allowed=True,
    )

    def copy(self: Self, **kwargs: Any) -> Self:
        """Create a copy of the model with the updated fields that are validated."""
        return self.__class__(**(dict(self) | kwargs))


class StrictBaseModel(FrozenModel):
    """A strict, immutable pydantic base model."""

    model_config = FrozenModel.model_config | {"strict": True}
