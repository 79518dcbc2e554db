"""Base model for all domain entities."""

from typing import Any, Self

from pydantic import BaseModel, ConfigDict


class DomainModel(BaseModel):
    """Frozen pydantic base for entities.

    Entities never mutate in place; repositories and services derive new
    instances with :meth:`with_changes`.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    def with_changes(self, **changes: Any) -> Self:
        """Return a copy with ``changes`` applied."""
        return self.model_copy(update=changes)
