"""Base model for all domain entities."""

from typing import Any, Self

from pydantic import BaseModel, ConfigDict


class DomainModel(BaseModel):
    """Base class for all domain models.

    Models are frozen; changes produce a new instance via `evolve`.
    """

    model_config = ConfigDict(
        frozen=True,
        arbitrary_types_allowed=True,
    )

    def evolve(self, **changes: Any) -> Self:
        """Return a validated copy with the given fields replaced.

        Unlike `model_copy(update=...)`, the result is re-validated so
        embedded documents passed as dicts become proper models.
        """
        data = self.model_dump()
        data.update(changes)
        return type(self).model_validate(data)
