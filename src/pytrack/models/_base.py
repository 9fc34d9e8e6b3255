"""Base model for records persisted in the track file.

Every persisted model inherits from :class:`TrackBaseModel` which
provides:

* ``alias_generator=to_pascal`` so snake_case fields map to the
  ``Start`` / ``Stop`` / ``Notes`` keys of existing data files.
* A ``model_validator(mode="before")`` that drops ``None`` values so
  the field default is used instead.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, model_validator
from pydantic.alias_generators import to_pascal


class TrackBaseModel(BaseModel):
    """Base for persisted track models."""

    model_config = ConfigDict(
        frozen=True,
        extra="ignore",
        populate_by_name=True,
        alias_generator=to_pascal,
    )

    @model_validator(mode="before")
    @classmethod
    def _drop_none_values(cls, values: Any) -> Any:
        if not isinstance(values, dict):
            return values
        return {key: value for key, value in values.items() if value is not None}

    def to_document(self) -> dict[str, Any]:
        """Serialize using the persisted (aliased) field names."""
        return self.model_dump(by_alias=True, mode="json")
