"""Base models for all domain entities."""

from typing import ClassVar

from pydantic import BaseModel, ConfigDict, model_validator


class DomainModel(BaseModel):
    """Base class for all domain models.

    Models are immutable; state changes produce copies via ``model_copy``.
    """

    model_config = ConfigDict(
        frozen=True,  # All domain models are immutable
        arbitrary_types_allowed=True,  # Allow custom value objects
    )


class PatchModel(BaseModel):
    """Base class for partial updates.

    Lists only the fields a caller may change; anything else is rejected.
    Fields left unset are not touched. An optional field sent as ``null`` is
    cleared; fields named in ``required_fields`` can be changed but not
    cleared.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    required_fields: ClassVar[tuple[str, ...]] = ()

    @model_validator(mode="after")
    def reject_cleared_required_fields(self) -> "PatchModel":
        """Reject ``null`` for fields the entity can't do without."""
        cleared = [
            name
            for name in self.required_fields
            if name in self.model_fields_set and getattr(self, name) is None
        ]
        if cleared:
            raise ValueError(f"Cannot clear required fields: {', '.join(cleared)}")
        return self

    def changes(self) -> dict:
        """Fields explicitly provided by the caller, ``None`` included."""
        return self.model_dump(exclude_unset=True)
