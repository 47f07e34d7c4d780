"""Installable parts: processors, memory modules and accelerators.

One ``PartSpec`` shape covers all three categories. Each category owns
exactly one sizing attribute (cores, capacity or onboard memory); the
others must stay unset.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, model_validator


class PartCategory(str, Enum):
    PROCESSOR = "processor"
    MEMORY = "memory"
    ACCELERATOR = "accelerator"


# Category -> the attribute that sizes parts of that category
_SIZING_FIELD: dict[PartCategory, str] = {
    PartCategory.PROCESSOR: "core_count",
    PartCategory.MEMORY: "capacity",
    PartCategory.ACCELERATOR: "memory_size",
}


class PartSpec(BaseModel):
    """A catalog entry for one part model.

    ``power_draw`` is in watts; ``capacity`` and ``memory_size`` are in
    gigabytes.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    category: PartCategory
    power_draw: int = Field(ge=0)
    core_count: int | None = Field(default=None, ge=1)
    capacity: int | None = Field(default=None, ge=0)
    memory_size: int | None = Field(default=None, ge=0)

    @model_validator(mode="after")
    def _check_sizing_fields(self):
        own = _SIZING_FIELD[self.category]
        if getattr(self, own) is None:
            raise ValueError(
                f"{self.category.value} part {self.name!r} requires '{own}'"
            )
        for category, field in _SIZING_FIELD.items():
            if category != self.category and getattr(self, field) is not None:
                raise ValueError(
                    f"{self.category.value} part {self.name!r} must not have '{field}'"
                )
        return self

    def describe(self) -> str:
        """Short palette caption, e.g. ``"64GB 6W"``."""
        if self.category == PartCategory.PROCESSOR:
            size = f"{self.core_count} Cores"
        elif self.category == PartCategory.MEMORY:
            size = f"{self.capacity}GB"
        else:
            size = f"{self.memory_size}GB VRAM"
        return f"{size} {self.power_draw}W"
