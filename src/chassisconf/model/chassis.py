"""Chassis models and their capacity limits."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, model_validator

from .parts import PartCategory


class ChassisSpec(BaseModel):
    """Limits and accepted part lists for one chassis model.

    Memory capacity is in gigabytes, power draw in watts. Accepted lists
    are in display order.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    max_processor_count: int = Field(ge=0)
    max_accelerator_count: int = Field(ge=0)
    max_memory_capacity: int = Field(ge=0)
    max_power_draw: int = Field(ge=0)
    accepted_processors: tuple[str, ...] = ()
    accepted_memory_modules: tuple[str, ...] = ()
    accepted_accelerators: tuple[str, ...] = ()

    @model_validator(mode="after")
    def _no_duplicate_parts(self):
        for category in PartCategory:
            seen: set[str] = set()
            for part_id in self.accepted(category):
                if part_id in seen:
                    raise ValueError(
                        f"chassis {self.name!r} lists {part_id!r} twice "
                        f"as an accepted {category.value}"
                    )
                seen.add(part_id)
        return self

    def accepted(self, category: PartCategory) -> tuple[str, ...]:
        category = PartCategory(category)
        if category == PartCategory.PROCESSOR:
            return self.accepted_processors
        if category == PartCategory.MEMORY:
            return self.accepted_memory_modules
        return self.accepted_accelerators

    def accepts(self, part_id: str, category: PartCategory) -> bool:
        return part_id in self.accepted(category)

    def count_limit(self, category: PartCategory) -> int | None:
        """Maximum number of parts of *category*, or None when unbounded.

        Memory modules have no count limit; only their total capacity is
        bounded.
        """
        category = PartCategory(category)
        if category == PartCategory.PROCESSOR:
            return self.max_processor_count
        if category == PartCategory.ACCELERATOR:
            return self.max_accelerator_count
        return None
