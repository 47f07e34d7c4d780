"""The set of parts installed in the selected chassis."""

from __future__ import annotations

from pydantic import BaseModel

from .parts import PartCategory


class Configuration(BaseModel):
    """Installed part identifiers, one ordered list per category.

    Identifiers are kept as given; nothing here checks them against a
    catalog.
    """

    processors: list[str] = []
    memory_modules: list[str] = []
    accelerators: list[str] = []

    def parts(self, category: PartCategory) -> list[str]:
        category = PartCategory(category)
        if category == PartCategory.PROCESSOR:
            return self.processors
        if category == PartCategory.MEMORY:
            return self.memory_modules
        return self.accelerators

    def all_parts(self) -> list[str]:
        return [*self.processors, *self.memory_modules, *self.accelerators]

    @property
    def is_empty(self) -> bool:
        return not (self.processors or self.memory_modules or self.accelerators)

    def with_part(self, part_id: str, category: PartCategory) -> Configuration:
        """Return a copy with *part_id* appended to *category*."""
        hypothetical = self.model_copy(deep=True)
        hypothetical.add(part_id, category)
        return hypothetical

    def add(self, part_id: str, category: PartCategory) -> None:
        self.parts(category).append(part_id)

    def remove(self, category: PartCategory, index: int) -> str:
        """Remove and return the part at *index* within *category*."""
        return self.parts(category).pop(index)

    def clear(self) -> None:
        self.processors.clear()
        self.memory_modules.clear()
        self.accelerators.clear()
