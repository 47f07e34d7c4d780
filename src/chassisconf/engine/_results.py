"""Result values returned by the constraint engine.

Everything here is plain data: the engine never raises to report a
violated limit.
"""

from __future__ import annotations

from enum import Enum
from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field


class ViolationKind(str, Enum):
    """Rules a configuration can break, in evaluation order."""

    UNKNOWN_PART = "unknown_part"
    INCOMPATIBLE_PART = "incompatible_part"
    PROCESSOR_COUNT = "processor_count"
    ACCELERATOR_COUNT = "accelerator_count"
    MEMORY_CAPACITY = "memory_capacity"
    POWER_DRAW = "power_draw"


class Violation(BaseModel):
    """One broken rule with the limit it was checked against.

    ``unit`` is ``"count"``, ``"GB"`` or ``"W"`` for limit rules and empty
    for part-level rules, which name the offending ``part`` instead.
    """

    model_config = ConfigDict(frozen=True)

    kind: ViolationKind
    message: str
    limit: int | None = None
    actual: int | None = None
    unit: str = ""
    part: str | None = None

    @property
    def excess(self) -> int:
        if self.limit is None or self.actual is None:
            return 0
        return max(self.actual - self.limit, 0)


class Accepted(BaseModel):
    model_config = ConfigDict(frozen=True)

    status: Literal["accepted"] = "accepted"

    @property
    def accepted(self) -> bool:
        return True


class Rejected(BaseModel):
    """A proposed addition that must not be committed.

    ``violation`` is None when the rejection is a selection error (no
    chassis chosen) rather than a broken rule.
    """

    model_config = ConfigDict(frozen=True)

    status: Literal["rejected"] = "rejected"
    reason: str
    violation: Violation | None = None

    @property
    def accepted(self) -> bool:
        return False


PrecheckResult = Annotated[
    Union[Accepted, Rejected],
    Field(discriminator="status"),
]


class ValidationResult(BaseModel):
    """Every rule a configuration currently breaks, in evaluation order."""

    model_config = ConfigDict(frozen=True)

    violations: tuple[Violation, ...] = ()

    @property
    def errors(self) -> list[str]:
        return [v.message for v in self.violations]

    @property
    def ok(self) -> bool:
        return not self.violations

    def kinds(self) -> list[ViolationKind]:
        return [v.kind for v in self.violations]


class ConfigurationTotals(BaseModel):
    """Aggregates of a configuration, with the chassis limits alongside.

    Limits are None when no chassis is selected. ``unknown_parts`` lists
    identifiers that were skipped because the part catalog lacks them.
    """

    model_config = ConfigDict(frozen=True)

    processor_count: int = 0
    memory_module_count: int = 0
    accelerator_count: int = 0
    total_memory_capacity: int = 0
    total_power_draw: int = 0
    unknown_parts: tuple[str, ...] = ()

    max_processor_count: int | None = None
    max_accelerator_count: int | None = None
    max_memory_capacity: int | None = None
    max_power_draw: int | None = None

    @property
    def over_power_budget(self) -> bool:
        return self.max_power_draw is not None and self.total_power_draw > self.max_power_draw
