"""Rule evaluation shared by precheck and validate.

``evaluate()`` returns every violation of a configuration in a fixed
order: part-level rules first (unknown, then incompatible parts), then
processor count, accelerator count, memory capacity and power draw.
``precheck`` surfaces the first entry; ``validate`` returns them all.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from chassisconf.catalog import PartCatalog
from chassisconf.model.chassis import ChassisSpec
from chassisconf.model.configuration import Configuration
from chassisconf.model.parts import PartCategory

from ._results import Violation, ViolationKind
from ._settings import EngineSettings, UnknownPartPolicy

log = logging.getLogger(__name__)

NO_CHASSIS_SELECTED = "No chassis selected."

# Categories with a count limit, in evaluation order
COUNTED_CATEGORIES: tuple[PartCategory, ...] = (
    PartCategory.PROCESSOR,
    PartCategory.ACCELERATOR,
)

_COUNT_KIND: dict[PartCategory, ViolationKind] = {
    PartCategory.PROCESSOR: ViolationKind.PROCESSOR_COUNT,
    PartCategory.ACCELERATOR: ViolationKind.ACCELERATOR_COUNT,
}

_COUNT_NOUN: dict[PartCategory, str] = {
    PartCategory.PROCESSOR: "processors",
    PartCategory.ACCELERATOR: "accelerators",
}


# ---------------------------------------------------------------------------
# Aggregation
# ---------------------------------------------------------------------------

@dataclass
class Tally:
    """Capacity and power sums over the parts the catalog knows."""

    memory_capacity: int = 0
    power_draw: int = 0
    unknown: list[str] = field(default_factory=list)


def tally(config: Configuration, parts: PartCatalog) -> Tally:
    """Sum memory capacity and power draw of *config*.

    Identifiers missing from *parts* contribute nothing and are collected
    in ``Tally.unknown``.
    """
    result = Tally()
    for category in PartCategory:
        for part_id in config.parts(category):
            spec = parts.lookup(part_id)
            if spec is None:
                result.unknown.append(part_id)
                continue
            result.power_draw += spec.power_draw
            if category == PartCategory.MEMORY and spec.capacity is not None:
                result.memory_capacity += spec.capacity
    if result.unknown:
        log.warning(
            "Skipping %d part(s) missing from the part catalog: %s",
            len(result.unknown), ", ".join(sorted(set(result.unknown))),
        )
    return result


# ---------------------------------------------------------------------------
# Messages
# ---------------------------------------------------------------------------

def count_message(category: PartCategory, limit: int) -> str:
    return f"At most {limit} {_COUNT_NOUN[category]} can be installed."


def memory_message(limit: int) -> str:
    return f"Memory is limited to {limit}GB."


def power_message(limit: int) -> str:
    return f"Power draw exceeds the maximum allowed {limit}W."


def incompatible_message(part_id: str, chassis_name: str) -> str:
    return f"{part_id} is not supported by {chassis_name}."


def unknown_message(part_id: str) -> str:
    return f"Unknown part: {part_id}."


# ---------------------------------------------------------------------------
# Evaluation
# ---------------------------------------------------------------------------

def _part_violations(
    chassis: ChassisSpec,
    screened: list[tuple[PartCategory, str]],
    parts: PartCatalog,
    settings: EngineSettings,
) -> list[Violation]:
    unknown: list[Violation] = []
    incompatible: list[Violation] = []
    seen: set[tuple[PartCategory, str]] = set()
    for category, part_id in screened:
        if (category, part_id) in seen:
            continue
        seen.add((category, part_id))
        if (
            settings.unknown_parts == UnknownPartPolicy.REPORT
            and part_id not in parts
        ):
            unknown.append(Violation(
                kind=ViolationKind.UNKNOWN_PART,
                message=unknown_message(part_id),
                part=part_id,
            ))
        if settings.check_compatibility and not chassis.accepts(part_id, category):
            incompatible.append(Violation(
                kind=ViolationKind.INCOMPATIBLE_PART,
                message=incompatible_message(part_id, chassis.name),
                part=part_id,
            ))
    return unknown + incompatible


def evaluate(
    chassis: ChassisSpec,
    config: Configuration,
    parts: PartCatalog,
    settings: EngineSettings,
    *,
    counted: tuple[PartCategory, ...] = COUNTED_CATEGORIES,
    screened: list[tuple[PartCategory, str]] | None = None,
) -> list[Violation]:
    """Return every rule *config* breaks in *chassis*, in rule order.

    Parameters
    ----------
    counted
        Categories whose count limit is checked. A precheck only checks
        the category it adds to.
    screened
        ``(category, part_id)`` pairs subject to the part-level rules.
        Defaults to every installed part.
    """
    if screened is None:
        screened = [
            (category, part_id)
            for category in PartCategory
            for part_id in config.parts(category)
        ]

    violations = _part_violations(chassis, screened, parts, settings)

    for category in COUNTED_CATEGORIES:
        if category not in counted:
            continue
        limit = chassis.count_limit(category)
        actual = len(config.parts(category))
        if actual > limit:
            violations.append(Violation(
                kind=_COUNT_KIND[category],
                message=count_message(category, limit),
                limit=limit,
                actual=actual,
                unit="count",
            ))

    sums = tally(config, parts)
    if sums.memory_capacity > chassis.max_memory_capacity:
        violations.append(Violation(
            kind=ViolationKind.MEMORY_CAPACITY,
            message=memory_message(chassis.max_memory_capacity),
            limit=chassis.max_memory_capacity,
            actual=sums.memory_capacity,
            unit="GB",
        ))
    if sums.power_draw > chassis.max_power_draw:
        violations.append(Violation(
            kind=ViolationKind.POWER_DRAW,
            message=power_message(chassis.max_power_draw),
            limit=chassis.max_power_draw,
            actual=sums.power_draw,
            unit="W",
        ))
    return violations
