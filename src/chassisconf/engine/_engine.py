"""The constraint engine: precheck, validate and summarize.

All operations are pure. They read the catalogs and the configuration
they are given and return a value; nothing is mutated and limit
violations are never raised.
"""

from __future__ import annotations

import logging

from chassisconf.catalog import ChassisCatalog, PartCatalog
from chassisconf.model.chassis import ChassisSpec
from chassisconf.model.configuration import Configuration
from chassisconf.model.parts import PartCategory

from ._results import (
    Accepted,
    ConfigurationTotals,
    PrecheckResult,
    Rejected,
    ValidationResult,
)
from ._rules import COUNTED_CATEGORIES, NO_CHASSIS_SELECTED, evaluate, tally
from ._settings import EngineSettings

log = logging.getLogger(__name__)


class ConstraintEngine:
    """Evaluates configurations against a chassis catalog.

    Parameters
    ----------
    chassis_catalog : ChassisCatalog
        Chassis limits and accepted part lists.
    part_catalog : PartCatalog
        Part attributes used for capacity and power sums.
    settings : EngineSettings, optional
        Strictness switches; defaults check limits only.
    """

    def __init__(
        self,
        chassis_catalog: ChassisCatalog,
        part_catalog: PartCatalog,
        settings: EngineSettings | None = None,
    ) -> None:
        self._chassis = chassis_catalog
        self._parts = part_catalog
        self._settings = settings or EngineSettings()

    @property
    def chassis_catalog(self) -> ChassisCatalog:
        return self._chassis

    @property
    def part_catalog(self) -> PartCatalog:
        return self._parts

    @property
    def settings(self) -> EngineSettings:
        return self._settings

    def resolve_chassis(self, chassis_id: str | None) -> ChassisSpec | None:
        """Return the selected chassis, or None when nothing usable is selected."""
        if not chassis_id:
            return None
        return self._chassis.lookup(chassis_id)

    def available_parts(self, chassis_id: str | None, category: PartCategory) -> list[str]:
        """Accepted part identifiers for *category*, in display order."""
        category = PartCategory(category)
        chassis = self.resolve_chassis(chassis_id)
        if chassis is None:
            return []
        return list(chassis.accepted(category))

    # -----------------------------------------------------------------------
    # Rule checks
    # -----------------------------------------------------------------------

    def precheck(
        self,
        chassis_id: str | None,
        config: Configuration,
        part_id: str,
        category: PartCategory,
    ) -> PrecheckResult:
        """Decide whether adding *part_id* to *category* may be committed.

        Only the first broken rule is reported. *config* is left
        untouched; callers add the part themselves on acceptance.
        """
        category = PartCategory(category)
        chassis = self.resolve_chassis(chassis_id)
        if chassis is None:
            return Rejected(reason=NO_CHASSIS_SELECTED)

        hypothetical = config.with_part(part_id, category)
        counted = (category,) if category in COUNTED_CATEGORIES else ()
        violations = evaluate(
            chassis,
            hypothetical,
            self._parts,
            self._settings,
            counted=counted,
            screened=[(category, part_id)],
        )
        if violations:
            first = violations[0]
            log.debug(
                "Rejected %s %r for %r: %s",
                category.value, part_id, chassis.name, first.kind.value,
            )
            return Rejected(reason=first.message, violation=first)
        log.debug("Accepted %s %r for %r", category.value, part_id, chassis.name)
        return Accepted()

    def validate(self, chassis_id: str | None, config: Configuration) -> ValidationResult:
        """Return every rule *config* currently breaks.

        With no chassis selected there is nothing to check and the result
        is empty.
        """
        chassis = self.resolve_chassis(chassis_id)
        if chassis is None:
            return ValidationResult()
        violations = evaluate(chassis, config, self._parts, self._settings)
        if violations:
            log.debug(
                "Configuration for %r breaks %s",
                chassis.name, ", ".join(v.kind.value for v in violations),
            )
        return ValidationResult(violations=tuple(violations))

    def summarize(self, chassis_id: str | None, config: Configuration) -> ConfigurationTotals:
        """Counts and sums of *config*, with the chassis limits if any."""
        sums = tally(config, self._parts)
        totals = dict(
            processor_count=len(config.processors),
            memory_module_count=len(config.memory_modules),
            accelerator_count=len(config.accelerators),
            total_memory_capacity=sums.memory_capacity,
            total_power_draw=sums.power_draw,
            unknown_parts=tuple(sums.unknown),
        )
        chassis = self.resolve_chassis(chassis_id)
        if chassis is not None:
            totals.update(
                max_processor_count=chassis.max_processor_count,
                max_accelerator_count=chassis.max_accelerator_count,
                max_memory_capacity=chassis.max_memory_capacity,
                max_power_draw=chassis.max_power_draw,
            )
        return ConfigurationTotals(**totals)
