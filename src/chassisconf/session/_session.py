"""Interactive configurator session.

Holds the selected chassis, the installed parts and the error list the
presentation layer shows, and applies the drop and remove gestures
through the constraint engine.
"""

from __future__ import annotations

import logging

from chassisconf.engine import ConfigurationTotals, ConstraintEngine, PrecheckResult
from chassisconf.model.chassis import ChassisSpec
from chassisconf.model.configuration import Configuration
from chassisconf.model.parts import PartCategory

log = logging.getLogger(__name__)


class ConfiguratorSession:
    """State of one user's configuration, driven one gesture at a time.

    Parameters
    ----------
    engine : ConstraintEngine
        Engine used for every check.
    chassis_id : str, optional
        Chassis to select immediately.
    """

    def __init__(self, engine: ConstraintEngine, chassis_id: str | None = None) -> None:
        self._engine = engine
        self._chassis_id: str | None = None
        self._config = Configuration()
        self._errors: list[str] = []
        if chassis_id is not None:
            self.select_chassis(chassis_id)

    @property
    def engine(self) -> ConstraintEngine:
        return self._engine

    @property
    def chassis_id(self) -> str | None:
        return self._chassis_id

    @property
    def chassis(self) -> ChassisSpec | None:
        return self._engine.resolve_chassis(self._chassis_id)

    @property
    def configuration(self) -> Configuration:
        return self._config

    @property
    def errors(self) -> list[str]:
        return list(self._errors)

    @property
    def is_complete(self) -> bool:
        """True when the last check left no errors."""
        return not self._errors

    # -----------------------------------------------------------------------
    # Gestures
    # -----------------------------------------------------------------------

    def select_chassis(self, chassis_id: str | None) -> None:
        """Switch chassis, discarding installed parts and errors."""
        self._chassis_id = chassis_id or None
        self._config.clear()
        self._errors = []
        if self._chassis_id is None:
            log.info("Chassis deselected")
        elif self.chassis is None:
            log.warning("Selected chassis %r is not in the catalog", self._chassis_id)
        else:
            log.info("Selected chassis %r", self._chassis_id)

    def available_parts(self, category: PartCategory) -> list[str]:
        return self._engine.available_parts(self._chassis_id, category)

    def drop(self, part_id: str, category: PartCategory) -> PrecheckResult:
        """Try to install *part_id*.

        A rejected drop leaves the configuration unchanged and shows the
        rejection reason as the only error. An accepted drop clears errors.
        """
        result = self._engine.precheck(self._chassis_id, self._config, part_id, category)
        if result.accepted:
            self._config.add(part_id, category)
            self._errors = []
        else:
            self._errors = [result.reason]
        return result

    def remove(self, category: PartCategory, index: int) -> str:
        """Uninstall the part at *index* within *category* and revalidate.

        Raises IndexError when nothing is installed at *index*.
        """
        removed = self._config.remove(category, index)
        log.debug("Removed %r from %s", removed, PartCategory(category).value)
        self.revalidate()
        return removed

    def revalidate(self) -> list[str]:
        """Recompute the error list from scratch and return it."""
        self._errors = self._engine.validate(self._chassis_id, self._config).errors
        return self.errors

    def totals(self) -> ConfigurationTotals:
        return self._engine.summarize(self._chassis_id, self._config)
