"""chassisconf engine: configuration constraint checks.

Entry point::

    from chassisconf.catalog import default_catalogs
    from chassisconf.engine import ConstraintEngine
    from chassisconf.model.configuration import Configuration

    engine = ConstraintEngine(*default_catalogs())
    config = Configuration()
    result = engine.precheck("Dell PowerEdge R750", config,
                             "Intel Xeon Platinum 8380", "processor")
    if result.accepted:
        config.add("Intel Xeon Platinum 8380", "processor")
    errors = engine.validate("Dell PowerEdge R750", config).errors
"""

from ._engine import ConstraintEngine
from ._results import (
    Accepted,
    ConfigurationTotals,
    PrecheckResult,
    Rejected,
    ValidationResult,
    Violation,
    ViolationKind,
)
from ._rules import NO_CHASSIS_SELECTED
from ._settings import EngineSettings, UnknownPartPolicy

__all__ = [
    "Accepted",
    "ConfigurationTotals",
    "ConstraintEngine",
    "EngineSettings",
    "NO_CHASSIS_SELECTED",
    "PrecheckResult",
    "Rejected",
    "UnknownPartPolicy",
    "ValidationResult",
    "Violation",
    "ViolationKind",
]
