"""Shared test helpers for the chassisconf test suite."""

from chassisconf.catalog import default_catalogs
from chassisconf.engine import ConstraintEngine, EngineSettings
from chassisconf.model.configuration import Configuration

R750 = "Dell PowerEdge R750"
DL380 = "HPE ProLiant DL380 Gen10"

XEON_8380 = "Intel Xeon Platinum 8380"      # 270W, 40 cores
XEON_4314 = "Intel Xeon Silver 4314"        # 135W, 16 cores
XEON_6248R = "Intel Xeon Gold 6248R"        # DL380 only
MICRON_64 = "Micron DDR4-3200 64GB"         # 64GB, 6W
SAMSUNG_32 = "Samsung DDR4-3200 32GB"       # 32GB, 5W
HYNIX_16 = "SK Hynix DDR4-2933 16GB"        # 16GB, 4W
H100 = "NVIDIA H100 80GB"                   # 700W, both chassis
A100_40 = "NVIDIA A100 40GB"                # 400W
RTX_4090 = "NVIDIA RTX 4090 24GB"           # 450W

UNKNOWN_DIMM = "Mystery DDR5 512GB"


def make_engine(**settings) -> ConstraintEngine:
    """Engine over the reference catalogs, with optional settings overrides."""
    chassis_catalog, part_catalog = default_catalogs()
    return ConstraintEngine(chassis_catalog, part_catalog, EngineSettings(**settings))


def make_config(processors=(), memory=(), accelerators=()) -> Configuration:
    """Shorthand for a Configuration from three iterables."""
    return Configuration(
        processors=list(processors),
        memory_modules=list(memory),
        accelerators=list(accelerators),
    )
