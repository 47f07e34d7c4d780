"""Reference chassis and part tables shipped with the package."""

from __future__ import annotations

from chassisconf.model.chassis import ChassisSpec
from chassisconf.model.parts import PartCategory, PartSpec

from ._catalogs import ChassisCatalog, PartCatalog

_CPU = PartCategory.PROCESSOR
_MEM = PartCategory.MEMORY
_GPU = PartCategory.ACCELERATOR


REFERENCE_CHASSIS: tuple[ChassisSpec, ...] = (
    ChassisSpec(
        name="Dell PowerEdge R750",
        max_processor_count=2,
        max_memory_capacity=128,
        max_accelerator_count=3,
        max_power_draw=1400,
        accepted_processors=(
            "Intel Xeon Silver 4314",
            "Intel Xeon Gold 5318Y",
            "Intel Xeon Platinum 8380",
        ),
        accepted_memory_modules=(
            "Samsung DDR4-3200 32GB",
            "SK Hynix DDR4-2933 16GB",
            "Micron DDR4-3200 64GB",
        ),
        accepted_accelerators=(
            "NVIDIA H100 80GB",
            "NVIDIA A100 40GB",
            "NVIDIA RTX 4090 24GB",
        ),
    ),
    ChassisSpec(
        name="HPE ProLiant DL380 Gen10",
        max_processor_count=2,
        max_memory_capacity=256,
        max_accelerator_count=2,
        max_power_draw=1600,
        accepted_processors=(
            "Intel Xeon Gold 6248R",
            "Intel Xeon Silver 4210R",
            "Intel Xeon Platinum 8270",
        ),
        accepted_memory_modules=(
            "Samsung DDR4-2933 32GB",
            "SK Hynix DDR4-3200 64GB",
            "Corsair DDR4-2666 16GB",
        ),
        accepted_accelerators=(
            "NVIDIA H100 80GB",
            "NVIDIA A100 80GB",
            "NVIDIA Tesla V100 32GB",
        ),
    ),
)


REFERENCE_PARTS: tuple[PartSpec, ...] = (
    # Processors
    PartSpec(name="Intel Xeon Silver 4314", category=_CPU, power_draw=135, core_count=16),
    PartSpec(name="Intel Xeon Gold 5318Y", category=_CPU, power_draw=165, core_count=24),
    PartSpec(name="Intel Xeon Platinum 8380", category=_CPU, power_draw=270, core_count=40),
    PartSpec(name="Intel Xeon Gold 6248R", category=_CPU, power_draw=205, core_count=24),
    PartSpec(name="Intel Xeon Silver 4210R", category=_CPU, power_draw=100, core_count=10),
    PartSpec(name="Intel Xeon Platinum 8270", category=_CPU, power_draw=205, core_count=26),
    # Memory modules
    PartSpec(name="Samsung DDR4-3200 32GB", category=_MEM, power_draw=5, capacity=32),
    PartSpec(name="SK Hynix DDR4-2933 16GB", category=_MEM, power_draw=4, capacity=16),
    PartSpec(name="Micron DDR4-3200 64GB", category=_MEM, power_draw=6, capacity=64),
    PartSpec(name="Samsung DDR4-2933 32GB", category=_MEM, power_draw=5, capacity=32),
    PartSpec(name="SK Hynix DDR4-3200 64GB", category=_MEM, power_draw=6, capacity=64),
    PartSpec(name="Corsair DDR4-2666 16GB", category=_MEM, power_draw=4, capacity=16),
    # Accelerators
    PartSpec(name="NVIDIA H100 80GB", category=_GPU, power_draw=700, memory_size=80),
    PartSpec(name="NVIDIA A100 40GB", category=_GPU, power_draw=400, memory_size=40),
    PartSpec(name="NVIDIA A100 80GB", category=_GPU, power_draw=400, memory_size=80),
    PartSpec(name="NVIDIA RTX 4090 24GB", category=_GPU, power_draw=450, memory_size=24),
    PartSpec(name="NVIDIA Tesla V100 32GB", category=_GPU, power_draw=300, memory_size=32),
)


def default_catalogs() -> tuple[ChassisCatalog, PartCatalog]:
    """Build catalogs from the reference tables."""
    return ChassisCatalog(REFERENCE_CHASSIS), PartCatalog(REFERENCE_PARTS)
