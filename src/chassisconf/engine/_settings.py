"""Engine policy switches."""

from __future__ import annotations

from enum import Enum
from pathlib import Path

from pydantic import BaseModel, ConfigDict


class UnknownPartPolicy(str, Enum):
    """What to do with identifiers missing from the part catalog.

    SKIP counts them as zero in every sum. REPORT additionally turns each
    one into an ``unknown_part`` violation.
    """

    SKIP = "skip"
    REPORT = "report"


class EngineSettings(BaseModel):
    """Optional strictness on top of the limit rules.

    The defaults check limits only and under-count unknown parts.
    ``check_compatibility`` also rejects parts missing from the chassis's
    accepted list for their category.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    check_compatibility: bool = False
    unknown_parts: UnknownPartPolicy = UnknownPartPolicy.SKIP

    @classmethod
    def from_file(cls, path: str | Path) -> EngineSettings:
        """Load settings from a JSON object, e.g. ``{"check_compatibility": true}``."""
        return cls.model_validate_json(Path(path).read_text(encoding="utf-8"))
