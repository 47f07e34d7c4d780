"""Loading catalogs from JSON documents.

Document shape::

    {
        "chassis": [{"name": "...", "max_processor_count": 2, ...}],
        "parts": [{"name": "...", "category": "processor", ...}]
    }

Malformed documents raise ``pydantic.ValidationError``; documents that
parse but reference parts inconsistently raise ``CatalogError``.
"""

from __future__ import annotations

import logging
from pathlib import Path

from pydantic import BaseModel

from chassisconf.model.chassis import ChassisSpec
from chassisconf.model.parts import PartCategory, PartSpec

from ._catalogs import CatalogError, ChassisCatalog, PartCatalog

log = logging.getLogger(__name__)


class CatalogDocument(BaseModel):
    chassis: list[ChassisSpec] = []
    parts: list[PartSpec] = []


def check_catalog_consistency(
    chassis_catalog: ChassisCatalog,
    part_catalog: PartCatalog,
) -> list[str]:
    """Return every accepted-part reference that does not resolve cleanly.

    A reference is a problem when the part is missing from *part_catalog*
    or is catalogued under a different category.
    """
    problems: list[str] = []
    for chassis in chassis_catalog:
        for category in PartCategory:
            for part_id in chassis.accepted(category):
                part = part_catalog.lookup(part_id)
                if part is None:
                    problems.append(
                        f"{chassis.name!r} accepts unknown {category.value} {part_id!r}"
                    )
                elif part.category != category:
                    problems.append(
                        f"{chassis.name!r} lists {part_id!r} as {category.value}, "
                        f"but it is catalogued as {part.category.value}"
                    )
    return problems


def catalogs_from_document(document: CatalogDocument) -> tuple[ChassisCatalog, PartCatalog]:
    chassis_catalog = ChassisCatalog(document.chassis)
    part_catalog = PartCatalog(document.parts)
    problems = check_catalog_consistency(chassis_catalog, part_catalog)
    if problems:
        raise CatalogError(problems)
    return chassis_catalog, part_catalog


def load_catalogs(path: str | Path) -> tuple[ChassisCatalog, PartCatalog]:
    """Read and validate a JSON catalog document from *path*."""
    path = Path(path)
    document = CatalogDocument.model_validate_json(path.read_text(encoding="utf-8"))
    catalogs = catalogs_from_document(document)
    log.info(
        "Loaded %d chassis and %d parts from %s",
        len(catalogs[0]), len(catalogs[1]), path,
    )
    return catalogs
