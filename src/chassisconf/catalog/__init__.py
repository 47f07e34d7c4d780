"""chassisconf catalogs: chassis and part lookup tables.

Public API::

    from chassisconf.catalog import default_catalogs
    chassis_catalog, part_catalog = default_catalogs()
    spec = chassis_catalog.lookup("Dell PowerEdge R750")
"""

from ._catalogs import CatalogError, ChassisCatalog, PartCatalog
from ._loader import (
    CatalogDocument,
    catalogs_from_document,
    check_catalog_consistency,
    load_catalogs,
)
from ._reference import REFERENCE_CHASSIS, REFERENCE_PARTS, default_catalogs

__all__ = [
    "CatalogDocument",
    "CatalogError",
    "ChassisCatalog",
    "PartCatalog",
    "REFERENCE_CHASSIS",
    "REFERENCE_PARTS",
    "catalogs_from_document",
    "check_catalog_consistency",
    "default_catalogs",
    "load_catalogs",
]
