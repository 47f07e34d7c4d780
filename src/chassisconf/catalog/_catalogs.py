"""Read-only lookup tables for chassis and parts."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from types import MappingProxyType

from chassisconf.model.chassis import ChassisSpec
from chassisconf.model.parts import PartSpec


class CatalogError(Exception):
    """A catalog is internally inconsistent."""

    def __init__(self, problems: list[str]) -> None:
        self.problems = list(problems)
        super().__init__("; ".join(self.problems))


class _Catalog:
    """Immutable name -> spec table, built once."""

    _kind = "entry"

    def __init__(self, entries: Iterable) -> None:
        table: dict = {}
        for entry in entries:
            if entry.name in table:
                raise CatalogError([f"duplicate {self._kind} {entry.name!r}"])
            table[entry.name] = entry
        self._table = MappingProxyType(table)

    def lookup(self, name: str | None):
        """Return the spec for *name*, or None when it is not catalogued."""
        if name is None:
            return None
        return self._table.get(name)

    def ids(self) -> list[str]:
        """Identifiers in catalog order."""
        return list(self._table)

    def __contains__(self, name: object) -> bool:
        return name in self._table

    def __iter__(self) -> Iterator:
        return iter(self._table.values())

    def __len__(self) -> int:
        return len(self._table)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.ids()!r})"


class ChassisCatalog(_Catalog):
    _kind = "chassis"

    def __init__(self, entries: Iterable[ChassisSpec]) -> None:
        super().__init__(entries)

    def lookup(self, name: str | None) -> ChassisSpec | None:
        return super().lookup(name)


class PartCatalog(_Catalog):
    """Single table shared by every part category.

    Part identifiers are unique across categories.
    """

    _kind = "part"

    def __init__(self, entries: Iterable[PartSpec]) -> None:
        super().__init__(entries)

    def lookup(self, name: str | None) -> PartSpec | None:
        return super().lookup(name)
