"""Per-section property inventories."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, TypeAlias

from .enums import PropertyKind

if TYPE_CHECKING:
    from collections.abc import Mapping

    from .properties import DateValue, NameRole, Property, Term


@dataclass(frozen=True, slots=True, kw_only=True)
class SectionInventory:
    """Ordered property lists for one section, one list per kind.

    Order carries no meaning for equality, but it drives greedy matching and
    must therefore be stable (document order).
    """

    name_roles: tuple[NameRole, ...] = ()
    dates: tuple[DateValue, ...] = ()
    terms: tuple[Term, ...] = ()

    def properties(self, kind: PropertyKind) -> tuple[Property, ...]:
        match kind:
            case PropertyKind.NAME_ROLE:
                return self.name_roles
            case PropertyKind.DATE:
                return self.dates
            case PropertyKind.TERMS:
                return self.terms

    def count(self, kind: PropertyKind) -> int:
        return len(self.properties(kind))

    @property
    def is_empty(self) -> bool:
        return not (self.name_roles or self.dates or self.terms)


EMPTY_INVENTORY = SectionInventory()

InventoryBySection: TypeAlias = "Mapping[str, SectionInventory]"


def inventory_for(inventories: InventoryBySection, section_id: str) -> SectionInventory:
    """Return the inventory of ``section_id``; absent entries count as empty."""

    return inventories.get(section_id, EMPTY_INVENTORY)


def property_count(inventories: InventoryBySection, section_id: str, kind: PropertyKind) -> int:
    return inventory_for(inventories, section_id).count(kind)
