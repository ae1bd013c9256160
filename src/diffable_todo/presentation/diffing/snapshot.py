from __future__ import annotations

from typing import Dict, Generic, Hashable, Iterable, List, Optional, Set, TypeVar

from diffable_todo.application.todo.errors import SnapshotError

SectionT = TypeVar("SectionT", bound=Hashable)
ItemT = TypeVar("ItemT", bound=Hashable)


class Snapshot(Generic[SectionT, ItemT]):
    """Ordered, duplicate-free item identifiers grouped into sections.

    Describes what the list should show. Item ids are unique across all
    sections and section ids are unique among sections.
    """

    def __init__(self) -> None:
        self._sections: List[SectionT] = []
        self._items: Dict[SectionT, List[ItemT]] = {}
        self._section_of: Dict[ItemT, SectionT] = {}
        self._reconfigured: List[ItemT] = []

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Snapshot):
            return NotImplemented
        return self._sections == other._sections and self._items == other._items

    def __repr__(self) -> str:
        return f"Snapshot(sections={self._sections!r}, items={self.item_identifiers!r})"

    def copy(self) -> Snapshot[SectionT, ItemT]:
        clone: Snapshot[SectionT, ItemT] = Snapshot()
        clone._sections = list(self._sections)
        clone._items = {section: list(items) for section, items in self._items.items()}
        clone._section_of = dict(self._section_of)
        return clone

    @property
    def section_identifiers(self) -> List[SectionT]:
        return list(self._sections)

    @property
    def item_identifiers(self) -> List[ItemT]:
        return [item for section in self._sections for item in self._items[section]]

    @property
    def number_of_items(self) -> int:
        return len(self._section_of)

    @property
    def reconfigured_item_identifiers(self) -> List[ItemT]:
        return list(self._reconfigured)

    def append_sections(self, sections: Iterable[SectionT]) -> None:
        new_sections = list(sections)
        seen: Set[SectionT] = set(self._sections)
        for section in new_sections:
            if section in seen:
                raise SnapshotError(f"Section {section!r} is already in the snapshot")
            seen.add(section)
        for section in new_sections:
            self._sections.append(section)
            self._items[section] = []

    def append_items(self, items: Iterable[ItemT], section: Optional[SectionT] = None) -> None:
        if section is None:
            if not self._sections:
                raise SnapshotError("Cannot append items to a snapshot without sections")
            section = self._sections[-1]
        elif section not in self._items:
            raise SnapshotError(f"Unknown section {section!r}")

        new_items = list(items)
        seen: Set[ItemT] = set()
        for item in new_items:
            if item in self._section_of or item in seen:
                raise SnapshotError(f"Item {item!r} is already in the snapshot")
            seen.add(item)
        for item in new_items:
            self._items[section].append(item)
            self._section_of[item] = section

    def reconfigure_items(self, items: Iterable[ItemT]) -> None:
        """Mark items for an in-place visual refresh without moving them."""
        requested = list(items)
        for item in requested:
            if item not in self._section_of:
                raise SnapshotError(f"Cannot reconfigure {item!r}: not in the snapshot")
        for item in requested:
            if item not in self._reconfigured:
                self._reconfigured.append(item)

    def item_identifiers_in_section(self, section: SectionT) -> List[ItemT]:
        if section not in self._items:
            raise SnapshotError(f"Unknown section {section!r}")
        return list(self._items[section])

    def section_identifier_for_item(self, item: ItemT) -> Optional[SectionT]:
        return self._section_of.get(item)

    def index_of_item(self, item: ItemT) -> Optional[int]:
        if item not in self._section_of:
            return None
        return self.item_identifiers.index(item)
