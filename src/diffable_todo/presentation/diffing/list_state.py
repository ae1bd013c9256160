from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Generic, Hashable, List, Optional, Tuple

from diffable_todo.presentation.diffing.diff import ListOperation, diff_ids
from diffable_todo.presentation.diffing.snapshot import ItemT, SectionT, Snapshot

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ListUpdate:
    operations: Tuple[ListOperation, ...] = ()
    reconfigured: Tuple[Hashable, ...] = ()
    animated: bool = True

    @property
    def is_structural(self) -> bool:
        return bool(self.operations)


class ListState(Generic[SectionT, ItemT]):
    """Last-applied snapshot of a list widget."""

    def __init__(self) -> None:
        self._current: Snapshot[SectionT, ItemT] = Snapshot()
        self._applied_count = 0

    @property
    def item_identifiers(self) -> List[ItemT]:
        return self._current.item_identifiers

    @property
    def applied_count(self) -> int:
        return self._applied_count

    def snapshot(self) -> Snapshot[SectionT, ItemT]:
        return self._current.copy()

    def item_identifier(self, row: int) -> Optional[ItemT]:
        items = self._current.item_identifiers
        if 0 <= row < len(items):
            return items[row]
        return None

    def apply(self, snapshot: Snapshot[SectionT, ItemT], animating_differences: bool = True) -> ListUpdate:
        operations = diff_ids(self._current.item_identifiers, snapshot.item_identifiers)
        reconfigured = tuple(snapshot.reconfigured_item_identifiers)
        self._current = snapshot.copy()
        self._applied_count += 1
        logger.debug(
            "Applied snapshot #%d: %d items, %d operations, %d reconfigured",
            self._applied_count,
            snapshot.number_of_items,
            len(operations),
            len(reconfigured),
        )
        return ListUpdate(
            operations=tuple(operations),
            reconfigured=reconfigured,
            animated=animating_differences,
        )
