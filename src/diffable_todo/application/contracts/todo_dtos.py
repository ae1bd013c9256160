from __future__ import annotations

from dataclasses import dataclass
from uuid import UUID


@dataclass(frozen=True)
class TodoRowModel:
    id: UUID
    title: str
    done: bool

    @property
    def checkmark_visible(self) -> bool:
        return self.done
