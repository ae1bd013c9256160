from __future__ import annotations

from dataclasses import dataclass, field, replace
from uuid import UUID, uuid4


@dataclass(frozen=True)
class Todo:
    """A single todo item. Equality and hashing look at ``id`` only."""

    title: str = field(compare=False)
    done: bool = field(default=False, compare=False)
    id: UUID = field(default_factory=uuid4)

    def toggled(self) -> Todo:
        return replace(self, done=not self.done)
