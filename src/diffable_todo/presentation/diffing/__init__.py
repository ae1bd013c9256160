from .diff import Delete, Insert, ListOperation, Move, apply_operations, diff_ids
from .list_state import ListState, ListUpdate
from .snapshot import Snapshot

__all__ = [
    "Delete",
    "Insert",
    "ListOperation",
    "ListState",
    "ListUpdate",
    "Move",
    "Snapshot",
    "apply_operations",
    "diff_ids",
]
