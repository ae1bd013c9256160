from __future__ import annotations

from bisect import bisect_left
from dataclasses import dataclass
from typing import Hashable, List, Sequence, Set, Union

from diffable_todo.application.todo.errors import SnapshotError


@dataclass(frozen=True)
class Delete:
    id: Hashable
    index: int


@dataclass(frozen=True)
class Insert:
    id: Hashable
    index: int


@dataclass(frozen=True)
class Move:
    id: Hashable
    from_index: int
    to_index: int


ListOperation = Union[Delete, Insert, Move]


def _ensure_unique(ids: Sequence[Hashable], label: str) -> None:
    if len(set(ids)) != len(ids):
        raise SnapshotError(f"{label} sequence contains duplicate identifiers")


def _stable_positions(old_positions: List[int]) -> Set[int]:
    """Return the entries of ``old_positions`` forming a longest increasing run.

    Patience sorting, O(n log n). Items whose old positions stay increasing
    in new order keep their relative order and need no move.
    """
    tails: List[int] = []
    tail_index: List[int] = []
    previous: List[int] = [-1] * len(old_positions)
    for i, position in enumerate(old_positions):
        slot = bisect_left(tails, position)
        if slot == len(tails):
            tails.append(position)
            tail_index.append(i)
        else:
            tails[slot] = position
            tail_index[slot] = i
        previous[i] = tail_index[slot - 1] if slot > 0 else -1

    stable: Set[int] = set()
    cursor = tail_index[-1] if tail_index else -1
    while cursor != -1:
        stable.add(old_positions[cursor])
        cursor = previous[cursor]
    return stable


def diff_ids(old: Sequence[Hashable], new: Sequence[Hashable]) -> List[ListOperation]:
    """Compute the structural operations turning ``old`` into ``new``.

    Deletes carry indices into ``old`` (descending), inserts and moves carry
    indices into ``new`` (ascending). Items on the longest common subsequence
    of both are left alone.
    """
    _ensure_unique(old, "Old")
    _ensure_unique(new, "New")

    old_index = {item: i for i, item in enumerate(old)}
    new_index = {item: i for i, item in enumerate(new)}

    deletes: List[ListOperation] = [
        Delete(item, i) for i, item in enumerate(old) if item not in new_index
    ]
    deletes.reverse()

    kept_old_positions = [old_index[item] for item in new if item in old_index]
    stable = _stable_positions(kept_old_positions)

    inserts: List[ListOperation] = []
    moves: List[ListOperation] = []
    for i, item in enumerate(new):
        if item not in old_index:
            inserts.append(Insert(item, i))
        elif old_index[item] not in stable:
            moves.append(Move(item, old_index[item], i))

    return deletes + inserts + moves


def apply_operations(old: Sequence[Hashable], operations: Sequence[ListOperation]) -> List[Hashable]:
    """Replay ``operations`` on ``old``; used to check diffs."""
    deleted = {op.id for op in operations if isinstance(op, Delete)}
    moved = {op.id for op in operations if isinstance(op, Move)}
    result = [item for item in old if item not in deleted and item not in moved]
    placed = sorted(
        (op for op in operations if isinstance(op, (Insert, Move))),
        key=lambda op: op.index if isinstance(op, Insert) else op.to_index,
    )
    for op in placed:
        index = op.index if isinstance(op, Insert) else op.to_index
        result.insert(index, op.id)
    return result
