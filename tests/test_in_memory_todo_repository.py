from __future__ import annotations

import random
from uuid import uuid4

from diffable_todo.domain.todo.entities.todo import Todo
from diffable_todo.infrastructure.data.repositories.in_memory_todo_repository import (
    InMemoryTodoRepository,
    seed_todos,
)


def test_default_repository_seeds_thirty_todos_in_order() -> None:
    repo = InMemoryTodoRepository()

    todos = repo.list()

    assert len(repo) == 30
    assert [todo.title for todo in todos] == [f"Todo #{i}" for i in range(1, 31)]
    assert all(not todo.done for todo in todos)
    assert repo.visible_ids() == [todo.id for todo in todos]


def test_seed_ids_are_unique() -> None:
    ids = [todo.id for todo in seed_todos(30)]

    assert len(set(ids)) == 30


def test_scenario_toggle_filter_and_remove(abc_repo, abc_todos) -> None:
    a, b, c = abc_todos

    abc_repo.toggle_done(b.id)
    assert abc_repo.visible_ids() == [a.id, b.id, c.id]

    abc_repo.toggle_visibility_filter()
    assert abc_repo.visible_ids() == [a.id, c.id]

    abc_repo.remove(a.id)
    assert abc_repo.visible_ids() == [c.id]


def test_get_returns_none_after_remove(abc_repo, abc_todos) -> None:
    a = abc_todos[0]

    assert abc_repo.get(a.id) == a
    abc_repo.remove(a.id)

    assert abc_repo.get(a.id) is None


def test_remove_unknown_id_leaves_collection_unchanged(abc_repo) -> None:
    before = abc_repo.list()

    abc_repo.remove(uuid4())

    assert abc_repo.list() == before
    assert [todo.title for todo in abc_repo.list()] == ["A", "B", "C"]


def test_toggle_done_twice_restores_state(abc_repo, abc_todos) -> None:
    b = abc_todos[1]

    abc_repo.toggle_done(b.id)
    assert abc_repo.get(b.id).done is True
    abc_repo.toggle_done(b.id)

    assert abc_repo.get(b.id).done is False


def test_toggle_done_unknown_id_is_noop(abc_repo) -> None:
    abc_repo.toggle_done(uuid4())

    assert [todo.done for todo in abc_repo.list()] == [False, False, False]


def test_toggle_filter_twice_restores_visible_ids(abc_repo, abc_todos) -> None:
    abc_repo.toggle_done(abc_todos[0].id)
    before = abc_repo.visible_ids()

    abc_repo.toggle_visibility_filter()
    abc_repo.toggle_visibility_filter()

    assert abc_repo.visible_ids() == before
    assert abc_repo.shows_only_undone is False


def test_toggle_done_does_not_reorder(abc_repo, abc_todos) -> None:
    abc_repo.toggle_done(abc_todos[0].id)

    assert [todo.title for todo in abc_repo.list()] == ["A", "B", "C"]


def test_duplicate_initial_items_keep_first() -> None:
    first = Todo(title="First")
    clash = Todo(title="Clash", id=first.id)

    repo = InMemoryTodoRepository([first, clash])

    assert len(repo) == 1
    assert repo.get(first.id).title == "First"


def test_empty_repository_has_no_visible_ids() -> None:
    repo = InMemoryTodoRepository([])

    assert len(repo) == 0
    assert repo.visible_ids() == []


def test_random_mutations_keep_invariants() -> None:
    rng = random.Random(1234)
    repo = InMemoryTodoRepository(seed_todos(12))
    known_ids = [todo.id for todo in repo.list()] + [uuid4() for _ in range(3)]

    for _ in range(300):
        action = rng.choice(["remove", "toggle", "filter"])
        if action == "remove":
            repo.remove(rng.choice(known_ids))
        elif action == "toggle":
            repo.toggle_done(rng.choice(known_ids))
        else:
            repo.toggle_visibility_filter()

        ids = [todo.id for todo in repo.list()]
        visible = repo.visible_ids()
        assert len(ids) == len(set(ids))
        assert len(visible) <= len(ids)
        if not repo.shows_only_undone:
            assert visible == ids
        else:
            assert visible == [todo.id for todo in repo.list() if not todo.done]
