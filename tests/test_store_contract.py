import pytest

from tododesk.models import TodoItem
from tododesk.exceptions import NotFoundError


def test_scenario_add_toggle_remove(store):
    assert store.list() == []

    created = store.add("buy milk")
    assert created == TodoItem(id=1, text="buy milk", completed=False)
    assert store.list() == [TodoItem(id=1, text="buy milk", completed=False)]

    store.toggle(1)
    assert store.list() == [TodoItem(id=1, text="buy milk", completed=True)]

    store.remove(1)
    assert store.list() == []


def test_add_then_list_ends_with_new_item(store):
    store.add("first")
    store.add("second")
    last = store.list()[-1]
    assert last.text == "second"
    assert last.completed is False


def test_list_is_stable_without_mutations(store):
    for text in ("a", "b", "c"):
        store.add(text)
    assert store.list() == store.list()


def test_toggle_twice_restores_state(store):
    todo = store.add("water plants")
    store.toggle(todo.id)
    store.toggle(todo.id)
    assert store.list()[0].completed is False


def test_remove_is_permanent_and_repeatable(store):
    todo = store.add("call mom")
    store.remove(todo.id)
    store.remove(todo.id)
    assert todo.id not in [t.id for t in store.list()]


def test_remove_keeps_order_of_remaining(store):
    a = store.add("A")
    b = store.add("B")
    c = store.add("C")
    store.remove(a.id)
    assert [t.text for t in store.list()] == ["B", "C"]
    assert [t.id for t in store.list()] == [b.id, c.id]


def test_toggle_missing_id_raises_not_found(store):
    store.add("exists")
    with pytest.raises(NotFoundError) as excinfo:
        store.toggle(42)
    assert excinfo.value.todo_id == 42
    assert store.list()[0].completed is False


def test_ids_are_not_reused_after_removal(store):
    first = store.add("one")
    store.remove(first.id)
    second = store.add("two")
    assert second.id > first.id
