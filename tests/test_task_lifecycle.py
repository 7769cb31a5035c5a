from todo.adapters.memory.task_store import InMemoryTaskStore
from todo.adapters.system.id_provider_counter import CounterIdProvider
from todo.services.task_lifecycle import TaskLifecycle
from todo.domain.task import Task, TaskId
from todo.domain.enums import TaskStatus
from datetime import date
import pytest


class FakeIdProvider:
    def __init__(self):
        self.counter = 0
    def new_id(self) -> TaskId:
        self.counter += 1
        return TaskId(self.counter)


@pytest.fixture
def lifecycle():
    return TaskLifecycle(InMemoryTaskStore(), FakeIdProvider())


def test_create_task(lifecycle):
    # Act
    task = lifecycle.create("Kup mleko", "2%", date(2024, 1, 10))

    # Assert
    items = lifecycle.list_all()
    assert items == [task]
    assert task.status == TaskStatus.PENDING
    assert task.due_date == date(2024, 1, 10)
    assert lifecycle.find(task.task_id) == task


def test_create_appends_after_existing(lifecycle):
    a = lifecycle.create("A", "", date(2024, 1, 1))
    b = lifecycle.create("B", "", date(2023, 1, 1))
    c = lifecycle.create("C", "", date(2025, 1, 1))

    # kolejność wstawiania, bez sortowania po terminie
    assert [t.task_id for t in lifecycle.list_all()] == [a.task_id, b.task_id, c.task_id]


def test_ids_are_unique_across_creates_and_removals():
    lifecycle = TaskLifecycle(InMemoryTaskStore(), CounterIdProvider())
    seen = set()
    for i in range(50):
        t = lifecycle.create(f"T{i}", "", date(2024, 1, 1))
        assert t.task_id not in seen
        seen.add(t.task_id)
        if i % 3 == 0:
            lifecycle.remove(t.task_id)

    live = [t.task_id for t in lifecycle.list_all()]
    assert len(live) == len(set(live))


def test_remove_deletes_and_second_remove_is_noop(lifecycle):
    a = lifecycle.create("A", "", date(2024, 1, 1))
    b = lifecycle.create("B", "", date(2024, 1, 2))

    lifecycle.remove(a.task_id)
    assert lifecycle.list_all() == [b]
    assert lifecycle.find(a.task_id) is None

    lifecycle.remove(a.task_id)
    assert lifecycle.list_all() == [b]


def test_done_marks_as_completed(lifecycle):
    t = lifecycle.create("A", "", date(2024, 1, 1))

    lifecycle.mark_done(t.task_id)

    assert lifecycle.find(t.task_id).status == TaskStatus.DONE
    assert lifecycle.list_all()[0].status == "done"


def test_done_is_idempotent(lifecycle):
    t = lifecycle.create("A", "", date(2024, 1, 1))

    lifecycle.mark_done(t.task_id)
    first = lifecycle.find(t.task_id)
    lifecycle.mark_done(t.task_id)
    second = lifecycle.find(t.task_id)

    assert first.status == TaskStatus.DONE
    assert second == first


def test_missing_id_is_noop(lifecycle):
    t = lifecycle.create("A", "opis", date(2024, 1, 1))
    before = lifecycle.list_all()

    lifecycle.mark_done(TaskId(999))
    lifecycle.remove(TaskId(999))
    lifecycle.change_description(TaskId(999), "x")
    lifecycle.change_due_date(TaskId(999), date(2030, 1, 1))

    assert lifecycle.list_all() == before
    assert lifecycle.find(TaskId(999)) is None
    assert lifecycle.find(t.task_id).status == TaskStatus.PENDING


def test_returned_task_does_not_change_after_mark_done(lifecycle):
    t = lifecycle.create("A", "", date(2024, 1, 1))

    lifecycle.mark_done(t.task_id)

    # Task jest niemutowalny; aktualny stan czytamy przez find/list_all
    assert t.status == TaskStatus.PENDING
    assert lifecycle.find(t.task_id).status == TaskStatus.DONE


def test_change_description_and_due_date_keep_status_and_position(lifecycle):
    a = lifecycle.create("A", "stary", date(2024, 1, 1))
    b = lifecycle.create("B", "", date(2024, 1, 2))
    lifecycle.mark_done(a.task_id)

    lifecycle.change_description(a.task_id, "nowy")
    lifecycle.change_due_date(a.task_id, date(2024, 2, 1))

    items = lifecycle.list_all()
    assert [t.task_id for t in items] == [a.task_id, b.task_id]
    assert items[0].description == "nowy"
    assert items[0].due_date == date(2024, 2, 1)
    assert items[0].status == TaskStatus.DONE


def test_scenario_buy_milk_pay_rent():
    lifecycle = TaskLifecycle(InMemoryTaskStore(), CounterIdProvider())

    a = lifecycle.create("Buy milk", "2% fat", date(2024, 1, 10))
    b = lifecycle.create("Pay rent", "", date(2024, 1, 5))
    assert a.task_id != b.task_id
    assert [t.task_id for t in lifecycle.list_all()] == [a.task_id, b.task_id]

    lifecycle.mark_done(a.task_id)
    assert lifecycle.list_all()[0].status == "done"

    lifecycle.remove(b.task_id)
    assert lifecycle.list_all() == [
        Task(task_id=a.task_id, title="Buy milk", description="2% fat", due_date=date(2024, 1, 10), status=TaskStatus.DONE)
    ]
