import logging

import pytest

from dogcenter.controller import DogController, DogNotFoundError
from dogcenter.monitor import FeedingMonitor
from dogcenter.validation import ValidationError, ValidationErrorKind


def _names_times(repo):
    return [(d.name, d.feeding_time) for d in repo.snapshot()]


def test_refresh_loads_seed_rows(controller, repo):
    assert _names_times(repo) == [("Buddy", "08:00"), ("Max", "13:00"), ("Bella", "18:00")]


def test_add_dog_refreshes_snapshot(controller, repo, store):
    controller.add_dog("  Rex ", " 09:30 ")
    assert len(repo.snapshot()) == 4
    assert _names_times(repo)[-1] == ("Rex", "09:30")
    assert repo.snapshot() == store.list()


def test_add_dog_malformed_time_leaves_store_unchanged(controller, repo, store):
    before = store.list()
    with pytest.raises(ValidationError) as exc:
        controller.add_dog("Rex", "9:3")
    assert exc.value.kind is ValidationErrorKind.MALFORMED_TIME
    assert store.list() == before
    assert repo.snapshot() == before


def test_add_dog_blank_name_rejected(controller, store):
    with pytest.raises(ValidationError) as exc:
        controller.add_dog("   ", "09:30")
    assert exc.value.kind is ValidationErrorKind.EMPTY_FIELD
    assert len(store.list()) == 3


def test_edit_and_delete(controller, repo):
    by_name = {d.name: d for d in repo.snapshot()}
    max_dog = by_name["Max"]

    controller.start_editing(max_dog.id, max_dog.name, max_dog.feeding_time)
    assert (controller.editing_id, controller.editing_name, controller.editing_time) == (max_dog.id, "Max", "13:00")

    controller.save_edit(max_dog.id, "Max", "14:15")
    assert controller.editing_id is None
    controller.delete_dog(by_name["Bella"].id)

    assert _names_times(repo) == [("Buddy", "08:00"), ("Max", "14:15")]


def test_save_edit_invalid_keeps_edit_state(controller, store):
    dog = store.list()[0]
    controller.start_editing(dog.id, dog.name, dog.feeding_time)
    with pytest.raises(ValidationError):
        controller.save_edit(dog.id, "Buddy", "8am")
    assert controller.editing_id == dog.id
    assert controller.editing_time == "8am"
    assert store.list()[0] == dog


def test_cancel_editing(controller):
    controller.start_editing(1, "Buddy", "08:00")
    controller.cancel_editing()
    assert controller.editing_id is None
    assert controller.editing_name == controller.editing_time == ""


def test_deleting_dog_being_edited_ends_editing(controller, repo):
    dog = repo.snapshot()[0]
    controller.start_editing(dog.id, dog.name, dog.feeding_time)
    controller.delete_dog(dog.id)
    assert controller.editing_id is None


def test_each_mutation_triggers_a_scan(store, repo, clock):
    reminders = []
    monitor = FeedingMonitor(repo, on_reminder=reminders.append, clock=clock)
    controller = DogController(store, repo, on_change=monitor.scan)

    controller.refresh()
    assert reminders[-1] == "Time to feed: Buddy"

    clock.now = clock.now.replace(hour=13)
    controller.add_dog("Luna", "13:00")
    assert reminders[-1] == "Time to feed: Max, Luna"

    max_id = next(d.id for d in repo.snapshot() if d.name == "Max")
    controller.save_edit(max_id, "Max", "14:15")
    assert reminders[-1] == "Time to feed: Luna"

    luna_id = next(d.id for d in repo.snapshot() if d.name == "Luna")
    controller.delete_dog(luna_id)
    assert reminders[-1] == ""


def test_save_edit_after_dog_deleted_raises_not_found(controller, repo, store):
    dog = repo.snapshot()[0]
    controller.start_editing(dog.id, dog.name, dog.feeding_time)
    controller.delete_dog(dog.id)

    with pytest.raises(DogNotFoundError) as exc:
        controller.save_edit(dog.id, "Buddy", "09:00")
    assert exc.value.dog_id == dog.id
    assert controller.editing_id is None
    assert all(d.id != dog.id for d in store.list())


def test_cancel_editing_other_dog_keeps_current_edit(controller, repo):
    first, second = repo.snapshot()[:2]
    controller.start_editing(first.id, first.name, first.feeding_time)
    controller.start_editing(second.id, second.name, second.feeding_time)

    controller.cancel_editing(first.id)
    assert controller.editing_id == second.id

    controller.cancel_editing(second.id)
    assert controller.editing_id is None


def test_delete_logs_only_when_a_row_was_removed(controller, repo, caplog):
    caplog.set_level(logging.DEBUG, logger="dogcenter.controller")
    controller.delete_dog(9999)
    assert not any(r.levelno == logging.INFO and "removed dog" in r.getMessage() for r in caplog.records)

    caplog.clear()
    dog_id = repo.snapshot()[0].id
    controller.delete_dog(dog_id)
    assert any(r.levelno == logging.INFO and r.getMessage() == f"removed dog {dog_id}" for r in caplog.records)
