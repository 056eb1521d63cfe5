from datetime import datetime, timezone
import json

from core.settings import SETTINGS_KEY, TASKS_KEY
from models.settings import PlannerSettings
from models.task import Task, TaskPriority, TaskStatus


def test_empty_store_defaults(store):
    assert store.load_tasks() == []
    assert store.load_settings().model_dump() == PlannerSettings().model_dump()


def test_tasks_persist_under_single_key(store):
    task = Task(
        title="Write",
        duration_minutes=45,
        scheduled_time=datetime(2024, 3, 11, 9, 30),
        priority=TaskPriority.HIGH,
        status=TaskStatus.ACTIVE,
    )
    flexible = Task(title="Read", duration_minutes=30, is_timed_task=False)
    store.save_tasks([task, flexible])

    payload = json.loads(store.get_raw(TASKS_KEY))
    assert [item["title"] for item in payload] == ["Write", "Read"]
    assert payload[0]["scheduled_time"] == "2024-03-11T09:30:00"
    assert payload[0]["status"] == "active"
    assert payload[1]["scheduled_time"] is None

    loaded = store.load_tasks()
    assert loaded[0].id == task.id
    assert loaded[0].scheduled_time == datetime(2024, 3, 11, 9, 30)
    assert loaded[0].status is TaskStatus.ACTIVE
    assert loaded[0].priority is TaskPriority.HIGH
    assert loaded[1].scheduled_time is None
    assert loaded[1].is_timed_task is False


def test_save_overwrites_previous_value(store):
    store.save_tasks([Task(title="A", duration_minutes=5)])
    store.save_tasks([])
    assert store.load_tasks() == []


def test_settings_persist(store):
    store.save_settings(PlannerSettings(focus_start="09:00", nickname="Sam", time_format="24h"))
    loaded = store.load_settings()
    assert loaded.focus_start == "09:00"
    assert loaded.nickname == "Sam"
    assert loaded.time_format == "24h"
    assert json.loads(store.get_raw(SETTINGS_KEY))["focus_end"] == "18:00"


def test_corrupt_json_falls_back(store):
    store.set_raw(TASKS_KEY, "{not json")
    store.set_raw(SETTINGS_KEY, "[]")
    assert store.load_tasks() == []
    assert store.load_settings().model_dump() == PlannerSettings().model_dump()


def test_invalid_task_entries_are_skipped(store):
    good = Task(title="Keep", duration_minutes=10)
    store.set_raw(
        TASKS_KEY,
        json.dumps([good.model_dump(mode="json"), {"title": "Broken", "duration_minutes": -5}]),
    )
    assert [t.title for t in store.load_tasks()] == ["Keep"]


def test_invalid_settings_fall_back_to_defaults(store):
    store.set_raw(SETTINGS_KEY, json.dumps({"default_task_duration_minutes": 0}))
    assert store.load_settings().model_dump() == PlannerSettings().model_dump()


def test_delete_key(store):
    store.set_raw("other", "1")
    store.delete("other")
    assert store.get_raw("other") is None


def test_unreadable_entries_survive_save(store):
    keep = Task(title="Keep", duration_minutes=10)
    legacy = {"title": "Legacy", "duration_minutes": 0}
    store.set_raw(TASKS_KEY, json.dumps([keep.model_dump(mode="json"), legacy]))

    tasks = store.load_tasks()
    tasks.append(Task(title="New", duration_minutes=15))
    store.save_tasks(tasks)

    stored = json.loads(store.get_raw(TASKS_KEY))
    assert [item["title"] for item in stored] == ["Keep", "New", "Legacy"]
    assert stored[-1] == legacy
    assert [t.title for t in store.load_tasks()] == ["Keep", "New"]


def test_clear_tasks_removes_key(store):
    store.set_raw(TASKS_KEY, json.dumps([{"title": "Legacy", "duration_minutes": 0}]))
    store.clear_tasks()
    assert store.get_raw(TASKS_KEY) is None
    assert store.load_tasks() == []


def test_offset_timestamps_load_as_local_time(store):
    store.set_raw(
        TASKS_KEY,
        json.dumps(
            [
                {
                    "id": "1710140400000-abc123",
                    "title": "Imported",
                    "duration_minutes": 30,
                    "scheduled_time": "2024-03-11T09:00:00Z",
                    "created_at": "2024-03-11T07:00:00+02:00",
                }
            ]
        ),
    )
    (task,) = store.load_tasks()
    expected = datetime(2024, 3, 11, 9, 0, tzinfo=timezone.utc).astimezone().replace(tzinfo=None)
    assert task.scheduled_time == expected
    assert task.scheduled_time.tzinfo is None
    assert task.created_at.tzinfo is None
