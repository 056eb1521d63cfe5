import pytest

from models.settings import FocusWindow, PlannerSettings
from services.settings import SettingsService


@pytest.fixture()
def service(store):
    return SettingsService(store)


def test_defaults():
    settings = PlannerSettings()
    assert settings.focus_window == FocusWindow("08:00", "18:00")
    assert settings.focus_window.width_minutes == 600
    assert settings.max_minutes_per_day == 240
    assert settings.default_task_duration_minutes == 30
    assert settings.auto_scheduling_enabled is True
    assert settings.time_format == "12h"


def test_update_persists(service, store):
    updated = service.update(focus_start="09:30", max_minutes_per_day=300, nickname="Alex")
    assert updated.focus_start == "09:30"
    loaded = store.load_settings()
    assert loaded.max_minutes_per_day == 300
    assert loaded.nickname == "Alex"
    assert loaded.focus_end == "18:00"


@pytest.mark.parametrize(
    "changes",
    [
        {"focus_start": "nine"},
        {"focus_end": "25:00"},
        {"focus_start": "18:00", "focus_end": "08:00"},
        {"max_minutes_per_day": 0},
        {"default_task_duration_minutes": -5},
        {"time_format": "36h"},
        {"colour": "blue"},
    ],
)
def test_invalid_update_is_rejected(service, store, changes):
    with pytest.raises(ValueError):
        service.update(**changes)
    assert store.load_settings().model_dump() == PlannerSettings().model_dump()


def test_reset(service, store):
    service.update(nickname="Alex", auto_scheduling_enabled=False)
    defaults = service.reset()
    assert defaults.nickname == ""
    assert store.load_settings().auto_scheduling_enabled is True


def test_unparsable_window_has_no_width():
    assert FocusWindow("soon", "18:00").width_minutes is None
