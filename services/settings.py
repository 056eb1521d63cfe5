# focusly/services/settings.py
from __future__ import annotations

from typing import Any, Optional

from core.log import get_logger
from models.settings import PlannerSettings, validate_settings
from storage.store import PlannerStore


class SettingsService:
    def __init__(self, store: Optional[PlannerStore] = None) -> None:
        self.store = store or PlannerStore()
        self.logger = get_logger("settings")

    def get(self) -> PlannerSettings:
        return self.store.load_settings()

    def update(self, **changes: Any) -> PlannerSettings:
        """Apply ``changes`` and persist them; invalid values raise ``ValueError``."""

        current = self.store.load_settings()
        unknown = [key for key in changes if key not in PlannerSettings.model_fields]
        if unknown:
            raise ValueError(f"Unknown settings: {', '.join(sorted(unknown))}")
        # pydantic's ValidationError is a ValueError
        updated = PlannerSettings.model_validate({**current.model_dump(), **changes})
        validate_settings(updated)
        self.store.save_settings(updated)
        self.logger.info("Settings updated: %s", ", ".join(sorted(changes)))
        return updated

    def reset(self) -> PlannerSettings:
        defaults = PlannerSettings()
        self.store.save_settings(defaults)
        self.logger.info("Settings reset to defaults")
        return defaults


__all__ = ["SettingsService"]
