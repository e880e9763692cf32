#  Widgets Pack - Focus timer and task planner widgets
#  Copyright (c) 2023 Constantine Kulak
#
#  This program is free software: you can redistribute it and/or modify
#  it under the terms of the GNU General Public License as published by
#  the Free Software Foundation; either version 3 of the License, or
#  (at your option) any later version.
#
#  This program is distributed in the hope that it will be useful,
#  but WITHOUT ANY WARRANTY; without even the implied warranty of
#  MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
#  GNU General Public License for more details.
#
#  You should have received a copy of the GNU General Public License
#  along with this program.  If not, see <https://www.gnu.org/licenses/>.
import logging

from PySide6 import QtCore

from wp.core import events
from wp.core.abstract_settings import AbstractSettings
from wp.core.mock_settings import invoke_direct

logger = logging.getLogger(__name__)


class QtSettings(AbstractSettings):
    _settings: QtCore.QSettings
    _app_name: str

    def __init__(self, app_name: str = 'widgets-pack'):
        self._app_name = app_name
        # All our emitters and timers live in the main thread, so the callbacks can be invoked directly
        super().__init__(invoke_direct)
        self._settings = QtCore.QSettings('widgets-pack', app_name)

    def set(self, values: dict[str, str], force_fire=False) -> None:
        old_values: dict[str, str] = dict()
        for name in values.keys():
            old_value = self.get(name)
            if old_value != values[name] or force_fire:
                old_values[name] = old_value
        if len(old_values) > 0:
            params = {
                'old_values': old_values,
                'new_values': values,
            }
            self._emit(events.BeforeSettingsChanged, params)
            for name in old_values.keys():
                self._settings.setValue(name, values[name])
            self._emit(events.AfterSettingsChanged, params)

    def get(self, name: str) -> str:
        return str(self._settings.value(name, self._defaults[name]))

    def is_set(self, name: str) -> bool:
        return self._settings.contains(name)

    def location(self) -> str:
        return self._settings.fileName()

    def clear(self) -> None:
        self._settings.clear()
