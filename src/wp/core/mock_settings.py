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

from wp.core import events
from wp.core.abstract_settings import AbstractSettings

logger = logging.getLogger(__name__)


def invoke_direct(fn, **kwargs):
    fn(**kwargs)


class MockSettings(AbstractSettings):
    _settings: dict[str, str]

    def __init__(self, filename: str | None = None, user_id: str | None = None, store_type: str = 'ephemeral'):
        super().__init__(invoke_direct)
        self._settings = {
            'ConfigStore.type': store_type,
        }
        if filename is not None:
            self._settings['FileConfigStore.filename'] = filename
        if user_id is not None:
            self._settings['ConfigStore.user_id'] = user_id

    def get(self, name: str) -> str:
        if name in self._settings:
            return self._settings[name]
        else:
            return self._defaults[name]

    def set(self, values: dict[str, str]) -> None:
        old_values: dict[str, str] = dict()
        for name in values.keys():
            old_value = self.get(name) if name in self._settings else None
            if old_value != values[name]:
                old_values[name] = old_value
        params = {
            'old_values': old_values,
            'new_values': values,
        }
        self._emit(events.BeforeSettingsChanged, params)
        for name in old_values.keys():  # This is not a typo, we've just filtered this list
            # to only contain settings which actually changed.
            self._settings[name] = values[name]
        self._emit(events.AfterSettingsChanged, params)

    def location(self) -> str:
        return "N/A"

    def clear(self) -> None:
        self._settings = {}

    def get_displayed_settings(self) -> list[str]:
        res = list()
        for category in self.get_categories():
            settings = self.get_settings(category)
            values = dict()
            for s in settings:
                values[s[0]] = s[3]
            for option_id, option_type, option_display, option_value, option_options, option_visible in settings:
                if option_visible(values):
                    logger.debug(f' - {option_display}: {option_value}')
                    res.append(option_id)
        return res
