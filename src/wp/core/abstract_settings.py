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
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Iterable, Callable

from wp.core import events
from wp.core.abstract_event_emitter import AbstractEventEmitter

logger = logging.getLogger(__name__)


def _always_show(_) -> bool:
    return True


def _never_show(_) -> bool:
    return False


def _show_for_file_store(values: dict[str, str]) -> bool:
    return values['ConfigStore.type'] == 'file'


class AbstractSettings(AbstractEventEmitter, ABC):
    # Category -> [(id, type, display, default, options, visibility)]
    _definitions: dict[str, list[tuple[str, str, str, str, list[any], Callable[[dict[str, str]], bool]]]]
    _defaults: dict[str, str]
    _callback_invoker: Callable

    def __init__(self, callback_invoker: Callable):
        AbstractEventEmitter.__init__(self, [
            events.BeforeSettingsChanged,
            events.AfterSettingsChanged,
        ], callback_invoker)

        self._callback_invoker = callback_invoker

        self._defaults = dict()
        self._definitions = {
            'General': [
                ('Logger.level', 'choice', 'Log level', 'WARNING', [
                    "ERROR:Errors only",
                    "WARNING:Errors and warnings",
                    "DEBUG:Verbose (use it for troubleshooting)",
                ], _always_show),
                ('Logger.filename', 'file', 'Log filename', str(Path.home() / 'widgets-pack.log'), [], _always_show),
                ('Application.profile_color', 'color', 'Profile color', '#8B5E3C', [], _always_show),
            ],
            'Storage': [
                ('ConfigStore.type', 'choice', 'Configuration storage', 'file', [
                    "file:Local JSON file",
                    "qt:Qt settings",
                    "ephemeral:Ephemeral (in-memory, for testing purposes)",
                ], _always_show),
                ('ConfigStore.user_id', 'str', 'User ID', 'local-user', [], _never_show),
                ('FileConfigStore.filename', 'file', 'Configuration file',
                 str(Path.home() / 'widgets-pack-config.json'), ['*.json'], _show_for_file_store),
                ('ConfigStore.load_timeout', 'duration', 'Configuration load timeout', '5', [1, 60], _always_show),
            ],
            'Task Planner': [
                ('TaskPlanner.save_debounce', 'int', 'Save delay (ms)', '500', [0, 10000], _always_show),
            ],
            'Timer': [
                ('FocusTimer.tick_interval', 'int', 'Tick interval (ms)', '1000', [10, 10000], _never_show),
                ('FocusTimer.break_duration', 'duration', 'Break duration', str(10 * 60), [1, 120 * 60], _always_show),
            ],
        }
        for lst in self._definitions.values():
            for s in lst:
                self._defaults[s[0]] = s[3]
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(f'Filled defaults: {self._defaults}')

    def invoke_callback(self, fn: Callable, **kwargs) -> None:
        self._callback_invoker(fn, **kwargs)

    @abstractmethod
    def set(self, values: dict[str, str]) -> None:
        pass

    @abstractmethod
    def get(self, name: str) -> str:
        # Note that there's no default value -- we can get it from self._defaults
        pass

    @abstractmethod
    def clear(self) -> None:
        pass

    @abstractmethod
    def location(self) -> str:
        pass

    def get_user_id(self) -> str:
        return self.get('ConfigStore.user_id')

    def get_load_timeout(self) -> float:
        return float(self.get('ConfigStore.load_timeout'))

    def get_save_debounce(self) -> int:
        return int(self.get('TaskPlanner.save_debounce'))

    def get_tick_interval(self) -> int:
        return int(self.get('FocusTimer.tick_interval'))

    def get_break_duration(self) -> int:
        return int(self.get('FocusTimer.break_duration'))

    def get_profile_color(self) -> str:
        return self.get('Application.profile_color')

    def get_categories(self) -> Iterable[str]:
        return self._definitions.keys()

    def get_settings(self, category) -> Iterable[tuple[str, str, str, str, list[any], Callable[[dict[str, str]], bool]]]:
        return [
            (
                option_id,
                option_type,
                option_display,
                self.get(option_id),
                option_options,
                option_visible
            )
            for option_id, option_type, option_display, option_default, option_options, option_visible
            in self._definitions[category]
        ]

    def _get_property(self, option_id, n) -> str:
        for cat in self._definitions.values():
            for opt in cat:
                if opt[0] == option_id:
                    return opt[n]
        raise Exception(f'Invalid option {option_id}')

    def get_type(self, option_id) -> str:
        return self._get_property(option_id, 1)

    def get_display_name(self, option_id) -> str:
        return self._get_property(option_id, 2)

    def get_configuration(self, option_id) -> list[any]:
        return self._get_property(option_id, 4)

    def reset_to_defaults(self) -> None:
        to_set = dict[str, str]()
        for lst in self._definitions.values():
            for option_id, option_type, option_display, option_default, option_options, option_visible in lst:
                to_set[option_id] = option_default
        self.clear()
        self.set(to_set)
