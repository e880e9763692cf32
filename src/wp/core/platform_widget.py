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
import concurrent.futures
import copy
import logging
import threading
from abc import ABC, abstractmethod

from wp.core import events
from wp.core.abstract_config_store import AbstractConfigStore
from wp.core.abstract_event_emitter import AbstractEventEmitter
from wp.core.abstract_settings import AbstractSettings

logger = logging.getLogger(__name__)

UNEXPECTED_ERROR_MESSAGE = 'Unexpected error occurred'


class PlatformWidget(AbstractEventEmitter, ABC):
    """Base class for the widgets whose per-user configuration lives in a
    config store. Subclasses describe themselves (UID, name, defaults) and
    convert their state to and from the persisted dictionary.

    Loading never fails: on a timeout or a store error the defaults are used.
    Saving never fails either: errors are logged and reported to the
    subscribers via the ConfigurationSaveFailed event."""
    _settings: AbstractSettings
    _store: AbstractConfigStore

    def __init__(self,
                 allowed_events: list[str],
                 settings: AbstractSettings,
                 store: AbstractConfigStore):
        super().__init__(allowed_events + [
            events.ConfigurationSaved,
            events.ConfigurationSaveFailed,
        ], settings.invoke_callback)
        self._settings = settings
        self._store = store

    @abstractmethod
    def get_uid(self) -> str:
        pass

    @abstractmethod
    def get_name(self) -> str:
        pass

    @abstractmethod
    def get_description(self) -> str:
        pass

    @abstractmethod
    def get_developer_id(self) -> str:
        pass

    @abstractmethod
    def _get_defaults(self) -> dict[str, any]:
        pass

    @abstractmethod
    def _normalize_config(self, raw: dict[str, any]) -> dict[str, any]:
        # Fills in missing keys from the defaults
        pass

    @abstractmethod
    def to_config(self) -> dict[str, any]:
        pass

    def get_default_config(self) -> dict[str, any]:
        return copy.deepcopy(self._get_defaults())

    def get_settings(self) -> AbstractSettings:
        return self._settings

    def load_configuration(self) -> dict[str, any]:
        timeout = self._settings.get_load_timeout()
        future = concurrent.futures.Future()

        def load() -> None:
            try:
                future.set_result(self._store.load_config(self.get_uid()))
            except Exception as ex:
                future.set_exception(ex)

        # A daemon thread, so that a hanging backend call blocks neither the
        # caller nor the interpreter exit
        threading.Thread(target=load, name=f'{self.get_name()} loader', daemon=True).start()
        try:
            raw = future.result(timeout=timeout)
            config = self._normalize_config(raw)
            logger.debug(f'Loaded {self.get_name()} configuration: {config}')
            return config
        except concurrent.futures.TimeoutError:
            logger.warning(f'Failed to load {self.get_name()} configuration in {timeout}s, using defaults')
            return self.get_default_config()
        except Exception as e:
            logger.error(f'Error loading {self.get_name()} configuration, using defaults', exc_info=e)
            return self.get_default_config()

    def _save_configuration(self) -> None:
        config = self.to_config()
        try:
            self._store.save_config(self.get_uid(), config)
        except Exception as e:
            logger.error(f'Error saving {self.get_name()} configuration', exc_info=e)
            self._emit(events.ConfigurationSaveFailed, {
                'widget': self,
                'message': UNEXPECTED_ERROR_MESSAGE,
                'error': e,
            })
            return
        self._emit(events.ConfigurationSaved, {
            'widget': self,
            'configuration': config,
        })
