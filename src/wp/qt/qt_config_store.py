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
import json
import logging

from PySide6 import QtCore

from wp.core.abstract_config_store import AbstractConfigStore, ConfigStoreError
from wp.core.abstract_settings import AbstractSettings
from wp.core.config_store_factory import ConfigStoreFactory

logger = logging.getLogger(__name__)


class QtConfigStore(AbstractConfigStore):
    _settings_store: QtCore.QSettings

    def __init__(self, settings: AbstractSettings, user_id: str | None = None, app_name: str = 'widgets-pack-data'):
        super().__init__(settings, user_id)
        self._settings_store = QtCore.QSettings('widgets-pack', app_name)

    def _load(self, user_id: str, key: str) -> dict[str, any] | None:
        raw = self._settings_store.value(f'{user_id}/{key}', None)
        if raw is None:
            return None
        try:
            return json.loads(str(raw))
        except json.JSONDecodeError as e:
            raise ConfigStoreError(f'Stored configuration for {key} is corrupted') from e

    def _save(self, user_id: str, key: str, data: dict[str, any]) -> None:
        self._settings_store.setValue(f'{user_id}/{key}', json.dumps(data))
        self._settings_store.sync()
        if self._settings_store.status() != QtCore.QSettings.Status.NoError:
            raise ConfigStoreError(f'Could not write configuration to {self.location()}')

    def location(self) -> str:
        return self._settings_store.fileName()


ConfigStoreFactory.get_config_store_factory().register_producer('qt', QtConfigStore)
