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

from wp.core.abstract_settings import AbstractSettings

logger = logging.getLogger(__name__)


class ConfigStoreError(Exception):
    pass


class AbstractConfigStore(ABC):
    """Opaque key-value storage of widget configurations. Each store instance
    acts on behalf of a single user, so the key is just the widget UID."""
    _settings: AbstractSettings
    _user_id: str | None

    def __init__(self, settings: AbstractSettings, user_id: str | None = None):
        self._settings = settings
        self._user_id = settings.get_user_id() if user_id is None else user_id

    def get_user_id(self) -> str:
        if not self._user_id:
            raise ConfigStoreError('User not authenticated')
        return self._user_id

    def load_config(self, key: str) -> dict[str, any]:
        if not key:
            raise ValueError('Widget ID cannot be empty')
        user_id = self.get_user_id()
        config = self._load(user_id, key)
        if config is None:
            logger.debug(f'No entry found for user {user_id} and widget {key}')
            return dict()
        return config

    def save_config(self, key: str, data: dict[str, any]) -> None:
        if not key:
            raise ValueError('Widget ID cannot be empty')
        self._save(self.get_user_id(), key, data)

    # Returns None if nothing is stored for this user and widget
    @abstractmethod
    def _load(self, user_id: str, key: str) -> dict[str, any] | None:
        pass

    @abstractmethod
    def _save(self, user_id: str, key: str, data: dict[str, any]) -> None:
        pass

    @abstractmethod
    def location(self) -> str:
        pass
