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
from __future__ import annotations

import json
import logging
import os
from os import path

from wp.core.abstract_config_store import AbstractConfigStore, ConfigStoreError
from wp.core.abstract_settings import AbstractSettings

logger = logging.getLogger(__name__)


class FileConfigStore(AbstractConfigStore):
    """Keeps all configurations in a single JSON document:
    {user_id: {widget_id: configuration}}"""
    _filename: str

    def __init__(self, settings: AbstractSettings, user_id: str | None = None, filename: str | None = None):
        super().__init__(settings, user_id)
        self._filename = settings.get('FileConfigStore.filename') if filename is None else filename
        logger.debug(f'Created FileConfigStore for {self._filename}')

    def _read_all(self) -> dict[str, dict[str, dict[str, any]]]:
        if not path.exists(self._filename):
            return dict()
        with open(self._filename, 'r', encoding='UTF-8') as file:
            try:
                content = json.load(file)
            except json.JSONDecodeError as e:
                raise ConfigStoreError(f'Configuration file {self._filename} is corrupted') from e
        if not isinstance(content, dict):
            raise ConfigStoreError(f'Configuration file {self._filename} has unexpected format')
        return content

    def _load(self, user_id: str, key: str) -> dict[str, any] | None:
        user_content = self._read_all().get(user_id)
        if user_content is None:
            return None
        return user_content.get(key)

    def _save(self, user_id: str, key: str, data: dict[str, any]) -> None:
        content = self._read_all()
        content.setdefault(user_id, dict())[key] = data
        # Write to a temporary file first, so that a crash never leaves a half-written document
        tmp = f'{self._filename}.tmp'
        with open(tmp, 'w', encoding='UTF-8') as file:
            json.dump(content, file, indent=2)
        os.replace(tmp, self._filename)
        logger.debug(f'Saved {key} for {user_id} to {self._filename}')

    def location(self) -> str:
        return self._filename
