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
import copy
import logging

from wp.core.abstract_config_store import AbstractConfigStore
from wp.core.abstract_settings import AbstractSettings

logger = logging.getLogger(__name__)


class EphemeralConfigStore(AbstractConfigStore):
    _content: dict[str, dict[str, dict[str, any]]]
    _save_count: int

    def __init__(self, settings: AbstractSettings, user_id: str | None = None):
        super().__init__(settings, user_id)
        self._content = dict()
        self._save_count = 0

    def _load(self, user_id: str, key: str) -> dict[str, any] | None:
        user_content = self._content.get(user_id)
        if user_content is None or key not in user_content:
            return None
        return copy.deepcopy(user_content[key])

    def _save(self, user_id: str, key: str, data: dict[str, any]) -> None:
        self._content.setdefault(user_id, dict())[key] = copy.deepcopy(data)
        self._save_count += 1
        logger.debug(f'Saved {key} for {user_id}: {data}')

    def get_save_count(self) -> int:
        return self._save_count

    def location(self) -> str:
        return 'memory'

    def dump(self) -> dict[str, dict[str, dict[str, any]]]:
        return copy.deepcopy(self._content)
