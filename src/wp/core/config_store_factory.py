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

from typing import Callable

from wp.core.abstract_config_store import AbstractConfigStore
from wp.core.abstract_settings import AbstractSettings
from wp.core.ephemeral_config_store import EphemeralConfigStore
from wp.core.file_config_store import FileConfigStore


class ConfigStoreFactory:
    _store_producers: dict[str, Callable[[AbstractSettings], AbstractConfigStore]]
    _instance: ConfigStoreFactory = None

    def __init__(self):
        self._store_producers = dict()

    def is_valid(self, name: str) -> bool:
        return name in self._store_producers

    def get_producer(self, name: str) -> Callable[[AbstractSettings], AbstractConfigStore] | None:
        return self._store_producers.get(name)

    def register_producer(self,
                          name: str,
                          producer: Callable[[AbstractSettings], AbstractConfigStore]) -> None:
        self._store_producers[name] = producer

    @staticmethod
    def get_config_store_factory() -> ConfigStoreFactory:
        if ConfigStoreFactory._instance is None:
            ConfigStoreFactory._instance = ConfigStoreFactory()
            ConfigStoreFactory._instance.register_producer('file', FileConfigStore)
            ConfigStoreFactory._instance.register_producer('ephemeral', EphemeralConfigStore)
        return ConfigStoreFactory._instance


def create_config_store(settings: AbstractSettings) -> AbstractConfigStore:
    store_type = settings.get('ConfigStore.type')
    producer = ConfigStoreFactory.get_config_store_factory().get_producer(store_type)
    if producer is None:
        raise Exception(f'Configuration store type {store_type} not supported')
    return producer(settings)
