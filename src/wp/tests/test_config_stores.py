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
import os
import tempfile
from unittest import TestCase

from assertpy import assert_that

from wp.core.abstract_config_store import ConfigStoreError
from wp.core.config_store_factory import create_config_store, ConfigStoreFactory
from wp.core.ephemeral_config_store import EphemeralConfigStore
from wp.core.file_config_store import FileConfigStore
from wp.core.mock_settings import MockSettings

WIDGET = 'f5e9d2a1-6b7c-4d3e-9f1a-2c8b3d4e5f6a'


class TestConfigStores(TestCase):
    tmp: tempfile.TemporaryDirectory
    filename: str
    settings: MockSettings

    def setUp(self) -> None:
        logging.getLogger().setLevel(logging.DEBUG)
        self.tmp = tempfile.TemporaryDirectory()
        self.filename = os.path.join(self.tmp.name, 'config.json')
        self.settings = MockSettings(filename=self.filename, store_type='file')

    def tearDown(self) -> None:
        self.tmp.cleanup()

    def test_file_missing(self):
        store = FileConfigStore(self.settings)
        assert_that(store.location()).is_equal_to(self.filename)
        assert_that(store.load_config(WIDGET)).is_empty()
        assert_that(os.path.exists(self.filename)).is_false()

    def test_file_save_load(self):
        store = FileConfigStore(self.settings)
        store.save_config(WIDGET, {'tasks': [{'title': 'A', 'isCompleted': False}], 'sortOrder': 'added'})
        assert_that(os.path.exists(self.filename)).is_true()
        assert_that(os.path.exists(f'{self.filename}.tmp')).is_false()

        # A fresh instance reads what the first one has written
        loaded = FileConfigStore(self.settings).load_config(WIDGET)
        assert_that(loaded).is_equal_to({'tasks': [{'title': 'A', 'isCompleted': False}], 'sortOrder': 'added'})

        with open(self.filename, encoding='UTF-8') as f:
            content = json.load(f)
        assert_that(content).contains_key('local-user')
        assert_that(content['local-user']).contains_key(WIDGET)

    def test_file_users_isolated(self):
        alice = FileConfigStore(self.settings, 'alice')
        bob = FileConfigStore(self.settings, 'bob')
        alice.save_config(WIDGET, {'taskName': 'Alice'})
        bob.save_config(WIDGET, {'taskName': 'Bob'})
        assert_that(alice.load_config(WIDGET)).is_equal_to({'taskName': 'Alice'})
        assert_that(bob.load_config(WIDGET)).is_equal_to({'taskName': 'Bob'})
        assert_that(FileConfigStore(self.settings, 'carol').load_config(WIDGET)).is_empty()

    def test_file_widgets_isolated(self):
        store = FileConfigStore(self.settings)
        store.save_config('widget-1', {'a': 1})
        store.save_config('widget-2', {'b': 2})
        assert_that(store.load_config('widget-1')).is_equal_to({'a': 1})
        assert_that(store.load_config('widget-2')).is_equal_to({'b': 2})

    def test_file_corrupted(self):
        with open(self.filename, 'w', encoding='UTF-8') as f:
            f.write('{"local-user": ')
        store = FileConfigStore(self.settings)
        assert_that(store.load_config).raises(ConfigStoreError).when_called_with(WIDGET)
        assert_that(store.save_config).raises(ConfigStoreError).when_called_with(WIDGET, {})

    def test_file_unexpected_format(self):
        with open(self.filename, 'w', encoding='UTF-8') as f:
            f.write('[1, 2, 3]')
        store = FileConfigStore(self.settings)
        assert_that(store.load_config).raises(ConfigStoreError).when_called_with(WIDGET)

    def test_empty_key(self):
        store = FileConfigStore(self.settings)
        assert_that(store.load_config).raises(ValueError).when_called_with('')
        assert_that(store.save_config).raises(ValueError).when_called_with('', {'a': 1})

    def test_no_user(self):
        store = EphemeralConfigStore(MockSettings(user_id=''))
        assert_that(store.get_user_id).raises(ConfigStoreError).when_called_with() \
            .is_equal_to('User not authenticated')
        assert_that(store.load_config).raises(ConfigStoreError).when_called_with(WIDGET)

    def test_ephemeral_copies(self):
        store = EphemeralConfigStore(self.settings)
        data = {'tasks': [{'title': 'A'}]}
        store.save_config(WIDGET, data)
        data['tasks'].append({'title': 'B'})
        loaded = store.load_config(WIDGET)
        assert_that(loaded['tasks']).is_length(1)
        loaded['tasks'].clear()
        assert_that(store.load_config(WIDGET)['tasks']).is_length(1)
        assert_that(store.get_save_count()).is_equal_to(1)
        assert_that(store.dump()).is_equal_to({'local-user': {WIDGET: {'tasks': [{'title': 'A'}]}}})

    def test_factory(self):
        assert_that(create_config_store(self.settings)).is_instance_of(FileConfigStore)
        assert_that(create_config_store(MockSettings())).is_instance_of(EphemeralConfigStore)
        assert_that(ConfigStoreFactory.get_config_store_factory().is_valid('file')).is_true()
        assert_that(create_config_store).raises(Exception) \
            .when_called_with(MockSettings(store_type='cloud'))
