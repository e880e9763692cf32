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
from unittest import TestCase

from PySide6 import QtCore
from assertpy import assert_that

from wp.core.abstract_config_store import ConfigStoreError
from wp.core.config_store_factory import ConfigStoreFactory
from wp.core.mock_settings import MockSettings
from wp.qt.qt_config_store import QtConfigStore
from wp.qt.qt_settings import QtSettings

WIDGET = '018c3453-3862-7c38-96e7-6cf16e33d535'


class TestQtStorage(TestCase):
    store: QtConfigStore
    settings: QtSettings

    def setUp(self) -> None:
        logging.getLogger().setLevel(logging.DEBUG)
        self.store = QtConfigStore(MockSettings(), app_name='widgets-pack-test-data')
        self.settings = QtSettings('widgets-pack-test')

    def tearDown(self) -> None:
        QtCore.QSettings('widgets-pack', 'widgets-pack-test-data').clear()
        self.settings.clear()

    def test_registered(self):
        assert_that(ConfigStoreFactory.get_config_store_factory().is_valid('qt')).is_true()

    def test_save_load(self):
        assert_that(self.store.load_config(WIDGET)).is_empty()
        self.store.save_config(WIDGET, {'taskName': 'Write report', 'hours': 1})
        loaded = QtConfigStore(MockSettings(), app_name='widgets-pack-test-data').load_config(WIDGET)
        assert_that(loaded).is_equal_to({'taskName': 'Write report', 'hours': 1})

    def test_corrupted(self):
        QtCore.QSettings('widgets-pack', 'widgets-pack-test-data').setValue(f'local-user/{WIDGET}', '{oops')
        assert_that(self.store.load_config).raises(ConfigStoreError).when_called_with(WIDGET)

    def test_settings(self):
        assert_that(self.settings.get('FocusTimer.break_duration')).is_equal_to('600')
        assert_that(self.settings.is_set('FocusTimer.break_duration')).is_false()
        self.settings.set({'FocusTimer.break_duration': '300'})
        assert_that(self.settings.get_break_duration()).is_equal_to(300)
        assert_that(self.settings.is_set('FocusTimer.break_duration')).is_true()
