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
from wp.core.ephemeral_config_store import EphemeralConfigStore
from wp.core.focus_timer import FocusTimer
from wp.core.mock_settings import MockSettings
from wp.core.mock_timer import MockTimer
from wp.core.task_planner import TaskPlanner
from wp.tests.abstract_test_case import AbstractTestCase


class TestEvents(AbstractTestCase):
    settings: MockSettings
    planner: TaskPlanner

    def setUp(self) -> None:
        logging.getLogger().setLevel(logging.DEBUG)
        self.settings = MockSettings()
        self.planner = TaskPlanner(self.settings, EphemeralConfigStore(self.settings), MockTimer())

    def test_pattern_subscription(self):
        fired = self.record_events(self.planner, 'After*')
        self.planner.add_task('A')
        self.planner.toggle_task(0)
        self.assertEqual([f[0] for f in fired], [events.AfterTaskAdd, events.AfterTaskToggle])

    def test_duplicate_subscription(self):
        fired = list()

        def on_add(event, **kwargs):
            fired.append(event)

        self.planner.on(events.AfterTaskAdd, on_add)
        self.planner.on(events.AfterTaskAdd, on_add)
        self.planner.add_task('A')
        self.assertEqual(fired, [events.AfterTaskAdd])

    def test_unsubscribe(self):
        fired = list()

        def on_any(event, **kwargs):
            fired.append(event)

        self.planner.on('*', on_any)
        self.planner.unsubscribe(on_any)
        self.planner.add_task('A')
        self.assertEqual(fired, [])

    def test_mute(self):
        self.planner.mute()
        self.assertTrue(self.planner.is_muted())
        self.assert_events(self.planner,
                           lambda: self.planner.add_task('A'),
                           [])
        self.planner.unmute()
        self.assert_events(self.planner,
                           lambda: self.planner.add_task('B'),
                           [events.BeforeTaskAdd, events.AfterTaskAdd])

    def test_widget_events(self):
        self.assertIn(events.ConfigurationSaveFailed, self.planner.get_events())
        self.assertNotIn(events.FocusTimerTick, self.planner.get_events())

    def test_all_events(self):
        FocusTimer(self.settings, EphemeralConfigStore(self.settings), MockTimer())
        all_events = events.get_all_events()
        self.assertIn('TaskPlanner.AfterTaskAdd', all_events)
        self.assertIn('FocusTimer.BreakPrompt', all_events)
        self.assertIn('FocusTimer.ConfigurationSaved', all_events)
        self.assertIn('MockSettings.AfterSettingsChanged', all_events)
