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

from wp.core.debouncer import Debouncer
from wp.core.mock_timer import MockTimer


class TestDebouncer(TestCase):
    timer: MockTimer
    debouncer: Debouncer
    calls: list[str]

    def setUp(self) -> None:
        logging.getLogger().setLevel(logging.DEBUG)
        self.timer = MockTimer('Debounce')
        self.debouncer = Debouncer(self.timer, 500)
        self.calls = list()

    def test_only_last_action_runs(self):
        for name in ('first', 'second', 'third'):
            self.debouncer.run(lambda n=name: self.calls.append(n))
        self.assertEqual(self.calls, [])
        self.assertTrue(self.debouncer.is_pending())
        self.assertEqual(self.timer.get_interval(), 500)
        self.assertEqual(self.timer.get_schedule_count(), 3)

        self.assertEqual(self.timer.fire(5), 1)
        self.assertEqual(self.calls, ['third'])
        self.assertFalse(self.debouncer.is_pending())

    def test_cancel(self):
        self.debouncer.run(lambda: self.calls.append('x'))
        self.debouncer.cancel()
        self.assertFalse(self.debouncer.is_pending())
        self.assertEqual(self.timer.fire(), 0)
        self.assertEqual(self.calls, [])

    def test_flush(self):
        self.debouncer.run(lambda: self.calls.append('x'))
        self.debouncer.flush()
        self.assertEqual(self.calls, ['x'])
        self.assertFalse(self.timer.is_active())
        self.debouncer.flush()
        self.assertEqual(self.calls, ['x'])
