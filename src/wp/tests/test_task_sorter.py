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
import random
from unittest import TestCase

from wp.core.task import Task
from wp.core.task_sorter import sort_tasks, DisplayRow, SORT_ORDERS


def _random_tasks(rnd: random.Random, n: int) -> list[Task]:
    # Few distinct titles, so that there are plenty of ties
    titles = ['alpha', 'Beta', 'beta', 'gamma', 'Alpha', '']
    return [Task(rnd.choice(titles), rnd.random() < 0.5) for _ in range(n)]


class TestTaskSorter(TestCase):
    def setUp(self) -> None:
        logging.getLogger().setLevel(logging.DEBUG)

    def test_added_is_identity(self):
        tasks = [Task('C'), Task('A', True), Task('B')]
        rows = sort_tasks(tasks, 'added')
        self.assertEqual([r.task for r in rows], tasks)
        self.assertEqual([r.original_index for r in rows], [0, 1, 2])

    def test_empty(self):
        for order in SORT_ORDERS:
            self.assertEqual(sort_tasks([], order), [])

    def test_alphabetical(self):
        tasks = [Task('b'), Task('a'), Task('b', True), Task('A')]
        rows = sort_tasks(tasks, 'alphabetical')
        # Case-sensitive: uppercase letters go first
        self.assertEqual(rows, [
            DisplayRow(Task('A'), 3),
            DisplayRow(Task('a'), 1),
            DisplayRow(Task('b'), 0),
            DisplayRow(Task('b', True), 2),
        ])

    def test_completed(self):
        tasks = [Task('A', False), Task('B', True), Task('C', False)]
        rows = sort_tasks(tasks, 'completed')
        self.assertEqual(rows, [
            DisplayRow(Task('A', False), 0),
            DisplayRow(Task('C', False), 2),
            DisplayRow(Task('B', True), 1),
        ])

    def test_completed_missing_flag(self):
        tasks = [Task.from_dict({'title': 'Done', 'isCompleted': True}),
                 Task.from_dict({'title': 'Legacy'}),
                 Task.from_dict({'title': 'Null', 'isCompleted': None})]
        rows = sort_tasks(tasks, 'completed')
        self.assertEqual([r.original_index for r in rows], [1, 2, 0])

    def test_input_not_mutated(self):
        tasks = [Task('z'), Task('y', True), Task('x')]
        copy = list(tasks)
        for order in SORT_ORDERS:
            rows = sort_tasks(tasks, order)
            self.assertEqual(len(rows), 3)
            self.assertEqual(tasks, copy)

    def test_unknown_order(self):
        tasks = [Task('b'), Task('a')]
        rows = sort_tasks(tasks, 'priority')
        self.assertEqual([r.original_index for r in rows], [0, 1])

    def test_random_lists(self):
        rnd = random.Random(42)
        for n in range(0, 40):
            tasks = _random_tasks(rnd, n)

            rows = sort_tasks(tasks, 'alphabetical')
            for a, b in zip(rows, rows[1:]):
                self.assertLessEqual(a.task.get_title(), b.task.get_title())
                if a.task.get_title() == b.task.get_title():
                    self.assertLess(a.original_index, b.original_index)

            rows = sort_tasks(tasks, 'completed')
            statuses = [r.task.is_completed() for r in rows]
            self.assertEqual(statuses, sorted(statuses))
            for a, b in zip(rows, rows[1:]):
                if a.task.is_completed() == b.task.is_completed():
                    self.assertLess(a.original_index, b.original_index)

            for order in SORT_ORDERS:
                rows = sort_tasks(tasks, order)
                # Every row points back to the task which produced it
                self.assertEqual(sorted(r.original_index for r in rows), list(range(n)))
                for r in rows:
                    self.assertIs(tasks[r.original_index], r.task)

    def test_display_row_to_dict(self):
        row = DisplayRow(Task('Write report', True), 4)
        self.assertEqual(row.to_dict(), {
            'title': 'Write report',
            'isCompleted': True,
            'originalIndex': 4,
        })
