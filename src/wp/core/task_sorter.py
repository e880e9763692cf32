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
from typing import Iterable

from wp.core.task import Task

logger = logging.getLogger(__name__)

SORT_ORDER_ADDED = 'added'
SORT_ORDER_ALPHABETICAL = 'alphabetical'
SORT_ORDER_COMPLETED = 'completed'

SORT_ORDERS = (SORT_ORDER_ADDED, SORT_ORDER_ALPHABETICAL, SORT_ORDER_COMPLETED)

SORT_ORDER_DISPLAY_NAMES = {
    SORT_ORDER_ADDED: 'Sort by: Added',
    SORT_ORDER_ALPHABETICAL: 'Sort by: Alphabetical',
    SORT_ORDER_COMPLETED: 'Sort by: Completed',
}


class DisplayRow:
    """A task as it is displayed, together with its index in the canonical
    (insertion-ordered) task list. Lives for one render / save cycle."""
    task: Task
    original_index: int

    def __init__(self, task: Task, original_index: int):
        self.task = task
        self.original_index = original_index

    def to_dict(self) -> dict:
        d = self.task.to_dict()
        d['originalIndex'] = self.original_index
        return d

    def __eq__(self, other):
        return isinstance(other, DisplayRow) \
            and self.task == other.task \
            and self.original_index == other.original_index

    def __repr__(self):
        return f'DisplayRow({self.task!r}, {self.original_index})'


def sort_tasks(tasks: Iterable[Task], order: str) -> list[DisplayRow]:
    rows = [DisplayRow(task, i) for i, task in enumerate(tasks)]
    # sorted() is stable, so equal titles / equal statuses keep their relative order
    if order == SORT_ORDER_ALPHABETICAL:
        return sorted(rows, key=lambda r: r.task.get_title())
    elif order == SORT_ORDER_COMPLETED:
        return sorted(rows, key=lambda r: r.task.is_completed())
    elif order != SORT_ORDER_ADDED:
        logger.warning(f'Unknown sort order "{order}", showing tasks in the order they were added')
    return rows
