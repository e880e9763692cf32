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

import logging

from wp.core import events
from wp.core.abstract_config_store import AbstractConfigStore
from wp.core.abstract_settings import AbstractSettings
from wp.core.abstract_timer import AbstractTimer
from wp.core.debouncer import Debouncer
from wp.core.platform_widget import PlatformWidget
from wp.core.task import Task
from wp.core.task_sorter import sort_tasks, DisplayRow, SORT_ORDERS, SORT_ORDER_ADDED

logger = logging.getLogger(__name__)


class TaskPlanner(PlatformWidget):
    """Insertion-ordered list of tasks, displayed in one of the SORT_ORDERS.

    Tasks are addressed by their index in the insertion-ordered list. Display
    rows carry this index, so that an action on a sorted row (or the *_at()
    shortcuts) always modifies the right task. Each change is persisted with
    a debounced save: a burst of changes results in a single write."""
    _tasks: list[Task]
    _sort_order: str
    _debouncer: Debouncer

    def __init__(self,
                 settings: AbstractSettings,
                 store: AbstractConfigStore,
                 save_timer: AbstractTimer):
        super().__init__([
            events.BeforeTaskAdd,
            events.AfterTaskAdd,
            events.BeforeTaskEdit,
            events.AfterTaskEdit,
            events.BeforeTaskDelete,
            events.AfterTaskDelete,
            events.BeforeTaskToggle,
            events.AfterTaskToggle,
            events.BeforeSortOrderChange,
            events.AfterSortOrderChange,
        ], settings, store)
        self._tasks = list()
        self._sort_order = SORT_ORDER_ADDED
        self._debouncer = Debouncer(save_timer, settings.get_save_debounce())

    def get_uid(self) -> str:
        return 'f5e9d2a1-6b7c-4d3e-9f1a-2c8b3d4e5f6a'

    def get_name(self) -> str:
        return 'Task Planner'

    def get_description(self) -> str:
        return 'A widget to plan and manage your tasks!\nCreate, edit, and track your tasks with ease.'

    def get_developer_id(self) -> str:
        return 'f58f9822-425c-4430-9da6-42703fc81023'

    def _get_defaults(self) -> dict[str, any]:
        return {
            'tasks': [],
            'sortOrder': SORT_ORDER_ADDED,
        }

    def _normalize_config(self, raw: dict[str, any]) -> dict[str, any]:
        defaults = self.get_default_config()
        tasks = raw.get('tasks')
        if tasks is None:
            tasks = defaults['tasks']
        sort_order = raw.get('sortOrder') or defaults['sortOrder']
        if sort_order not in SORT_ORDERS:
            logger.warning(f'Ignoring unknown sort order "{sort_order}"')
            sort_order = defaults['sortOrder']
        if not isinstance(tasks, list):
            raise ValueError(f'Stored tasks are not a list: {tasks!r}')
        # A single broken entry must not cost the user the rest of the list,
        # which would be overwritten by the next save
        valid = list()
        for i, t in enumerate(tasks):
            try:
                valid.append(Task.from_dict(t).to_dict())
            except ValueError as e:
                logger.warning(f'Skipping stored task #{i}: {e}')
        return {
            'tasks': valid,
            'sortOrder': sort_order,
        }

    def to_config(self) -> dict[str, any]:
        return {
            'tasks': [t.to_dict() for t in self._tasks],
            'sortOrder': self._sort_order,
        }

    def initialize(self) -> None:
        config = self.load_configuration()
        self._tasks = [Task.from_dict(t) for t in config['tasks']]
        self._sort_order = config['sortOrder']
        logger.debug(f'TaskPlanner: Initialized with {len(self._tasks)} tasks, sorted by {self._sort_order}')

    def close(self) -> None:
        # Whatever is still waiting for the debounce timeout gets persisted now
        self._debouncer.flush()

    def get_tasks(self) -> list[Task]:
        return list(self._tasks)

    def get_sort_order(self) -> str:
        return self._sort_order

    def get_display_rows(self) -> list[DisplayRow]:
        return sort_tasks(self._tasks, self._sort_order)

    def is_save_pending(self) -> bool:
        return self._debouncer.is_pending()

    def _schedule_save(self) -> None:
        self._debouncer.run(self._save_configuration)

    def _check_index(self, original_index: int) -> None:
        if original_index < 0 or original_index >= len(self._tasks):
            raise IndexError(f'No task #{original_index}, there are {len(self._tasks)} tasks')

    def add_task(self, title: str) -> Task | None:
        if not title or not title.strip():
            logger.debug('TaskPlanner: Ignoring a task with empty title')
            return None
        task = Task(title, False)
        params = {
            'task': task,
            'original_index': len(self._tasks),
        }
        self._emit(events.BeforeTaskAdd, params)
        self._tasks.append(task)
        self._emit(events.AfterTaskAdd, params)
        self._schedule_save()
        return task

    def edit_task(self, original_index: int, title: str) -> Task | None:
        self._check_index(original_index)
        if not title or not title.strip():
            logger.debug(f'TaskPlanner: Ignoring empty title for task #{original_index}')
            return None
        old_task = self._tasks[original_index]
        task = old_task.renamed(title)
        params = {
            'task': task,
            'old_task': old_task,
            'original_index': original_index,
        }
        self._emit(events.BeforeTaskEdit, params)
        self._tasks[original_index] = task
        self._emit(events.AfterTaskEdit, params)
        self._schedule_save()
        return task

    def delete_task(self, original_index: int) -> Task:
        self._check_index(original_index)
        params = {
            'task': self._tasks[original_index],
            'original_index': original_index,
        }
        self._emit(events.BeforeTaskDelete, params)
        task = self._tasks.pop(original_index)
        self._emit(events.AfterTaskDelete, params)
        self._schedule_save()
        return task

    def toggle_task(self, original_index: int) -> Task:
        self._check_index(original_index)
        old_task = self._tasks[original_index]
        task = old_task.toggled()
        params = {
            'task': task,
            'old_task': old_task,
            'original_index': original_index,
        }
        self._emit(events.BeforeTaskToggle, params)
        self._tasks[original_index] = task
        self._emit(events.AfterTaskToggle, params)
        self._schedule_save()
        return task

    def set_sort_order(self, order: str) -> None:
        if order not in SORT_ORDERS:
            raise ValueError(f'Invalid sort order: {order}')
        params = {
            'old_order': self._sort_order,
            'new_order': order,
        }
        self._emit(events.BeforeSortOrderChange, params)
        self._sort_order = order
        self._emit(events.AfterSortOrderChange, params)
        self._schedule_save()

    def _original_index_at(self, position: int) -> int:
        rows = self.get_display_rows()
        if position < 0 or position >= len(rows):
            raise IndexError(f'No row #{position}, there are {len(rows)} rows')
        return rows[position].original_index

    def edit_task_at(self, position: int, title: str) -> Task | None:
        return self.edit_task(self._original_index_at(position), title)

    def delete_task_at(self, position: int) -> Task:
        return self.delete_task(self._original_index_at(position))

    def toggle_task_at(self, position: int) -> Task:
        return self.toggle_task(self._original_index_at(position))

    def __str__(self):
        return f'Task planner ({self._sort_order}):\n' + '\n'.join([str(r.task) for r in self.get_display_rows()])
