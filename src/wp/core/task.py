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

import textwrap


class Task:
    # Tasks have no UID, they are identified by their position in the planner
    _title: str
    _completed: bool

    def __init__(self, title: str, completed: bool = False):
        self._title = title
        self._completed = completed

    def get_title(self) -> str:
        return self._title

    def is_completed(self) -> bool:
        return self._completed

    def get_display_name(self) -> str:
        return textwrap.shorten(self._title, width=60, placeholder='...')

    def renamed(self, title: str) -> Task:
        return Task(title, self._completed)

    def toggled(self) -> Task:
        return Task(self._title, not self._completed)

    def to_dict(self) -> dict:
        return {
            'title': self._title,
            'isCompleted': self._completed,
        }

    @staticmethod
    def from_dict(d: dict) -> Task:
        if not isinstance(d, dict):
            raise ValueError(f'Task is not a dictionary: {d!r}')
        title = d.get('title')
        if title is None:
            raise ValueError(f'Task without a title: {d}')
        # Older configurations might not have the completion flag at all,
        # anything but a real boolean counts as not completed
        completed = d.get('isCompleted')
        return Task(str(title), completed if isinstance(completed, bool) else False)

    def __eq__(self, other):
        return isinstance(other, Task) \
            and self._title == other._title \
            and self._completed == other._completed

    def __hash__(self):
        return hash((self._title, self._completed))

    def __str__(self):
        return f' - [{"x" if self._completed else " "}] {self._title}'

    def __repr__(self):
        return f'Task({self._title!r}, {self._completed})'
