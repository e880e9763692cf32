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
import datetime
import logging
from typing import Callable

from wp.core.abstract_timer import AbstractTimer

logger = logging.getLogger(__name__)


class MockTimer(AbstractTimer):
    """Timer which never fires by itself. Tests and headless tools call fire()
    to simulate the passage of time."""
    _name: str
    _callback: Callable[[dict | None, datetime.datetime], None] | None
    _params: dict | None
    _once: bool
    _ms: float | None
    _schedule_count: int

    def __init__(self, name: str = 'mock'):
        self._name = name
        self._callback = None
        self._params = None
        self._once = False
        self._ms = None
        self._schedule_count = 0

    def schedule(self,
                 ms: float,
                 callback: Callable[[dict | None, datetime.datetime], None],
                 params: dict | None,
                 once: bool = False) -> None:
        logger.debug(f'MockTimer {self._name}: scheduled every {ms}ms (once = {once})')
        self._callback = callback
        self._params = params
        self._once = once
        self._ms = ms
        self._schedule_count += 1

    def cancel(self) -> None:
        self._callback = None
        self._params = None
        self._ms = None

    def is_active(self) -> bool:
        return self._callback is not None

    def get_interval(self) -> float | None:
        return self._ms

    def get_schedule_count(self) -> int:
        return self._schedule_count

    def fire(self, times: int = 1) -> int:
        fired = 0
        for _ in range(times):
            if self._callback is None:
                break
            callback = self._callback
            params = self._params
            if self._once:
                self.cancel()
            callback(params, datetime.datetime.now(datetime.timezone.utc))
            fired += 1
        return fired
