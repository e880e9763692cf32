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


class Debouncer:
    """Defers an action until no new action was requested for the given
    duration. Only the last requested action is executed."""
    _timer: AbstractTimer
    _duration_ms: float
    _pending: Callable[[], None] | None

    def __init__(self, timer: AbstractTimer, duration_ms: float):
        self._timer = timer
        self._duration_ms = duration_ms
        self._pending = None

    def run(self, action: Callable[[], None]) -> None:
        self._timer.cancel()
        self._pending = action
        self._timer.schedule(self._duration_ms, self._handle_timeout, None, True)

    def _handle_timeout(self, params: dict | None, when: datetime.datetime | None = None) -> None:
        action = self._pending
        self._pending = None
        if action is not None:
            logger.debug(f'Debouncer: Executing pending action')
            action()

    def is_pending(self) -> bool:
        return self._pending is not None

    def cancel(self) -> None:
        self._timer.cancel()
        self._pending = None

    def flush(self) -> None:
        if self._pending is not None:
            self._timer.cancel()
            self._handle_timeout(None)
