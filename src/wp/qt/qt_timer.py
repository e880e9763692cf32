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

from PySide6.QtCore import QTimer

from wp.core.abstract_timer import AbstractTimer

logger = logging.getLogger(__name__)


class QtTimer(AbstractTimer):
    _timer: QTimer
    _callback: Callable[[dict | None, datetime.datetime], None] | None
    _params: dict | None
    _once: bool
    _name: str

    def __init__(self, name: str):
        self._name = name
        logger.debug(f'Creating timer {name}')
        self._callback = None
        self._params = None
        self._once = False
        self._timer = QTimer()
        self._timer.setObjectName(name)
        self._timer.timeout.connect(lambda: self._call())

    def _call(self) -> None:
        callback = self._callback
        if callback is None:
            return
        if self._once:
            self.cancel()
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(f'QtTimer - callback, {self._name}')
        callback(self._params, datetime.datetime.now(datetime.timezone.utc))

    def schedule(self,
                 ms: float,
                 callback: Callable[[dict | None, datetime.datetime], None],
                 params: dict | None,
                 once: bool = False) -> None:
        # QTimer.start() restarts an active timer, so there is never more than one schedule
        self._callback = callback
        self._params = params
        self._once = once
        self._timer.setSingleShot(once)
        self._timer.start(int(ms))

    def cancel(self) -> None:
        self._timer.stop()
        self._callback = None
        self._params = None

    def is_active(self) -> bool:
        return self._timer.isActive()
