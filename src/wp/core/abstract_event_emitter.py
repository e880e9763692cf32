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
import inspect
import logging
import re
from typing import Callable

from wp.core.events import register_event

logger = logging.getLogger(__name__)


def _callback_display(callback) -> str:
    if inspect.ismethod(callback):
        return f'{callback.__self__.__class__.__name__}.{callback.__name__}'
    else:
        return f'Function {getattr(callback, "__name__", repr(callback))}'


class AbstractEventEmitter:
    _muted: bool
    _connections: dict[str, list[Callable]]
    _callback_invoker: Callable

    def __init__(self, allowed_events: list[str], callback_invoker: Callable):
        self._muted = False
        self._callback_invoker = callback_invoker
        self._connections = dict()
        for event in allowed_events:
            self._connections[event] = list[Callable]()
            register_event(event, self)

    # Here event_pattern can contain * characters and other regex syntax.
    def on(self, event_pattern: str, callback: Callable) -> None:
        regex = re.compile(event_pattern.replace('*', '.*'))
        for event, callbacks in self._connections.items():
            if regex.fullmatch(event) and callback not in callbacks:
                if logger.isEnabledFor(logging.DEBUG):
                    logger.debug(f' # {_callback_display(callback)} subscribed to '
                                 f'{self.__class__.__name__}.{event}')
                callbacks.append(callback)

    def unsubscribe(self, callback: Callable) -> None:
        for callbacks in self._connections.values():
            if callback in callbacks:
                callbacks.remove(callback)

    def get_events(self) -> list[str]:
        return list(self._connections.keys())

    def _emit(self, event: str, params: dict[str, any]) -> None:
        if self._muted:
            return
        params['event'] = event
        # Copy, as a handler might unsubscribe itself
        for callback in list(self._connections[event]):
            if logger.isEnabledFor(logging.DEBUG):
                logger.debug(f' ! {_callback_display(callback)}({params})')
            self._callback_invoker(callback, **params)

    def is_muted(self) -> bool:
        return self._muted

    def unmute(self) -> None:
        logger.debug('Unmuting events')
        self._muted = False

    def mute(self) -> None:
        logger.debug('Muting events')
        self._muted = True
