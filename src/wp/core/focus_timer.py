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

from wp.core import events
from wp.core.abstract_config_store import AbstractConfigStore
from wp.core.abstract_settings import AbstractSettings
from wp.core.abstract_timer import AbstractTimer
from wp.core.focus_session import FocusSession, STATE_RUNNING, STATE_BREAK_PROMPT, STATE_COMPLETED
from wp.core.platform_widget import PlatformWidget

logger = logging.getLogger(__name__)

KEEP_WORKING = 'keep-working'
TAKE_BREAK = 'take-break'


class FocusTimerError(Exception):
    pass


class FocusTimer(PlatformWidget):
    """Countdown for a focus session, with break prompts every N minutes.

    idle -> running -> (break_prompt -> [on_break ->] running)* -> completed -> idle

    The user can also go from running to on_break with take_break(). Such a
    break has no countdown and lasts until end_break() or end_session().

    The break prompt is a state, not a dialog: whoever displays it has to
    call resolve_break_prompt() with the user's choice. Both the work and the
    break countdowns are driven by the same tick timer, so they can never
    run at the same time."""
    _task_name: str
    _hours: int
    _minutes: int
    _seconds: int
    _break_interval: int
    _break_interval_enabled: bool
    _session: FocusSession
    _tick_timer: AbstractTimer

    def __init__(self,
                 settings: AbstractSettings,
                 store: AbstractConfigStore,
                 tick_timer: AbstractTimer):
        super().__init__([
            events.FocusSessionStart,
            events.FocusTimerTick,
            events.BreakPrompt,
            events.BreakStart,
            events.BreakTick,
            events.BreakEnd,
            events.FocusSessionComplete,
            events.FocusSessionEnd,
            events.TimerConfigChange,
        ], settings, store)
        self._tick_timer = tick_timer
        self._session = FocusSession()
        self._apply_config(self.get_default_config())

    def get_uid(self) -> str:
        return '018c3453-3862-7c38-96e7-6cf16e33d535'

    def get_name(self) -> str:
        return 'Time Tracker'

    def get_description(self) -> str:
        return 'A timer to track your focus sessions!\n' \
               'It aims to help you focus on any task you are working on, such as study, writing, or coding.'

    def get_developer_id(self) -> str:
        return '11857a68-bc9a-41b1-9a54-e54b84af0a29'

    def _get_defaults(self) -> dict[str, any]:
        return {
            'taskName': '',
            'hours': 1,
            'minutes': 20,
            'seconds': 0,
            'breakInterval': 20,
            'breakIntervalEnabled': True,
        }

    def _normalize_config(self, raw: dict[str, any]) -> dict[str, any]:
        config = self.get_default_config()
        for key in config:
            if raw.get(key) is not None:
                config[key] = raw[key]
        config['taskName'] = str(config['taskName'])
        for key in ('hours', 'minutes', 'seconds'):
            config[key] = max(0, int(config[key]))
        config['breakInterval'] = max(1, int(config['breakInterval']))
        if not isinstance(config['breakIntervalEnabled'], bool):
            logger.warning(f'Ignoring non-boolean breakIntervalEnabled {config["breakIntervalEnabled"]!r}')
            config['breakIntervalEnabled'] = self._get_defaults()['breakIntervalEnabled']
        return config

    def _apply_config(self, config: dict[str, any]) -> None:
        self._task_name = config['taskName']
        self._hours = config['hours']
        self._minutes = config['minutes']
        self._seconds = config['seconds']
        self._break_interval = config['breakInterval']
        self._break_interval_enabled = config['breakIntervalEnabled']

    def to_config(self) -> dict[str, any]:
        return {
            'taskName': self._task_name,
            'hours': self._hours,
            'minutes': self._minutes,
            'seconds': self._seconds,
            'breakInterval': self._break_interval,
            'breakIntervalEnabled': self._break_interval_enabled,
        }

    def initialize(self) -> None:
        self._apply_config(self.load_configuration())
        logger.debug(f'FocusTimer: Initialized with {self.to_config()}')

    def close(self) -> None:
        self._tick_timer.cancel()

    # Editable fields. Each change is saved right away.

    def _config_changed(self) -> None:
        self._emit(events.TimerConfigChange, {
            'configuration': self.to_config(),
        })
        self._save_configuration()

    def get_task_name(self) -> str:
        return self._task_name

    def set_task_name(self, task_name: str) -> None:
        self._task_name = task_name
        self._config_changed()

    def get_duration(self) -> tuple[int, int, int]:
        return self._hours, self._minutes, self._seconds

    def get_total_duration(self) -> int:
        return self._hours * 3600 + self._minutes * 60 + self._seconds

    def set_duration(self, hours: int, minutes: int, seconds: int) -> None:
        if hours < 0 or minutes < 0 or seconds < 0:
            raise ValueError(f'Invalid duration {hours}:{minutes}:{seconds}')
        self._hours = hours
        self._minutes = minutes
        self._seconds = seconds
        self._config_changed()

    def get_break_interval(self) -> int:
        return self._break_interval

    def set_break_interval(self, minutes: int) -> None:
        if minutes <= 0:
            logger.debug(f'FocusTimer: Break interval {minutes} adjusted to 1 minute')
            minutes = 1
        self._break_interval = minutes
        self._config_changed()

    def is_break_interval_enabled(self) -> bool:
        return self._break_interval_enabled

    def set_break_interval_enabled(self, enabled: bool) -> None:
        self._break_interval_enabled = enabled
        self._config_changed()

    # Session state machine

    def get_session(self) -> FocusSession:
        return self._session

    def get_state(self) -> str:
        return self._session.get_state()

    def format_remaining(self) -> str:
        if self._session.is_break() and self._session.is_break_timed():
            return self._session.format_break_remaining()
        return self._session.format_remaining_duration()

    def _schedule_tick(self, handler: Callable[[dict | None, datetime.datetime], None]) -> None:
        # A new countdown always replaces the previous one
        self._tick_timer.cancel()
        self._tick_timer.schedule(self._settings.get_tick_interval(), handler, None)

    def _handle_tick(self, params: dict | None, when: datetime.datetime | None = None) -> None:
        self.tick()

    def _handle_break_tick(self, params: dict | None, when: datetime.datetime | None = None) -> None:
        self.break_tick()

    def start(self) -> None:
        if not self._session.is_idling():
            raise FocusTimerError(f'Cannot start a session while in state {self._session.get_state()}')
        self._session.begin(self._task_name,
                            self.get_total_duration(),
                            self._break_interval,
                            self._break_interval_enabled)
        logger.debug(f'FocusTimer: Started {self._session}')
        self._emit(events.FocusSessionStart, {
            'session': self._session,
        })
        self._schedule_tick(self._handle_tick)

    def tick(self) -> None:
        session = self._session
        if not session.is_running():
            logger.debug(f'FocusTimer: Ignoring tick in state {session.get_state()}')
            return
        session.countdown()
        self._emit(events.FocusTimerTick, {
            'session': session,
            'remaining': session.get_remaining_duration(),
        })
        if session.get_remaining_duration() == 0:
            self._tick_timer.cancel()
            session.set_state(STATE_COMPLETED)
            self._emit(events.FocusSessionComplete, {
                'session': session,
            })
        elif session.is_break_due():
            elapsed_minutes = session.mark_break()
            self._tick_timer.cancel()
            session.set_state(STATE_BREAK_PROMPT)
            self._emit(events.BreakPrompt, {
                'session': session,
                'elapsed_minutes': elapsed_minutes,
            })

    def resolve_break_prompt(self, choice: str) -> None:
        if choice not in (KEEP_WORKING, TAKE_BREAK):
            raise ValueError(f'Invalid break prompt choice: {choice}')
        if not self._session.is_break_prompt():
            raise FocusTimerError(f'No break prompt to resolve in state {self._session.get_state()}')
        logger.debug(f'FocusTimer: Break prompt resolved with "{choice}"')
        if choice == KEEP_WORKING:
            self._resume()
        else:
            self._start_break()

    def _resume(self) -> None:
        self._session.set_state(STATE_RUNNING)
        self._schedule_tick(self._handle_tick)

    def _start_break(self) -> None:
        self._session.begin_break(self._settings.get_break_duration())
        self._emit(events.BreakStart, {
            'session': self._session,
            'duration': self._session.get_break_remaining(),
        })
        self._schedule_tick(self._handle_break_tick)

    def take_break(self) -> None:
        if not self._session.is_running():
            raise FocusTimerError(f'Cannot take a break in state {self._session.get_state()}')
        self._tick_timer.cancel()
        self._session.begin_break(None)
        logger.debug('FocusTimer: Taking a break until the user continues')
        self._emit(events.BreakStart, {
            'session': self._session,
            'duration': None,
        })

    def break_tick(self) -> None:
        session = self._session
        if not session.is_break() or not session.is_break_timed():
            logger.debug(f'FocusTimer: Ignoring break tick in state {session.get_state()}')
            return
        session.break_countdown()
        self._emit(events.BreakTick, {
            'session': session,
            'remaining': session.get_break_remaining(),
        })
        if session.get_break_remaining() == 0:
            self._finish_break(False)

    # "Continue" action, the work countdown resumes where it stopped
    def end_break(self) -> None:
        if not self._session.is_break():
            raise FocusTimerError(f'No break to end in state {self._session.get_state()}')
        self._finish_break(True)

    def _finish_break(self, early: bool) -> None:
        self._tick_timer.cancel()
        self._emit(events.BreakEnd, {
            'session': self._session,
            'early': early,
        })
        self._resume()

    def end_session(self) -> None:
        if self._session.is_idling():
            logger.debug('FocusTimer: No session to end')
            return
        self._tick_timer.cancel()
        state = self._session.get_state()
        self._session.reset()
        self._emit(events.FocusSessionEnd, {
            'session': self._session,
            'previous_state': state,
        })

    def acknowledge_completion(self) -> None:
        if not self._session.is_completed():
            raise FocusTimerError(f'Session is not completed, it is {self._session.get_state()}')
        self.end_session()
