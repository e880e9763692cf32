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

logger = logging.getLogger(__name__)

STATE_IDLE = 'idle'
STATE_RUNNING = 'running'
STATE_BREAK_PROMPT = 'break_prompt'
STATE_ON_BREAK = 'on_break'
STATE_COMPLETED = 'completed'

NO_BREAK_MARKED = -1


def format_time(seconds: int) -> str:
    hours = str(seconds // 3600).zfill(2)
    minutes = str((seconds % 3600) // 60).zfill(2)
    secs = str(seconds % 60).zfill(2)
    return f'{hours}:{minutes}:{secs}'


class FocusSession:
    # State is one of the following: idle, running, break_prompt, on_break, completed
    _state: str
    _task_name: str
    _total_duration: int
    _remaining_duration: int
    _break_interval: int
    _break_interval_enabled: bool
    _last_break_minute: int
    _break_remaining: int
    _break_timed: bool

    def __init__(self):
        self.reset()

    def reset(self) -> None:
        self._state = STATE_IDLE
        self._task_name = ''
        self._total_duration = 0
        self._remaining_duration = 0
        self._break_interval = 1
        self._break_interval_enabled = False
        self._last_break_minute = NO_BREAK_MARKED
        self._break_remaining = 0
        self._break_timed = False

    def begin(self,
              task_name: str,
              total_duration: int,
              break_interval: int,
              break_interval_enabled: bool) -> None:
        # Whatever the user changes in the timer fields later, it only
        # affects the next session
        self._state = STATE_RUNNING
        self._task_name = task_name
        self._total_duration = total_duration
        self._remaining_duration = total_duration
        self._break_interval = max(1, break_interval)
        self._break_interval_enabled = break_interval_enabled
        self._last_break_minute = NO_BREAK_MARKED
        self._break_remaining = 0
        self._break_timed = False

    def get_state(self) -> str:
        return self._state

    def set_state(self, state: str) -> None:
        logger.debug(f'FocusSession: {self._state} -> {state}')
        self._state = state

    def is_idling(self) -> bool:
        return self._state == STATE_IDLE

    def is_running(self) -> bool:
        return self._state == STATE_RUNNING

    def is_break(self) -> bool:
        return self._state == STATE_ON_BREAK

    def is_break_prompt(self) -> bool:
        return self._state == STATE_BREAK_PROMPT

    def is_completed(self) -> bool:
        return self._state == STATE_COMPLETED

    def is_active(self) -> bool:
        return self._state in (STATE_RUNNING, STATE_BREAK_PROMPT, STATE_ON_BREAK)

    def get_task_name(self) -> str:
        return self._task_name

    def get_total_duration(self) -> int:
        return self._total_duration

    def get_remaining_duration(self) -> int:
        return self._remaining_duration

    def get_break_interval(self) -> int:
        return self._break_interval

    def is_break_interval_enabled(self) -> bool:
        return self._break_interval_enabled

    def get_last_break_minute(self) -> int:
        return self._last_break_minute

    def get_break_remaining(self) -> int:
        return self._break_remaining

    def is_break_timed(self) -> bool:
        return self._break_timed

    def get_elapsed_minutes(self) -> int:
        return (self._total_duration - self._remaining_duration) // 60

    def countdown(self) -> None:
        if self._remaining_duration > 0:
            self._remaining_duration -= 1

    def is_break_due(self) -> bool:
        if not self._break_interval_enabled or self.is_break():
            return False
        elapsed = self.get_elapsed_minutes()
        return elapsed > 0 \
            and elapsed % self._break_interval == 0 \
            and elapsed != self._last_break_minute

    def mark_break(self) -> int:
        self._last_break_minute = self.get_elapsed_minutes()
        return self._last_break_minute

    # None starts an untimed break, which lasts until the user continues
    def begin_break(self, break_duration: int | None) -> None:
        self._state = STATE_ON_BREAK
        self._break_timed = break_duration is not None
        self._break_remaining = break_duration if self._break_timed else 0

    def break_countdown(self) -> None:
        if self._break_remaining > 0:
            self._break_remaining -= 1

    def format_remaining_duration(self) -> str:
        return format_time(self._remaining_duration)

    def format_break_remaining(self) -> str:
        return format_time(self._break_remaining)

    def to_dict(self) -> dict:
        return {
            'state': self._state,
            'taskName': self._task_name,
            'totalDurationSeconds': self._total_duration,
            'remainingSeconds': self._remaining_duration,
            'isRunning': self.is_running(),
            'isBreak': self.is_break(),
            'lastBreakMinuteMarked': self._last_break_minute,
            'breakRemainingSeconds': self._break_remaining,
            'isBreakTimed': self._break_timed,
        }

    def __str__(self) -> str:
        return f'Focus session "{self._task_name}". ' \
               f'State "{self._state}", ' \
               f'{self.format_remaining_duration()} of {format_time(self._total_duration)} remaining'
