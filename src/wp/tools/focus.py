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
import signal
import sys
from argparse import ArgumentParser, Namespace

from PySide6.QtCore import QCoreApplication, QSocketNotifier

from wp.core import events
from wp.core.abstract_settings import AbstractSettings
from wp.core.config_store_factory import create_config_store
from wp.core.focus_session import FocusSession
from wp.core.focus_timer import FocusTimer, KEEP_WORKING, TAKE_BREAK
# Registers the "qt" configuration store type
import wp.qt.qt_config_store  # noqa: F401
from wp.qt.qt_settings import QtSettings
from wp.qt.qt_timer import QtTimer
from wp.tools.common import create_settings, initialize_logger

logger = logging.getLogger(__name__)


class ConsoleFocus:
    """Runs one focus session in the terminal. Break prompts and the b/c/q
    commands are read from stdin; the countdown is printed in place."""
    _app: QCoreApplication
    _timer: FocusTimer
    _stdin: QSocketNotifier

    def __init__(self, app: QCoreApplication, focus_timer: FocusTimer):
        self._app = app
        self._timer = focus_timer
        self._stdin = QSocketNotifier(sys.stdin.fileno(), QSocketNotifier.Type.Read)
        self._stdin.activated.connect(lambda: self._on_command())
        focus_timer.on(events.FocusTimerTick, self._on_tick)
        focus_timer.on(events.BreakTick, self._on_tick)
        focus_timer.on(events.BreakPrompt, self._on_break_prompt)
        focus_timer.on(events.BreakStart, self._on_break_start)
        focus_timer.on(events.BreakEnd, self._on_break_end)
        focus_timer.on(events.FocusSessionComplete, self._on_complete)
        focus_timer.on(events.FocusSessionEnd, self._on_end)
        focus_timer.on(events.ConfigurationSaveFailed, self._on_save_failed)

    def _print(self, text: str) -> None:
        print(f'\r{text}'.ljust(60), end='', flush=True)

    def _on_tick(self, event: str, session: FocusSession, remaining: int, **kwargs) -> None:
        prefix = 'Break' if session.is_break() else (session.get_task_name() or 'Focus')
        self._print(f'{prefix}: {self._timer.format_remaining()}')

    def _on_command(self) -> None:
        line = sys.stdin.readline()
        if not line:
            # stdin is closed, only Ctrl+C and the countdown remain
            self._stdin.setEnabled(False)
            return
        command = line.strip().lower()
        if self._timer.get_session().is_break_prompt():
            self._timer.resolve_break_prompt(TAKE_BREAK if command in ('y', 'yes') else KEEP_WORKING)
        elif command == 'q':
            self._timer.end_session()
        elif command == 'b' and self._timer.get_session().is_running():
            self._timer.take_break()
        elif command == 'c' and self._timer.get_session().is_break():
            self._timer.end_break()
        else:
            logger.debug(f'Ignoring command "{command}" in state {self._timer.get_state()}')

    def _on_break_prompt(self, event: str, elapsed_minutes: int, **kwargs) -> None:
        print(f'\nYou have been focused for {elapsed_minutes} minutes.')
        print('Take a break? [y/N] ', end='', flush=True)

    def _on_break_start(self, event: str, duration: int | None, **kwargs) -> None:
        if duration is None:
            print('\nTaking a break. Enter c to continue.')
        else:
            print(f'Taking a break for {duration // 60} minutes. Enter c to get back to work earlier.')

    def _on_break_end(self, event: str, **kwargs) -> None:
        print('\nBack to work!')

    def _on_complete(self, event: str, **kwargs) -> None:
        print('\nYour focus session has ended. Well done!')
        self._timer.acknowledge_completion()

    def _on_end(self, event: str, **kwargs) -> None:
        self._app.quit()

    def _on_save_failed(self, event: str, message: str, **kwargs) -> None:
        print(f'\n{message}', file=sys.stderr)

    def start(self) -> None:
        print(f'Starting "{self._timer.get_task_name()}" for {self._timer.get_total_duration() // 60} minutes. '
              f'Enter b to take a break, q or Ctrl+C to end the session.')
        self._timer.start()


def load_settings(args: Namespace) -> AbstractSettings:
    if not args.qt_settings:
        return create_settings(args)
    settings = QtSettings()
    overrides = dict()
    if args.file is not None:
        overrides['FileConfigStore.filename'] = args.file
    if args.user is not None:
        overrides['ConfigStore.user_id'] = args.user
    if args.log is not None:
        overrides['Logger.filename'] = args.log
    if overrides:
        settings.set(overrides)
    logger.debug(f'Using Qt settings from {settings.location()}')
    return settings


def main() -> None:
    parser = ArgumentParser(description="Widgets Pack console focus timer")
    parser.add_argument("--debug", action='store_true', help="Debug output for troubleshooting")
    parser.add_argument("--file", help="Configuration file (JSON)")
    parser.add_argument("--user", help="User ID")
    parser.add_argument("--log", help="Log file")
    parser.add_argument("--qt-settings", action='store_true', help="Read and persist settings with Qt")
    parser.add_argument("--task-name", help="Name of the task to focus on")
    parser.add_argument("--duration", nargs=3, type=int, metavar=('H', 'M', 'S'), help="Session duration")
    parser.add_argument("--break-interval", type=int, metavar='MINUTES', help="Suggest a break every N minutes")
    args: Namespace = parser.parse_args()

    settings = load_settings(args)
    initialize_logger(settings, args.debug)

    app = QCoreApplication(sys.argv)
    focus_timer = FocusTimer(settings, create_config_store(settings), QtTimer('Focus tick'))
    focus_timer.initialize()
    if args.task_name is not None:
        focus_timer.set_task_name(args.task_name)
    if args.duration:
        focus_timer.set_duration(*args.duration)
    if args.break_interval is not None:
        focus_timer.set_break_interval(args.break_interval)

    console = ConsoleFocus(app, focus_timer)
    # Python signal handlers run between the timer callbacks
    signal.signal(signal.SIGINT, lambda *_: focus_timer.end_session())
    console.start()
    sys.exit(app.exec())


if __name__ == '__main__':
    main()
