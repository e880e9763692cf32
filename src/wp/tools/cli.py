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
import json
import logging
import sys
from argparse import ArgumentParser, Namespace

from wp.core import events
from wp.core.config_store_factory import create_config_store
from wp.core.focus_timer import FocusTimer
from wp.core.mock_timer import MockTimer
from wp.core.platform_widget import PlatformWidget
from wp.core.task_planner import TaskPlanner
from wp.core.task_sorter import SORT_ORDERS
from wp.tools.common import create_settings, initialize_logger

logger = logging.getLogger(__name__)

save_failed = False


def dump(obj: object) -> None:
    print(json.dumps(obj, indent=2, sort_keys=True, default=str))


def _on_save_failed(event: str, widget: PlatformWidget, message: str, **kwargs) -> None:
    global save_failed
    save_failed = True
    print(message, file=sys.stderr)


def list_tasks(planner: TaskPlanner) -> None:
    dump({
        'sortOrder': planner.get_sort_order(),
        'rows': [r.to_dict() for r in planner.get_display_rows()],
    })


def tasks(args: Namespace) -> None:
    settings = create_settings(args)
    # Nothing fires this timer, the pending save is flushed in close()
    planner = TaskPlanner(settings, create_config_store(settings), MockTimer('Task planner save'))
    planner.on(events.ConfigurationSaveFailed, _on_save_failed)
    planner.initialize()
    # Display positions are 1-based, as shown to the user
    if args.add is not None:
        planner.add_task(args.add)
    elif args.edit is not None:
        planner.edit_task_at(int(args.edit[0]) - 1, args.edit[1])
    elif args.delete is not None:
        planner.delete_task_at(args.delete - 1)
    elif args.toggle is not None:
        planner.toggle_task_at(args.toggle - 1)
    elif args.sort is not None:
        planner.set_sort_order(args.sort)
    planner.close()
    list_tasks(planner)


def timer(args: Namespace) -> None:
    settings = create_settings(args)
    focus_timer = FocusTimer(settings, create_config_store(settings), MockTimer('Focus timer tick'))
    focus_timer.on(events.ConfigurationSaveFailed, _on_save_failed)
    focus_timer.initialize()
    if args.task_name is not None:
        focus_timer.set_task_name(args.task_name)
    if args.duration:
        focus_timer.set_duration(*args.duration)
    if args.break_interval is not None:
        focus_timer.set_break_interval(args.break_interval)
    if args.break_enabled is not None:
        focus_timer.set_break_interval_enabled(args.break_enabled.lower() in ('true', 'yes', '1', 'on'))
    dump(focus_timer.to_config())


def events_list(args: Namespace) -> None:
    settings = create_settings(args)
    store = create_config_store(settings)
    TaskPlanner(settings, store, MockTimer())
    FocusTimer(settings, store, MockTimer())
    dump(sorted(events.get_all_events()))


def main() -> None:
    parser = ArgumentParser(description="Widgets Pack command-line client")
    parser.add_argument("--debug", action='store_true', help="Debug output for troubleshooting")
    parser.add_argument("--file", help="Configuration file (JSON)")
    parser.add_argument("--user", help="User ID")
    parser.add_argument("--log", help="Log file")

    subparsers = parser.add_subparsers(title='Available commands')

    tasks_parser = subparsers.add_parser('tasks', help='Task planner')
    tasks_parser.add_argument("--add", help="Add a task with this title")
    tasks_parser.add_argument("--edit", nargs=2, metavar=('ROW', 'TITLE'), help="Rename the task in this row")
    tasks_parser.add_argument("--delete", type=int, metavar='ROW', help="Delete the task in this row")
    tasks_parser.add_argument("--toggle", type=int, metavar='ROW', help="Mark the task in this row (un)completed")
    tasks_parser.add_argument("--sort", choices=SORT_ORDERS, help="Change the sort order")
    tasks_parser.add_argument("--list", action='store_true', help="List tasks (default)")
    tasks_parser.set_defaults(func=tasks)

    timer_parser = subparsers.add_parser('timer', help='Focus timer configuration')
    timer_parser.add_argument("--task-name", help="Name of the task to focus on")
    timer_parser.add_argument("--duration", nargs=3, type=int, metavar=('H', 'M', 'S'), help="Session duration")
    timer_parser.add_argument("--break-interval", type=int, metavar='MINUTES', help="Suggest a break every N minutes")
    timer_parser.add_argument("--break-enabled", metavar='BOOL', help="Enable or disable break suggestions")
    timer_parser.add_argument("--show", action='store_true', help="Show timer configuration (default)")
    timer_parser.set_defaults(func=timer)

    events_parser = subparsers.add_parser('events', help='List events which can be subscribed to')
    events_parser.set_defaults(func=events_list)

    args: Namespace = parser.parse_args()
    if not hasattr(args, 'func'):
        parser.print_help()
        return

    initialize_logger(create_settings(args), args.debug)
    try:
        args.func(args)
    except Exception as e:
        logger.error(f'Command failed: {e}', exc_info=e)
        sys.exit(1)
    if save_failed:
        sys.exit(1)


if __name__ == '__main__':
    main()
