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
import sys
from argparse import Namespace
from pathlib import Path

from wp.core.abstract_settings import AbstractSettings
from wp.core.mock_settings import MockSettings

logger = logging.getLogger(__name__)


def create_settings(args: Namespace) -> AbstractSettings:
    settings = MockSettings(filename=args.file, user_id=args.user, store_type='file')
    if args.log is not None:
        settings.set({'Logger.filename': args.log})
    return settings


def initialize_logger(settings: AbstractSettings, debug: bool) -> None:
    log_format = logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s')
    root = logging.getLogger()

    # The overall log level that would apply to ALL handlers
    root.setLevel(logging.DEBUG if debug else settings.get('Logger.level'))

    for existing_handle in root.handlers:
        existing_handle.close()
    root.handlers.clear()

    filename = settings.get('Logger.filename')
    logfile = Path(filename)
    if logfile.is_dir():
        logfile /= 'widgets-pack.log'
    logfile.parent.mkdir(parents=True, exist_ok=True)

    file_handler = logging.FileHandler(filename=logfile, encoding='UTF-8')
    file_handler.setFormatter(log_format)
    file_handler.setLevel(logging.DEBUG if debug else settings.get('Logger.level'))
    root.handlers.append(file_handler)

    # Warnings and errors go to stderr, as stdout is reserved for the command output
    stdio_handler = logging.StreamHandler(sys.stderr)
    stdio_handler.setFormatter(log_format)
    stdio_handler.setLevel(logging.DEBUG if debug else logging.WARNING)
    root.handlers.append(stdio_handler)
