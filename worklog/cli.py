"""Worklog CLI.

Usage:
    worklog start
    worklog stop
    worklog show [today|yesterday|1-7|YYYYMMDD]
    worklog show-week
"""
import argparse
import logging
import sys
from typing import List, Optional

from .config import get_config, reload_config
from .dates import format_duration, format_timestamp
from .errors import WorklogError
from .service import TimeTracker
from .storage import LocalFileLogStore

logger = logging.getLogger(__name__)

START_CMD = 'start'
STOP_CMD = 'stop'
SHOW_CMD = 'show'
SHOW_WEEK_CMD = 'show-week'

COMMANDS = (START_CMD, STOP_CMD, SHOW_CMD, SHOW_WEEK_CMD)


class UsageError(Exception):
    """Invocation argparse could not make sense of."""


class HelpOnErrorParser(argparse.ArgumentParser):
    """Prints the full help instead of a terse usage error and exit 2."""

    def error(self, message):
        raise UsageError(message)


def build_parser() -> argparse.ArgumentParser:
    parser = HelpOnErrorParser(
        prog='worklog',
        description='Personal work time tracker',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Commands:
  start       Start tracking (no-op if already started)
  stop        Stop tracking and print today's total
  show [d]    Print the total for a day
  show-week   Print the total for the current ISO week

<d> can be 'today', 'yesterday', number of day in week
(e.g. show 2 for Tuesday) or a date like 20161231.
"""
    )
    parser.add_argument('command', nargs='?', help='Command to run')
    parser.add_argument('date', nargs='?', help='Date expression for show')
    parser.add_argument('--log-file', help='Path to the time log')
    parser.add_argument('--config', help='Path to YAML config file')
    parser.add_argument('-v', '--verbose', action='store_true', help='Debug logging')
    return parser


def _setup_logging(level: str, verbose: bool):
    logging.basicConfig(
        level=logging.DEBUG if verbose else getattr(logging, level, logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def _print_total(tracker: TimeTracker, expression: Optional[str] = None):
    print(format_duration(tracker.show(expression)))


def run(tracker: TimeTracker, command: str, date_expr: Optional[str] = None):
    """Dispatch a single command against a tracker."""
    if command == START_CMD:
        result = tracker.start()
        if not result.changed:
            print(f"Start has been already called at {format_timestamp(result.mark.at)}")

    elif command == STOP_CMD:
        result = tracker.stop()
        if not result.changed:
            if result.mark is None:
                print("Nothing to stop, tracking has never been started")
            else:
                print(f"Stop has been already called at {format_timestamp(result.mark.at)}")
        _print_total(tracker)

    elif command == SHOW_CMD:
        _print_total(tracker, date_expr)

    elif command == SHOW_WEEK_CMD:
        print(format_duration(tracker.total_for_week()))


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    try:
        args = parser.parse_args(argv)
    except UsageError as e:
        print(f"Invalid arguments: {e}")
        parser.print_help()
        return 0

    if args.command is None:
        parser.print_help()
        return 0
    if args.command not in COMMANDS:
        print(f"Unknown command: {args.command}")
        parser.print_help()
        return 0

    try:
        config = reload_config(args.config) if args.config else get_config()
        _setup_logging(config.log_level, args.verbose)

        store = LocalFileLogStore(args.log_file or config.log_file, encoding=config.encoding)
        store.ensure_exists()
        logger.debug(f"Using log {store.path}")

        run(TimeTracker(store), args.command, args.date)
    except WorklogError as e:
        logger.debug("Command failed", exc_info=True)
        print(f"❌ {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == '__main__':
    sys.exit(main())
