#!/usr/bin/env python3
"""
localrepo - local Maven repository CLI

This is the main entry point: it parses arguments, loads configuration
once, and dispatches to the command handlers.
"""

import locale
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence

from localrepo.config import GlobalConfig
from localrepo.errors import CoordinateGuessError, InvalidPathError, UsageError
from localrepo.modules.cli_parser import create_main_parser
from localrepo.modules.utils import print_error, set_color_output

logger = logging.getLogger(__name__)

LOG_FORMAT = '%(asctime)s - %(levelname)s - %(message)s'

COMMAND_ALIASES = {
    'ls': 'list',
    'h': 'help',
}


def configure_logging(config: GlobalConfig, verbose: bool = False) -> None:
    level = logging.DEBUG if verbose else config.log_level
    logging.basicConfig(level=level, format=LOG_FORMAT, stream=sys.stderr)
    logging.getLogger('localrepo').setLevel(level)


def use_user_locale() -> None:
    """Format listing dates the way the user's locale does."""
    try:
        locale.setlocale(locale.LC_TIME, "")
    except locale.Error as exc:
        logger.debug("Keeping the C locale for dates: %s", exc)


def _report_usage_error(exc: UsageError) -> int:
    from localrepo.commands.help_cmd import command_help

    print(command_help(exc.command))
    print_error(str(exc))
    return 1


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main entry point for the localrepo CLI; returns the exit status."""
    parser = create_main_parser()

    try:
        args = parser.parse_args(argv)
    except UsageError as exc:
        return _report_usage_error(exc)

    config = GlobalConfig.load(Path(args.config).expanduser() if args.config else None)
    configure_logging(config, args.verbose)
    set_color_output(config.display.color_output and not args.no_color)
    use_user_locale()

    command = COMMAND_ALIASES.get(args.command, args.command)
    logger.debug("Running command %s with repository default %s",
                 command, config.repository_path)

    from localrepo.commands import (
        handle_coords_command,
        handle_install_command,
        handle_list_command,
        handle_remove_command,
        handle_help_command,
    )

    try:
        if command == 'coords':
            return handle_coords_command(args)
        elif command == 'install':
            return handle_install_command(args, config)
        elif command == 'list':
            return handle_list_command(args, config)
        elif command == 'remove':
            return handle_remove_command(args)
        elif command == 'help':
            return handle_help_command(args)
        else:
            # If no command is provided, show help
            parser.print_help()
            return 0
    except UsageError as exc:
        return _report_usage_error(exc)
    except (InvalidPathError, CoordinateGuessError) as exc:
        print_error(str(exc))
        return 1


if __name__ == "__main__":
    sys.exit(main())
