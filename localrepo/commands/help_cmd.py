"""
Help command handler for the localrepo CLI.
"""

import argparse
from typing import Optional

from localrepo.errors import UsageError
from .coords import DOC_COORDS
from .install import DOC_INSTALL
from .list_cmd import DOC_LIST
from .remove import DOC_REMOVE

DOC_HELP = """Display help for localrepo, or for specified command
  Arguments:
    [<command>] the command to show help for
  No argument lists generic help page"""

GENERAL_HELP = """
localrepo - work with a local Maven repository.

coords   Guess Leiningen (Maven) coords of a file
install  Install artifact to local repository
list     List artifacts in local repository
remove   Remove artifact from local repository (Not Yet Implemented)
help     This help screen

For help on individual commands use 'help' with command name, e.g.:

$ localrepo help install
"""

COMMAND_DOCS = {
    "coords": DOC_COORDS,
    "install": DOC_INSTALL,
    "list": DOC_LIST,
    "remove": DOC_REMOVE,
    "help": DOC_HELP,
}

COMMAND_ALIASES = {
    "ls": "list",
}


def command_help(command: Optional[str]) -> str:
    """Static help text for ``command``; the general page for None or unknown names."""
    if command is None:
        return GENERAL_HELP
    command = COMMAND_ALIASES.get(command, command)
    return COMMAND_DOCS.get(command, GENERAL_HELP)


def add_help_parser(subparsers) -> argparse.ArgumentParser:
    """Add help command parser."""
    help_parser = subparsers.add_parser(
        'help',
        aliases=['h'],
        help='This help screen',
        description=DOC_HELP,
        formatter_class=argparse.RawTextHelpFormatter,
    )
    help_parser.add_argument(
        'topic',
        nargs='?',
        metavar='command',
        help='The command to show help for'
    )
    return help_parser


def handle_help_command(args: argparse.Namespace) -> int:
    """Print static help for a command, or the general page."""
    topic = getattr(args, 'topic', None)
    if topic is not None and COMMAND_ALIASES.get(topic, topic) not in COMMAND_DOCS:
        raise UsageError(
            f"Illegal command: {topic}, Allowed: {', '.join(COMMAND_DOCS)}",
            command="help",
        )
    print(command_help(topic))
    return 0
