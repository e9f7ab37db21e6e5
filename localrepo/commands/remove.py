"""
Remove command handler for the localrepo CLI.
"""

import argparse

DOC_REMOVE = "Remove artifacts from local Maven repo"


def add_remove_parser(subparsers) -> argparse.ArgumentParser:
    """Add remove command parser."""
    remove_parser = subparsers.add_parser(
        'remove',
        help='Remove artifact from local repository (Not Yet Implemented)',
        description=DOC_REMOVE,
    )
    remove_parser.add_argument('args', nargs='*', help=argparse.SUPPRESS)
    return remove_parser


def handle_remove_command(args: argparse.Namespace) -> int:
    print("Not yet implemented")
    return 0
