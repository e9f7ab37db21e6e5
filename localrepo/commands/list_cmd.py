"""
List command handler for the localrepo CLI.
"""

import argparse

from localrepo.config import GlobalConfig
from localrepo.errors import UsageError, require_directory
from localrepo.repo.coordinates import read_artifact_entries
from localrepo.repo.grouping import ArtifactIndex
from localrepo.repo.reporter import ListingMode, Reporter

DOC_LIST = """List artifacts in local Maven repo
  Arguments:
    [-r | --repo repo-path] [-d | -f | -s]
  Options:
    -r | --repo repo-path => specifies the path of the local Maven repository
    No arguments lists with concise information
    -d lists in detail
    -f lists with filenames of artifacts
    -s lists with project description"""

CONFLICTING_FLAGS_MESSAGE = "Only either of -d, -f, -s may be selected"


def add_list_parser(subparsers) -> argparse.ArgumentParser:
    """Add list command parser."""
    list_parser = subparsers.add_parser(
        'list',
        aliases=['ls'],
        help='List artifacts in local repository',
        description=DOC_LIST,
        formatter_class=argparse.RawTextHelpFormatter,
    )
    list_parser.add_argument(
        '-r', '--repo',
        help='Local repo path (default: from config, ~/.m2/repository)'
    )
    list_parser.add_argument(
        '-d', '--detail',
        action='store_true',
        help='List in detail'
    )
    list_parser.add_argument(
        '-f', '--filename',
        action='store_true',
        help='List with filenames'
    )
    list_parser.add_argument(
        '-s', '--description',
        action='store_true',
        help='List with description'
    )
    return list_parser


def listing_mode_from_flags(detail: bool = False, filename: bool = False,
                            description: bool = False) -> ListingMode:
    """Map the -d/-f/-s flags to a ListingMode; more than one is a usage error."""
    selected = [
        mode for flag, mode in (
            (detail, ListingMode.DETAIL),
            (filename, ListingMode.FILENAME),
            (description, ListingMode.DESCRIPTION),
        ) if flag
    ]
    if len(selected) > 1:
        raise UsageError(CONFLICTING_FLAGS_MESSAGE, command="list")
    return selected[0] if selected else ListingMode.CONCISE


def handle_list_command(args: argparse.Namespace, config: GlobalConfig) -> int:
    """Handle list command."""
    mode = listing_mode_from_flags(args.detail, args.filename, args.description)
    repo_root = require_directory(args.repo or config.repository_path)

    index = ArtifactIndex(read_artifact_entries(repo_root)).sorted()
    reporter = Reporter(index, mode, date_format=config.display.date_format)
    for line in reporter.lines():
        print(line)
    return 0
