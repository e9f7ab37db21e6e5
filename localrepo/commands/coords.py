"""
Coords command handler for the localrepo CLI.
"""

import argparse

from localrepo.repo.coordinates import guess_coordinates

DOC_COORDS = """Guess Leiningen (Maven) coordinates of given filename.
  Arguments:
    <filepath>
  Example:
    Input  -  local/jars/foo-bar-1.0.6.jar
    Output - local/jars/foo-bar-1.0.6.jar foo-bar/foo-bar 1.0.6"""


def add_coords_parser(subparsers) -> argparse.ArgumentParser:
    """Add coords command parser."""
    coords_parser = subparsers.add_parser(
        'coords',
        help='Guess Leiningen (Maven) coords of a file',
        description=DOC_COORDS,
        formatter_class=argparse.RawTextHelpFormatter,
    )
    coords_parser.add_argument(
        'filepath',
        help='File whose name follows <artifact>-<version>.<ext>'
    )
    return coords_parser


def handle_coords_command(args: argparse.Namespace) -> int:
    """Print the guessed coordinates; CoordinateGuessError propagates."""
    filepath, coordinate, version = guess_coordinates(args.filepath)
    print(filepath, coordinate, version)
    return 0
