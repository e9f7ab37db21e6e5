"""
CLI argument parsing for localrepo.
"""
import argparse
import importlib

from localrepo.errors import UsageError
from .dataclasses import Colors
from .utils import styled_print, print_subheader


class StyledArgumentParser(argparse.ArgumentParser):
    """ArgumentParser with styled help output that reports errors as UsageError."""

    def __init__(self, *args, show_banner=False, command_name=None, **kwargs):
        """Initialize with optional banner flag and the command this parser serves."""
        super().__init__(*args, **kwargs)
        self.show_banner = show_banner
        self.command_name = command_name

    def error(self, message):
        """Raise instead of exiting so the caller can show the command's help."""
        raise UsageError(message, command=self.command_name)

    def print_help(self, file=None):
        """Override print_help to use our styled formatter."""
        # Only show banner for main parser
        if self.show_banner:
            try:
                import pyfiglet

                ascii_art = pyfiglet.figlet_format("localrepo", font="small")
                for line in ascii_art.split('\n'):
                    if line.strip():  # Only print non-empty lines
                        styled_print(line, Colors.BRIGHT_CYAN, Colors.BOLD, 0, file=file)
                print(file=file)

            except ImportError:
                # If pyfiglet is not available, just print a simple header
                styled_print("LOCALREPO", Colors.BRIGHT_CYAN, Colors.BOLD, 0, file=file)
                print(file=file)

        lines = self.format_help().split('\n')

        if self.show_banner:
            print_subheader("COMMAND OPTIONS", file=file)

        for line in lines:
            if not line.strip():
                continue
            elif line.startswith('usage:'):
                styled_print(line, Colors.BRIGHT_YELLOW, Colors.BOLD, 0, file=file)
            elif line.startswith('options:') or line.startswith('optional arguments:'):
                styled_print(line, Colors.BRIGHT_CYAN, Colors.BOLD, 0, file=file)
            elif line.startswith('  -') or line.startswith('    -'):
                styled_print(line, Colors.BRIGHT_YELLOW, None, 0, file=file)
            else:
                styled_print(line, Colors.BRIGHT_GREEN, None, 0, file=file)

        # Add a footer with version information only for main parser
        if self.show_banner:
            from .. import __version__

            print(file=file)
            styled_print(f" localrepo v{__version__} ", Colors.BRIGHT_MAGENTA, None, 0, file=file)


_COMMAND_SPECS = (
    ("coords", "localrepo.commands.coords", "add_coords_parser"),
    ("install", "localrepo.commands.install", "add_install_parser"),
    ("list", "localrepo.commands.list_cmd", "add_list_parser"),
    ("remove", "localrepo.commands.remove", "add_remove_parser"),
    ("help", "localrepo.commands.help_cmd", "add_help_parser"),
)


def _register_command_parsers(subparsers: argparse._SubParsersAction) -> None:
    for command, module_path, func_name in _COMMAND_SPECS:
        module = importlib.import_module(module_path)
        command_parser = getattr(module, func_name)(subparsers)
        command_parser.command_name = command


def create_main_parser(*, show_banner: bool = True) -> argparse.ArgumentParser:
    """Create the main argument parser for localrepo."""
    from .. import __version__

    parser = StyledArgumentParser(
        prog="localrepo",
        description="Work with a local Maven repository.\n\n"
                    "For help on individual commands use 'help' with the command name,\n"
                    "e.g.: localrepo help install",
        formatter_class=argparse.RawTextHelpFormatter,
        show_banner=show_banner,
        allow_abbrev=False
    )
    parser.add_argument('--version', action='version',
                        version=f'localrepo {__version__}',
                        help='Show version information')
    parser.add_argument('-v', '--verbose', action='store_true',
                        help='Log debug information to stderr')
    parser.add_argument('--config', default=None,
                        help='Path to config TOML file (default: ~/.localrepo/config.toml)')
    parser.add_argument('--no-color', action='store_true',
                        help='Disable colored output')

    subparsers = parser.add_subparsers(dest='command', help='Available commands')

    _register_command_parsers(subparsers)

    return parser
