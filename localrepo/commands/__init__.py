"""
Commands package for localrepo CLI commands.
"""

from .coords import add_coords_parser, handle_coords_command
from .install import add_install_parser, handle_install_command
from .list_cmd import add_list_parser, handle_list_command, listing_mode_from_flags
from .remove import add_remove_parser, handle_remove_command
from .help_cmd import add_help_parser, handle_help_command, command_help

__all__ = [
    'add_coords_parser',
    'handle_coords_command',
    'add_install_parser',
    'handle_install_command',
    'add_list_parser',
    'handle_list_command',
    'listing_mode_from_flags',
    'add_remove_parser',
    'handle_remove_command',
    'add_help_parser',
    'handle_help_command',
    'command_help',
]
