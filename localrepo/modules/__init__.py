"""
Console modules for the localrepo CLI.

This package holds the argument parser and the styled output helpers.
"""

from .dataclasses import Colors
from .utils import (
    styled_print,
    print_subheader,
    print_success,
    print_error,
    set_color_output,
)

__all__ = [
    'Colors',
    'styled_print', 'print_subheader', 'print_success', 'print_error',
    'set_color_output',
]
