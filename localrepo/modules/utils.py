"""
Utility functions for localrepo console output.
"""
import sys

from .dataclasses import Colors

_color_output = True


def set_color_output(enabled: bool) -> None:
    """Enable or disable ANSI styling for all styled output."""
    global _color_output
    _color_output = bool(enabled)


def _supports_color(stream) -> bool:
    return _color_output and hasattr(stream, 'isatty') and stream.isatty()


def styled_print(text, color=None, style=None, indent=0, file=None):
    """
    Print styled text with optional color, style, and indentation.

    Args:
        text (str): Text to print
        color (str): Color from Colors class
        style (str): Style from Colors class
        indent (int): Number of spaces to indent
        file: Stream to write to (defaults to stdout)
    """
    stream = file or sys.stdout
    indent_str = " " * indent

    # Only apply colors if we're in a terminal that supports them
    if not (color or style) or not _supports_color(stream):
        print(f"{indent_str}{text}", file=stream)
        return

    print(f"{indent_str}{color or ''}{style or ''}{text}{Colors.RESET}", file=stream)


def print_subheader(text, file=None):
    """Print a styled subheader."""
    styled_print(f"\n{text}", Colors.CYAN, Colors.BOLD, 2, file=file)


def print_success(text, indent=0):
    """Print success message in green."""
    styled_print(text, Colors.GREEN, Colors.BOLD, indent)


def print_error(text, indent=0):
    """Print error message in red."""
    styled_print(text, Colors.RED, Colors.BOLD, indent, file=sys.stderr)
