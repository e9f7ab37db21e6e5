"""
Console constants for localrepo.
"""


class Colors:
    # Text colors
    RED = '\033[31m'
    GREEN = '\033[32m'
    CYAN = '\033[36m'

    # Bright colors
    BRIGHT_GREEN = '\033[92m'
    BRIGHT_YELLOW = '\033[93m'
    BRIGHT_MAGENTA = '\033[95m'
    BRIGHT_CYAN = '\033[96m'

    # Formatting
    BOLD = '\033[1m'

    # Reset
    RESET = '\033[0m'
