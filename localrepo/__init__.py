"""
localrepo - local Maven repository CLI

This package lists, inspects and installs artifacts in a local
filesystem-backed Maven repository (``~/.m2/repository``).
"""

__version__ = "0.4.0"


def main(*args, **kwargs):
    """Lazy import to avoid CLI startup side effects during help paths."""
    from .main import main as _main

    return _main(*args, **kwargs)


# Define what gets imported with "from localrepo import *"
__all__ = ["main", "__version__"]
