#!/usr/bin/env python3
"""
Entry point for running localrepo as a module: python -m localrepo
"""

import sys

from localrepo.main import main

if __name__ == '__main__':
    sys.exit(main())
