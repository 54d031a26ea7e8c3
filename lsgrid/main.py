#!/usr/bin/env python3
"""
Run lsgrid as a script.

Lists the paths given on the command line in terminal-width columns and
exits with the listing's status.
"""

import sys
from lsgrid.cli import main

if __name__ == "__main__":
    sys.exit(main())
