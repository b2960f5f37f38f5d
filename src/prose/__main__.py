"""
Main entry point for prose when run as a module.
"""

import sys

from prose.cli import main

if __name__ == '__main__':
    sys.exit(main())
