"""
lsgrid - list directory contents in a terminal-fitting grid.
"""

__version__ = "0.1.0"
