"""
shellext: basename, dirname, realpath, head and cut as small Python tools.
"""

__version__ = "1.0.0"
