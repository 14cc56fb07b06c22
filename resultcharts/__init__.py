"""
resultcharts - backend for a desktop SQLite browser.

Runs SQL against a SQLite file and decides whether and how the results can be
charted.
"""

__version__ = '1.0.0'
