"""
utils/console.py
----------------
Console output for query results.
"""

from models.printable import Printable


def print_contents(*printables: Printable) -> None:
    """Print one line per item, in order."""
    for item in printables:
        print(item.display())
