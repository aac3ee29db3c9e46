"""
models/printable.py
-------------------
Protocol shared by every record that can be written to the console.
"""

from typing import Protocol, runtime_checkable


@runtime_checkable
class Printable(Protocol):
    """Anything with a single-line console representation."""

    def display(self) -> str:
        ...
