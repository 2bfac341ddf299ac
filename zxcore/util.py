"""Small helpers shared across the package."""

from __future__ import annotations


def pmax(iterable):
    """Return the maximum of partially ordered items, or None if empty.

    When items are incomparable, the one that occurs earlier is preferred.
    """
    best = None
    found = False
    for item in iterable:
        if not found:
            best = item
            found = True
        elif best < item:
            best = item
    return best