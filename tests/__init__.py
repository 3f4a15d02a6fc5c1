"""
Test utilities package.
"""

from .helpers import count_rows, make_registration

__all__ = [
    "count_rows",
    "make_registration",
]
