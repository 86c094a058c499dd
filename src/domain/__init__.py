"""Domain models and conversion logic for the NBP exchange-rate tool.

The rate table is an immutable snapshot of one published document; conversion
is a pure function over it. Nothing here performs I/O.
"""

__all__ = [
    "converter",
    "rates",
]
