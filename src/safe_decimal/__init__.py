"""
safe_decimal — Fixed-point decimal primitive for non-negative quantities

A type-safe, overflow-checked decimal with exactly six fractional digits,
backed by a single integer. No floating point, no silent wraparound.

================================================================================
QUICK START
================================================================================

Basic usage:

    from safe_decimal import SafeDecimal

    price = SafeDecimal.parse("19.99")
    qty = SafeDecimal.from_int(3)

    total = price * qty          # SafeDecimal('59.97')
    str(total)                   # '59.97'

    # Out of range is an error, never a wrapped value
    SafeDecimal.zero() - price   # raises DecimalOverflowError

JSON (string in, number out):

    from safe_decimal import dumps, loads

    dumps({"total": total})      # '{"total": 59.97}'
    loads('"59.97"')             # SafeDecimal('59.97')

================================================================================
"""

import logging

# Core type
from .core import SafeDecimal

# Errors
from .errors import (
    SafeDecimalError,
    DecimalOverflowError,
    UnexpectedFormatError,
    ParseIntError,
    DivisionByZeroError,
    DeserializationError,
)

# JSON interop
from .codec import (
    SafeDecimalEncoder,
    to_json_value,
    from_json_value,
    dumps,
    loads,
    json_schema,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "1.0.0"

__all__ = [
    # Core
    "SafeDecimal",
    # Errors
    "SafeDecimalError",
    "DecimalOverflowError",
    "UnexpectedFormatError",
    "ParseIntError",
    "DivisionByZeroError",
    "DeserializationError",
    # JSON
    "SafeDecimalEncoder",
    "to_json_value",
    "from_json_value",
    "dumps",
    "loads",
    "json_schema",
]
