"""
biguint - arbitrary precision unsigned integers

Unsigned integers of unbounded size stored as little-endian byte buffers,
with in-place addition and subtraction and canonical hex formatting.
"""

__version__ = "0.1.0"

from biguint.biguint import (
    BYTE_BASE,
    MAX_UINT64,
    BigUInt,
    UnderflowError,
    bytes_from_uint64,
)
from biguint.util import GROUP_BYTES, error, format_bytes

__all__ = [
    # BigUInt
    "BigUInt",
    "UnderflowError",
    "bytes_from_uint64",
    "BYTE_BASE",
    "MAX_UINT64",
    # Util
    "GROUP_BYTES",
    "error",
    "format_bytes",
]
