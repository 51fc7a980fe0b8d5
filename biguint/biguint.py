"""
Distributed under the MIT/X11 software license

Arbitrary precision unsigned integer stored as little-endian bytes
"""

from biguint.util import GROUP_BYTES, error

BYTE_BASE = 256
BYTE_MASK = 0xFF
MAX_UINT64 = 0xFFFFFFFFFFFFFFFF


class UnderflowError(ArithmeticError):
    """Raised when a subtraction would produce a negative result"""

    def __init__(self, message="arithmetic underflow"):
        super().__init__(message)


def bytes_from_uint64(value: int) -> bytearray:
    """
    Split a 64-bit unsigned integer into bytes, least significant first.

    The result stops at the most significant non-zero byte, so 0 yields an
    empty buffer and no value produces a trailing zero byte.
    """
    if not isinstance(value, int) or isinstance(value, bool):
        raise TypeError(f"Cannot build BigUInt from type {type(value)}")
    if value < 0 or value > MAX_UINT64:
        raise ValueError(f"Value out of uint64 range: {value}")

    res = bytearray()
    acc = value
    while acc != 0:
        res.append(acc & BYTE_MASK)
        acc >>= 8
    return res


class BigUInt:
    """
    Unsigned integer of unbounded size

    data holds the value in base 256, index 0 being the least significant
    byte. The buffer never ends in a zero byte; zero is the empty buffer.
    """

    def __init__(self, value=0):
        self.data = bytes_from_uint64(value)

    def add(self, other):
        """
        Increase self by other and return self.

        The buffer grows by at most one byte beyond the longer operand.
        """
        if not isinstance(other, BigUInt):
            raise TypeError(f"Cannot add type {type(other)} to BigUInt")

        # Snapshot first so x.add(x) reads the original bytes
        y = bytes(other.data)
        if len(self.data) < len(y):
            self.data.extend(bytes(len(y) - len(self.data)))

        carry = 0
        for i in range(len(self.data)):
            if i >= len(y) and carry == 0:
                break
            n = self.data[i] + carry
            if i < len(y):
                n += y[i]
            self.data[i] = n & BYTE_MASK
            carry = n >> 8

        if carry:
            self.data.append(carry)
        return self

    def subtract(self, other):
        """
        Decrease self by other and return self.

        Raises UnderflowError if other > self, in which case self is left
        unchanged. The buffer shrinks to drop any high zero bytes.
        """
        if not isinstance(other, BigUInt):
            raise TypeError(f"Cannot subtract type {type(other)} from BigUInt")

        if self.compare(other) < 0:
            error("Subtract() : underflow %s - %s", self, other)
            raise UnderflowError()

        y = bytes(other.data)
        borrow = 0
        for i in range(len(self.data)):
            n = self.data[i] - borrow
            if i < len(y):
                n -= y[i]
            if n < 0:
                n += BYTE_BASE
                borrow = 1
            else:
                borrow = 0
            self.data[i] = n

        while self.data and self.data[-1] == 0:
            self.data.pop()
        return self

    def compare(self, other) -> int:
        """Return -1, 0 or 1 as self is less than, equal to or greater than other"""
        if len(self.data) != len(other.data):
            return -1 if len(self.data) < len(other.data) else 1
        for i in range(len(self.data) - 1, -1, -1):
            if self.data[i] < other.data[i]:
                return -1
            elif self.data[i] > other.data[i]:
                return 1
        return 0

    def copy(self):
        """Fully independent (deep) copy"""
        result = BigUInt()
        result.data = bytearray(self.data)
        return result

    def to_bytes(self) -> bytes:
        """Little-endian bytes, least significant first"""
        return bytes(self.data)

    def to_string(self) -> str:
        """
        Hex representation: lowercase, "0x" prefix, no leading zeros,
        underscore between groups of 8 digits counted from the low end
        """
        if not self.data:
            return "0x0"
        parts = ["0x"]
        top = len(self.data) - 1
        for i in range(top, -1, -1):
            if i == top:
                parts.append(f"{self.data[i]:x}")
            else:
                parts.append(f"{self.data[i]:02x}")
            if i != 0 and i % GROUP_BYTES == 0:
                parts.append("_")
        return "".join(parts)

    def __iadd__(self, other):
        return self.add(other)

    def __isub__(self, other):
        return self.subtract(other)

    def __copy__(self):
        return self.copy()

    def __deepcopy__(self, memo):
        return self.copy()

    def __bytes__(self):
        return self.to_bytes()

    def __len__(self):
        return len(self.data)

    def __str__(self):
        return self.to_string()

    def __repr__(self):
        return f"BigUInt('{self.to_string()}')"
