import array
import operator
from typing import SupportsIndex

from .base import MexRangeError


def as_value(value: SupportsIndex) -> int:
    """Normalise an integer-like value to a non-negative ``int``."""
    value = operator.index(value)
    if value < 0:
        raise MexRangeError(f"Negative values are not supported: {value}", "VALUE_NEGATIVE")
    return value


class PresenceVector:
    """Fixed-size presence flags packed into 64-bit words."""

    def __init__(self, capacity: int):
        self.capacity = capacity
        self.bitmap = array.array("Q")  # 64-bit integers
        self.word_count = (capacity + 63) // 64
        self.bitmap.extend([0] * self.word_count)

    def set(self, index: int):
        if not 0 <= index < self.capacity:
            raise MexRangeError(
                f"Index {index} outside presence vector of size {self.capacity}",
                "VALUE_OUT_OF_RANGE"
            )
        word_idx = index // 64
        bit_idx = index % 64
        self.bitmap[word_idx] |= (1 << bit_idx)

    def get(self, index: int) -> bool:
        # Reads past either end are simply absent, which bounds cursor scans.
        if 0 <= index < self.capacity:
            word_idx = index // 64
            bit_idx = index % 64
            return bool(self.bitmap[word_idx] & (1 << bit_idx))
        return False

    def __len__(self) -> int:
        return self.capacity

