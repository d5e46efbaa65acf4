"""
Common encoder capability.

Every algorithm maps a word or name to a code. Two inputs "sound alike" for
an encoder when their codes are equal.
"""

from abc import ABC, abstractmethod


class Encoder(ABC):
    """Base class for phonetic encoders. Subclasses implement encode()."""

    @abstractmethod
    def encode(self, value: str) -> str:
        ...

    def is_encoded_equals(self, value1: str, value2: str) -> bool:
        return self.encode(value1) == self.encode(value2)

    def __call__(self, value: str) -> str:
        return self.encode(value)


def difference(encoder: Encoder, value1: str, value2: str) -> int:
    """
    Number of positions at which the two codes agree (Soundex family).
    0 means no similarity; for Soundex, 4 means the same code.
    """
    code1 = encoder.encode(value1)
    code2 = encoder.encode(value2)
    if not code1 or not code2:
        return 0
    return sum(1 for a, b in zip(code1, code2) if a == b)


class SoundexDifference:
    """Mixin adding difference() to the Soundex family of encoders."""

    def difference(self, value1: str, value2: str) -> int:
        return difference(self, value1, value2)
