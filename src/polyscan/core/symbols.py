"""
Nucleotide symbol classes used by the window scanner.

The alphabet is closed: A, C, G, T and N, case-insensitive. Every other
byte is unrecognized and contributes to no class.
"""

from __future__ import annotations

from enum import IntEnum
from typing import Optional


class Symbol(IntEnum):
    """Recognized nucleotide classes; the value is the frequency-table slot."""

    A = 0
    C = 1
    G = 2
    T = 3
    N = 4

    @property
    def char(self) -> str:
        return self.name

    @property
    def complement(self) -> "Symbol":
        return _COMPLEMENTS[self]

    @classmethod
    def from_char(cls, char: str) -> "Symbol":
        """Return the symbol for a single nucleotide character.

        Raises:
            ValueError: If ``char`` is not exactly one of A/C/G/T/N (any case)
        """
        if not isinstance(char, str) or len(char) != 1:
            raise ValueError(f"Expected a single nucleotide character, got {char!r}")
        try:
            return cls[char.upper()]
        except KeyError:
            raise ValueError(f"Unrecognized nucleotide: {char!r}") from None


_COMPLEMENTS = {
    Symbol.A: Symbol.T,
    Symbol.T: Symbol.A,
    Symbol.C: Symbol.G,
    Symbol.G: Symbol.C,
    Symbol.N: Symbol.N,
}

SYMBOL_COUNT = len(Symbol)

_RECOGNIZED = "ACGTNacgtn"

# Byte value -> frequency-table slot, -1 for unrecognized bytes
BYTE_TO_SLOT = tuple(
    int(Symbol[chr(b).upper()]) if chr(b) in _RECOGNIZED else -1 for b in range(256)
)


def classify(byte: int) -> Optional[Symbol]:
    """Map one raw sequence byte to its symbol, or None if unrecognized."""
    slot = BYTE_TO_SLOT[byte]
    return Symbol(slot) if slot >= 0 else None
