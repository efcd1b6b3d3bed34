R"""
Pure Python implementations of the ISAAC and ISAAC64 pseudorandom word generators, producing output
that is bit-identical to the reference programs by Bob Jenkins. The generators are documented in
`isaac.core`; `isaac.harness` verifies them against published golden vectors.

    >>> from isaac import Isaac32
    >>> rng = Isaac32()
    >>> rng.seed()
    >>> _ = rng.refill()
    >>> hex(rng.refill()[0])
    '0xf650e4c8'
"""
from __future__ import annotations

__version__ = '0.1.0'
__distribution__ = 'isaac-prng'

from isaac.core import (
    FAMILIES,
    BlockSizeMismatch,
    BlockWidthMismatch,
    Isaac32,
    Isaac64,
    IsaacBase,
    IsaacState,
    SeedTooLong,
    UnseededGenerator,
)

__all__ = [
    'BlockSizeMismatch',
    'BlockWidthMismatch',
    'FAMILIES',
    'Isaac32',
    'Isaac64',
    'IsaacBase',
    'IsaacState',
    'SeedTooLong',
    'UnseededGenerator',
]
