#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
The ISAAC (Indirection, Shift, Accumulate, Add, Count) family of pseudorandom word generators by
Bob Jenkins, see [his page](http://burtleburtle.net/bob/rand/isaacafa.html). Two members of the
family are implemented:

- `isaac.core.Isaac32` is the original generator on 32-bit words, as implemented by `rand.c`.
- `isaac.core.Isaac64` is ISAAC64 on 64-bit words, as implemented by `isaac64.c`.

Both use a table of 256 words and produce one block of 256 words per call to `refill`. They share
the structure of the algorithm, but their mixing networks, shift schedules and constants differ,
and their outputs are unrelated. The output of either generator is bit-identical to the output of
the reference programs for the same seed material. No claim is made about the cryptographic
strength of these generators.

A generator instance must not be shared between threads; every independent stream of random
words requires its own instance.
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from operator import __lshift__, __rshift__
from typing import ClassVar, Iterable, Iterator, List, MutableSequence, NamedTuple, Optional, Union

from isaac.lib import chunks
from isaac.lib.array import uint32array, uint64array

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


class UnseededGenerator(RuntimeError):
    """
    Raised when output is requested from a generator that has not been seeded.
    """
    def __init__(self, family: str):
        super().__init__(F'The {family} generator must be seeded before it can be refilled.')


class BlockSizeMismatch(ValueError):
    """
    Raised when an output buffer does not have room for exactly one block.
    """
    def __init__(self, size: int, words: int):
        self.size = size
        self.words = words
        super().__init__(F'The output buffer holds {size} words, but a block consists of exactly {words} words.')


class BlockWidthMismatch(ValueError):
    """
    Raised when the words of an output buffer are narrower or wider than the words of the generator.
    """
    def __init__(self, itemsize: int, bits: int):
        self.itemsize = itemsize
        self.bits = bits
        super().__init__(F'The output buffer stores {itemsize * 8}-bit words, but the generator produces {bits}-bit words.')


class SeedTooLong(ValueError):
    """
    Raised when the seed material does not fit into the table.
    """
    def __init__(self, size: int, words: int):
        self.size = size
        self.words = words
        super().__init__(F'Received {size} words of seed material, but the table only holds {words} words.')


class IsaacState(NamedTuple):
    """
    An immutable snapshot of the internal state of a generator.
    """
    table: tuple
    a: int
    b: int
    c: int


class IsaacBase(ABC):
    """
    The common structure of all ISAAC generators. A subclass fixes the word width by providing the
    golden ratio pattern, the mixing network used during seeding, and the four operations applied
    to the accumulator during a refill.
    """
    WORDS_LOG: ClassVar[int] = 8
    WORDS: ClassVar[int] = 1 << WORDS_LOG

    BITS: ClassVar[int]
    MASK: ClassVar[int]
    GOLDEN: ClassVar[int]
    INDIRECTION: ClassVar[int]
    """
    The indirect lookups of the reference programs use a masked byte offset into the table. The
    table index is obtained by shifting the looked up value right by this many bits.
    """
    OPERATIONS: ClassVar[tuple]
    """
    The accumulator update for table position `i` is given by entry `i % 4` of this tuple. Each
    entry consists of a shift operator, the shift amount, and a mask which is xored into the result.
    """

    table: MutableSequence[int]
    a: int
    b: int
    c: int

    def __init__(self):
        self.table = self.new_block()
        self.a = 0
        self.b = 0
        self.c = 0
        self._seeded = False
        self._pending = bytearray()

    @classmethod
    @abstractmethod
    def new_block(cls) -> MutableSequence[int]:
        """
        Create a zeroed array of words that has room for exactly one block.
        """

    @staticmethod
    @abstractmethod
    def _mix(S: List[int]) -> List[int]:
        """
        Apply one round of the mixing network to the eight seeding registers in place.
        """

    @property
    def family(self) -> str:
        return self.__class__.__name__

    @property
    def seeded(self) -> bool:
        return self._seeded

    @property
    def state(self) -> IsaacState:
        return IsaacState(tuple(self.table), self.a, self.b, self.c)

    def copy(self):
        """
        Return an independent generator that continues from the current state.
        """
        clone = self.__class__()
        clone.table[:] = self.table
        clone.a = self.a
        clone.b = self.b
        clone.c = self.c
        clone._seeded = self._seeded
        clone._pending[:] = self._pending
        return clone

    def seed(self, material: Optional[Union[bytes, bytearray, memoryview, Iterable[int]]] = None) -> None:
        """
        Derive the internal state from the seed material. When `material` is given, it replaces the
        contents of the table first: It can be a sequence of at most 256 words, or a buffer which is
        read as little endian words. Missing words are zero. Without `material`, the current table
        contents are used as the seed, which for a fresh generator is the all-zero table.
        """
        T = self.table
        U = self.MASK
        N = self.WORDS

        if material is not None:
            if isinstance(material, (bytes, bytearray, memoryview)):
                material = chunks.unpack(material, self.BITS // 8, pad=True)
            words = list(material)
            if len(words) > N:
                raise SeedTooLong(len(words), N)
            words.extend(0 for _ in range(N - len(words)))
            for i, word in enumerate(words):
                T[i] = word & U

        S = [self.GOLDEN] * 8
        for _ in range(4):
            self._mix(S)

        for _ in range(2):
            for i in range(0, N, 8):
                S[:] = (x + T[j] & U for j, x in enumerate(S, i))
                for j, x in enumerate(self._mix(S), i):
                    T[j] = x

        self.a = self.b = self.c = 0
        self._seeded = True
        self._pending.clear()

    def refill(self, out: Optional[MutableSequence[int]] = None) -> MutableSequence[int]:
        """
        Advance the generator by one block and return the block. The words are written into `out`
        if it is given, which must have room for exactly one block.
        """
        if not self._seeded:
            raise UnseededGenerator(self.family)

        N = self.WORDS
        if out is None:
            out = self.new_block()
        else:
            if len(out) != N:
                raise BlockSizeMismatch(len(out), N)
            itemsize = getattr(out, 'itemsize', None)
            if itemsize is not None and itemsize != self.BITS // 8:
                raise BlockWidthMismatch(itemsize, self.BITS)

        T = self.table
        U = self.MASK
        H = N >> 1
        I = N - 1 # noqa
        j = self.INDIRECTION
        k = self.INDIRECTION + self.WORDS_LOG
        operations = self.OPERATIONS

        self.c = C = self.c + 1 & U
        A = self.a
        B = self.b + C & U

        for i in range(N):
            X = T[i]
            shift, n, inv = operations[i & 3]
            A = (A ^ shift(A, n) & U ^ inv) + T[i ^ H] & U
            T[i] = Y = T[X >> j & I] + A + B & U
            out[i] = B = T[Y >> k & I] + X & U

        self.a = A
        self.b = B
        return out

    def refill_bytes(self) -> bytearray:
        """
        Advance the generator by one block and return the block as little endian bytes.
        """
        return chunks.pack(self.refill(), self.BITS // 8)

    def keystream(self) -> Iterator[int]:
        """
        Generate the output of the generator as an infinite stream of byte values.
        """
        while True:
            yield from self.refill_bytes()

    def read(self, size: int) -> bytes:
        """
        Return the next `size` bytes of output. Bytes of a block that have not been consumed by
        the previous call are returned first.
        """
        if size < 0:
            raise ValueError(F'Cannot read a negative number of bytes: {size}.')
        pending = self._pending
        while len(pending) < size:
            pending.extend(self.refill_bytes())
        result = bytes(pending[:size])
        del pending[:size]
        return result

    def __iter__(self) -> Iterator[int]:
        while True:
            yield from self.refill()


class Isaac32(IsaacBase):
    """
    The ISAAC generator on 32-bit words.
    """
    BITS = 32
    MASK = 0xFFFFFFFF
    GOLDEN = 0x9E3779B9
    INDIRECTION = 2
    OPERATIONS = (
        (__lshift__, 0x0D, 0),
        (__rshift__, 0x06, 0),
        (__lshift__, 0x02, 0),
        (__rshift__, 0x10, 0),
    )

    @classmethod
    def new_block(cls):
        return uint32array(cls.WORDS)

    @staticmethod
    def _mix(S):
        U = 0xFFFFFFFF
        a, b, c, d, e, f, g, h = S
        a ^= (b << 0x0B) & U; d = d + a & U; b = b + c & U # noqa
        b ^= (c >> 0x02) & U; e = e + b & U; c = c + d & U # noqa
        c ^= (d << 0x08) & U; f = f + c & U; d = d + e & U # noqa
        d ^= (e >> 0x10) & U; g = g + d & U; e = e + f & U # noqa
        e ^= (f << 0x0A) & U; h = h + e & U; f = f + g & U # noqa
        f ^= (g >> 0x04) & U; a = a + f & U; g = g + h & U # noqa
        g ^= (h << 0x08) & U; b = b + g & U; h = h + a & U # noqa
        h ^= (a >> 0x09) & U; c = c + h & U; a = a + b & U # noqa
        S[:] = a, b, c, d, e, f, g, h
        return S


class Isaac64(IsaacBase):
    """
    The ISAAC64 generator on 64-bit words.
    """
    BITS = 64
    MASK = 0xFFFFFFFFFFFFFFFF
    GOLDEN = 0x9E3779B97F4A7C13
    INDIRECTION = 3
    OPERATIONS = (
        (__lshift__, 0x15, MASK),
        (__rshift__, 0x05, 0),
        (__lshift__, 0x0C, 0),
        (__rshift__, 0x21, 0),
    )

    @classmethod
    def new_block(cls):
        return uint64array(cls.WORDS)

    @staticmethod
    def _mix(S):
        U = 0xFFFFFFFFFFFFFFFF
        a, b, c, d, e, f, g, h = S
        a = a - e & U; f ^= (h >> 0x09) & U; h = h + a & U # noqa
        b = b - f & U; g ^= (a << 0x09) & U; a = a + b & U # noqa
        c = c - g & U; h ^= (b >> 0x17) & U; b = b + c & U # noqa
        d = d - h & U; a ^= (c << 0x0F) & U; c = c + d & U # noqa
        e = e - a & U; b ^= (d >> 0x0E) & U; d = d + e & U # noqa
        f = f - b & U; c ^= (e << 0x14) & U; e = e + f & U # noqa
        g = g - c & U; d ^= (f >> 0x11) & U; f = f + g & U # noqa
        h = h - d & U; e ^= (g << 0x0E) & U; g = g + h & U # noqa
        S[:] = a, b, c, d, e, f, g, h
        return S


FAMILIES = {
    Isaac32.BITS: Isaac32,
    Isaac64.BITS: Isaac64,
}
"""
Maps a word width to the generator class of the family member operating on words of that width.
"""
