#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Routines to help interpret binary buffers as arrays of words, stored as consecutive sequences
of bytes, all with the same length and byte order. The generators use these to turn seed bytes
into table words and output blocks into key stream bytes.
"""
import sys

from typing import Iterable

from isaac.lib.array import CodeMap, make_array

_BIG_ENDIAN = sys.byteorder == 'big'


def unpack(data: bytes, blocksize: int, bigendian: bool = False, pad: bool = False) -> Iterable[int]:
    """
    Returns an iterable of integers which have been unpacked from the given `data` buffer as
    chunks of `blocksize` many bytes. Trailing bytes that do not form a complete chunk are
    discarded, unless `pad` is set, in which case they are completed with zero bytes.
    """
    view = memoryview(data)
    if blocksize == 1:
        return bytes(view)
    overlap = len(view) % blocksize
    if overlap:
        if pad:
            view = memoryview(bytes(view) + bytes(blocksize - overlap))
        else:
            view = view[:-overlap]
    if (True, blocksize) in CodeMap:
        unpacked = make_array(blocksize)
        unpacked.frombytes(view)
        if _BIG_ENDIAN != bigendian:
            unpacked.byteswap()
        return unpacked
    bo = 'big' if bigendian else 'little'
    return [int.from_bytes(view[k:k + blocksize], bo) for k in range(0, len(view), blocksize)]


def pack(data: Iterable[int], blocksize: int, bigendian: bool = False) -> bytearray:
    """
    Returns a bytes object which contains the packed representation of the integers in `data`,
    where each item is encoded using `blocksize` many bytes. The numbers are assumed to fit this
    encoding.
    """
    if blocksize == 1:
        return bytearray(data)
    out = bytearray()
    if (True, blocksize) in CodeMap:
        tmp = make_array(blocksize, init=data)
        if _BIG_ENDIAN != bigendian:
            tmp.byteswap()
        out[:] = memoryview(tmp).cast('B')
    else:
        order = 'big' if bigendian else 'little'
        for number in data:
            out.extend(number.to_bytes(blocksize, order))
    return out
