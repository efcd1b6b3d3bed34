#!/usr/bin/env python3
# -*- coding: utf-8 -*-
from isaac.lib import chunks
from .. import TestBase


class TestChunks(TestBase):

    def test_odd_block_size(self):
        data = bytearray(range(1, 3 * 5 + 2))
        unpacked = list(chunks.unpack(data, 3, bigendian=True))
        self.assertEqual(unpacked, [0x010203, 0x040506, 0x070809, 0x0A0B0C, 0x0D0E0F])

    def test_little_endian_words(self):
        data = bytes.fromhex('01020304 05060708')
        self.assertEqual(list(chunks.unpack(data, 4)), [0x04030201, 0x08070605])
        self.assertEqual(list(chunks.unpack(data, 8)), [0x0807060504030201])
        self.assertEqual(list(chunks.unpack(data, 4, bigendian=True)), [0x01020304, 0x05060708])

    def test_padding(self):
        data = bytes.fromhex('01020304 0506')
        self.assertEqual(list(chunks.unpack(data, 4)), [0x04030201])
        self.assertEqual(list(chunks.unpack(data, 4, pad=True)), [0x04030201, 0x0605])
        self.assertEqual(list(chunks.unpack(data, 4, bigendian=True, pad=True)), [0x01020304, 0x05060000])

    def test_pack(self):
        self.assertEqual(chunks.pack([0x04030201, 0x08070605], 4), bytes(range(1, 9)))
        self.assertEqual(chunks.pack([0x0102030405060708], 8, bigendian=True), bytes(range(1, 9)))
        self.assertEqual(chunks.pack([0x010203], 3), bytes.fromhex('030201'))
        self.assertEqual(chunks.pack([1, 2, 3], 1), bytes([1, 2, 3]))

    def test_pack_inverts_unpack(self):
        data = self.generate_random_buffer(64)
        for size in (2, 4, 8):
            for bigendian in (False, True):
                words = chunks.unpack(data, size, bigendian)
                self.assertEqual(chunks.pack(words, size, bigendian), data)
