#!/usr/bin/env python3
# -*- coding: utf-8 -*-
from isaac.lib.array import make_array, uint32array, uint64array
from .. import TestBase


class TestArray(TestBase):

    def test_word_widths(self):
        for make, size in ((uint32array, 4), (uint64array, 8)):
            array = make(256)
            self.assertEqual(array.itemsize, size)
            self.assertEqual(len(array), 256)
            self.assertFalse(any(array))

    def test_words_out_of_range(self):
        array = uint32array(4)
        array[0] = 0xFFFFFFFF
        with self.assertRaises(OverflowError):
            array[1] = 0x100000000
        with self.assertRaises(OverflowError):
            array[2] = -1
        array = uint64array(4)
        array[0] = 0xFFFFFFFFFFFFFFFF
        with self.assertRaises(OverflowError):
            array[1] = 0x10000000000000000

    def test_fill_is_truncated(self):
        array = make_array(2, 3, init=0x12345)
        self.assertEqual(list(array), [0x2345] * 3)

    def test_unknown_width(self):
        with self.assertRaises(LookupError):
            make_array(3, 1)
