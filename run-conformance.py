#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Verifies both ISAAC generator families against the golden vectors of the test suite. With a
positive argument, the generators are refilled that many more times after verification; with a
negative argument, the same loop runs without refilling.
"""
import os
import sys

from inspect import stack

if __name__ != '__main__':
    raise ImportError('This script should not be imported.')

here = os.path.dirname(os.path.abspath(stack()[0][1]))
sys.path.insert(0, here)

from isaac.harness import main # noqa
from test.vectors import ISAAC32_BLOCKS, ISAAC64_BLOCKS # noqa

sys.exit(main({32: ISAAC32_BLOCKS, 64: ISAAC64_BLOCKS}))
