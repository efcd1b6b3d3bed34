#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Verification of ISAAC generators against published reference output. The reference programs seed
their generator with an all-zero table and discard the first block of output; the blocks that
follow are compared against a table of golden vectors, word by word. The golden vectors belong
to the caller: this module only drives a generator and compares what it produces.

After the comparison, a number of additional refills can be requested, which is used to run the
generator in a loop. A positive count performs that many refills, a negative count performs the
same number of iterations without touching the generator.
"""
from __future__ import annotations

import argparse

from typing import TYPE_CHECKING, Iterable, Mapping, Optional, Sequence, Type

from isaac.core import FAMILIES, IsaacBase
from isaac.lib.environment import LogLevel, environment, logger
from isaac.lib.environment import parse_decimal as parse_iterations

if TYPE_CHECKING:
    from logging import Logger


class ConformanceError(AssertionError):
    """
    Raised when a generator produces a block that differs from its golden vector.
    """
    def __init__(self, family: str, block: int, index: int, expected: int, actual: int, bits: int = 32):
        self.family = family
        self.bits = bits
        self.block = block
        self.index = index
        self.expected = expected
        self.actual = actual
        super().__init__(str(self))

    def __str__(self):
        width = self.bits // 4
        return (
            F'{self.family} block {self.block} differs at word {self.index}: '
            F'expected 0x{self.expected:0{width}x}, got 0x{self.actual:0{width}x}.')


def compare_block(family: str, block: int, expected: Sequence[int], actual: Sequence[int], bits: int = 32) -> None:
    """
    Compare one produced block against its golden vector and raise a `ConformanceError` for the
    first word that differs. The word width `bits` determines how the words are displayed.
    """
    if len(expected) != len(actual):
        raise ValueError(
            F'The golden vector for {family} block {block} has {len(expected)} words, '
            F'but the generator produced {len(actual)}.')
    for index, (e, a) in enumerate(zip(expected, actual)):
        if e != a:
            raise ConformanceError(family, block, index, e, a, bits)


def spin(generator: IsaacBase, iterations: int, buffer=None) -> int:
    """
    Run the loop of additional iterations and return the number of refills that were performed.
    The remaining count is moved towards zero in every iteration, and the generator is refilled
    only while that count is non-negative.
    """
    refills = 0
    if buffer is None:
        buffer = generator.new_block()
    while iterations != 0:
        if 0 <= iterations:
            generator.refill(buffer)
            refills += 1
        iterations += 1 if iterations < 0 else -1
    return refills


class Harness:
    """
    Drives one generator family through the reference sequence: create a zeroed generator, seed it,
    discard one block, and then verify one block for every golden vector.
    """

    def __init__(self, family: Type[IsaacBase], golden: Iterable[Sequence[int]], log: Optional[Logger] = None):
        self.family = family
        self.golden = tuple(golden)
        self.log = log or logger(__name__)

    def start(self) -> IsaacBase:
        generator = self.family()
        generator.seed()
        generator.refill()
        return generator

    def verify(self, generator: Optional[IsaacBase] = None) -> IsaacBase:
        """
        Verify all golden vectors and return the generator in the state after the last verified
        block. If no generator is given, a new one is started.
        """
        if generator is None:
            generator = self.start()
        name = generator.family
        buffer = generator.new_block()
        for block, expected in enumerate(self.golden):
            generator.refill(buffer)
            compare_block(name, block, expected, buffer, generator.BITS)
            self.log.debug(F'{name} block {block} matches all {len(expected)} words')
        return generator

    def run(self, iterations: int = 0) -> IsaacBase:
        """
        Verify all golden vectors and perform the requested number of additional iterations.
        """
        generator = self.verify()
        refills = spin(generator, iterations)
        if iterations:
            self.log.info(F'{generator.family} performed {refills} of {abs(iterations)} additional iterations as refills')
        return generator

    @classmethod
    def Detached(cls, family: Type[IsaacBase], golden: Iterable[Sequence[int]]) -> Harness:
        """
        Create a harness whose logger is silenced, so that failures surface only as exceptions.
        """
        log = logger(F'{__name__}.detached')
        log.setLevel(LogLevel.DETACHED)
        return cls(family, golden, log)


def _paint(text: str, color: str) -> str:
    if environment.colorless.value:
        return text
    return F'\033[{color}m{text}\033[0m'


def main(golden: Mapping[int, Iterable[Sequence[int]]], argv: Optional[Sequence[str]] = None) -> int:
    """
    Command line entry point of the conformance check. The `golden` argument maps a word width to
    the golden vectors of the generator family for that width. The return value is the exit code.
    """
    try:
        import colorama
        colorama.just_fix_windows_console()
    except ModuleNotFoundError:
        pass

    argp = argparse.ArgumentParser(
        description=(
            'Verify the ISAAC generator families against their golden vectors. After verification, '
            'the given number of additional iterations is performed; a positive count refills the '
            'generator that many times and a negative count runs the same loop without refilling.'
        ))
    argp.add_argument('iterations', nargs='?', default=None, type=str,
        help='signed decimal number of additional iterations; the default is read from ISAAC_ITERATIONS.')
    argp.add_argument('-w', '--width', type=int, choices=sorted(FAMILIES), action='append', default=None,
        help='only verify the family with the given word width; can be specified more than once.')
    argp.add_argument('-v', '--verbose', action='count', default=0,
        help='increase the log verbosity; specify twice to log every verified block.')
    args = argp.parse_args(argv)

    log = logger(__name__)
    if args.verbose:
        log.setLevel(LogLevel.FromVerbosity(args.verbose))

    if args.iterations is None:
        iterations = environment.iterations.value
    else:
        iterations = parse_iterations(args.iterations)

    for width in args.width or sorted(golden):
        family = FAMILIES[width]
        harness = Harness(family, golden[width], log)
        try:
            harness.run(iterations)
        except ConformanceError as error:
            log.error(str(error))
            print(_paint(F'{family.__name__}: FAILED', '91'))
            return 1
        else:
            print(_paint(F'{family.__name__}: {len(harness.golden)} blocks verified', '92'))

    return 0
