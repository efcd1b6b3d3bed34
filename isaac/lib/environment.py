#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
A common interface to all configuration settings of the package that are available via environment
variables. Every setting is read from a variable with the prefix `ISAAC_`. This module is also host
to the logging configuration.
"""
from __future__ import annotations

import os
import re
import logging

from enum import IntEnum
from typing import Optional, TypeVar, Generic

_T = TypeVar('_T')

_STRTOL_DECIMAL = re.compile(r'\s*([-+]?[0-9]+)')


def parse_decimal(text: Optional[str]) -> int:
    """
    Parse a signed decimal number the way the C library function `strtol` does with base ten:
    Leading whitespace and a sign are accepted, parsing stops at the first character that is not
    a digit, and a string that does not start with a number counts as zero.
    """
    if not text:
        return 0
    match = _STRTOL_DECIMAL.match(text)
    if match is None:
        return 0
    return int(match[1], 10)


class LogLevel(IntEnum):
    """
    The log levels of the package: the levels of the logging module, extended by one level that
    is above all others.
    """
    DETACHED = logging.CRITICAL + 100
    """
    The harness is not attached to a terminal but has been invoked from code. This means that the
    only way to communicate problems is to throw an exception.
    """
    CRITICAL = logging.CRITICAL  # noqa
    ERROR    = logging.ERROR     # noqa
    WARNING  = logging.WARNING   # noqa
    INFO     = logging.INFO      # noqa
    DEBUG    = logging.DEBUG     # noqa

    @classmethod
    def FromVerbosity(cls, verbosity: int):
        """
        Translate a count of verbosity flags into a level; a negative count detaches.
        """
        if verbosity < 0:
            return cls.DETACHED
        return (cls.WARNING, cls.INFO, cls.DEBUG)[min(verbosity, 2)]


class IsaacFormatter(logging.Formatter):

    NAMES = {
        logging.CRITICAL : 'failure',
        logging.ERROR    : 'failure',
        logging.WARNING  : 'warning',
        logging.INFO     : 'comment',
        logging.DEBUG    : 'verbose',
    }

    def formatMessage(self, record: logging.LogRecord) -> str:
        record.custom_level_name = self.NAMES.get(record.levelno, record.levelname.lower())
        return super().formatMessage(record)


def logger(name: str) -> logging.Logger:
    """
    Obtain a logger which is configured with the default package format. If the verbosity has
    been configured through the environment, the logger receives the corresponding level.
    """
    log = logging.getLogger(name)
    if not log.handlers:
        stream = logging.StreamHandler()
        stream.setFormatter(IsaacFormatter(
            '({asctime}) {custom_level_name} in {name}: {message}',
            style='{',
            datefmt='%H:%M:%S',
        ))
        log.addHandler(stream)
        if environment.verbosity.value is not None:
            log.setLevel(environment.verbosity.value)
    log.propagate = False
    return log


class EnvironmentVariableSetting(Generic[_T]):
    """
    A setting that is read once from the variable `ISAAC_{name}`; the `read` method of a subclass
    converts the raw string, which is `None` when the variable is not set.
    """
    key: str
    value: Optional[_T]

    def __init__(self, name: str):
        self.key = F'ISAAC_{name}'
        self.value = self.read(os.environ.get(self.key))

    def read(self, raw: Optional[str]) -> Optional[_T]:
        return None


class EVBool(EnvironmentVariableSetting[bool]):
    def read(self, raw):
        value = (raw or '').lower().strip()
        if not value:
            return False
        if value.isdigit():
            return bool(int(value))
        return value not in {'no', 'off', 'false'}


class EVDecimal(EnvironmentVariableSetting[int]):
    """
    A signed decimal count, parsed exactly like a count given on the command line.
    """
    def read(self, raw):
        return parse_decimal(raw)


class EVLog(EnvironmentVariableSetting[Optional[LogLevel]]):
    def read(self, raw):
        if raw is None:
            return None
        if raw.isdigit():
            return LogLevel.FromVerbosity(int(raw))
        try:
            return LogLevel[raw.upper()]
        except KeyError:
            levels = ', '.join(ll.name for ll in LogLevel)
            logging.getLogger(__name__).warning(
                F'ignoring unknown verbosity "{raw!r}"; pick from: {levels}')
            return None


class environment:
    verbosity = EVLog('VERBOSITY')
    colorless = EVBool('COLORLESS')
    iterations = EVDecimal('ITERATIONS')
