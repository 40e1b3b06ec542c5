# -*- coding: utf-8 -*-
"""Utility functions for pymos package

This module contains utility functions used by various parts of the codebase.
"""

import logging
import os
import sys
import time
from datetime import datetime, timezone

# Setup a default logging instance for this module
LOG = logging.getLogger("pymos")
LOG.addHandler(logging.NullHandler())


class CustomFormatter(logging.Formatter):
    """A custom log formatter class."""

    def format(self, record):
        """Return a string!"""
        return (
            f"[{time.strftime('%H:%M:%S', time.localtime(record.created))} "
            f"{(record.relativeCreated / 1000.0):6.3f} "
            f"{record.filename}:{record.lineno} {record.funcName}] "
            f"{record.getMessage()}"
        )


def get_test_filepath(name: str) -> str:
    """Helper to get a testing filename, full path."""
    return f"{os.getcwd()}/data/product_examples/{name}"


def get_test_file(name):
    """Helper to get data for test usage."""
    with open(get_test_filepath(name), "rb") as fp:
        return fp.read().decode("utf-8")


def logger(name="pymos", level=None):
    """Attach a CustomFormatter stream handler to a logger and return it.

    The cli calls this, library code only ever logs through `LOG`.

    Args:
      name (str): logger to configure, default pymos
      level (int): logging level, defaults to INFO when stdout is a
        terminal and WARNING otherwise

    Returns:
      logging.Logger
    """
    ch = logging.StreamHandler()
    ch.setFormatter(CustomFormatter())
    log = logging.getLogger(name)
    log.addHandler(ch)
    if level is None and sys.stdout.isatty():
        level = logging.INFO
    log.setLevel(level if level is not None else logging.WARNING)
    return log


def utc(year=None, month=1, day=1, hour=0, minute=0, second=0, microsecond=0):
    """Create a datetime instance with tzinfo=timezone.utc

    When no arguments are provided, returns `datetime.now(timezone.utc)`.

    Returns:
      datetime with tzinfo set
    """
    if year is None:
        return datetime.now(timezone.utc)
    return datetime(
        year, month, day, hour, minute, second, microsecond
    ).replace(tzinfo=timezone.utc)
