"""Testing of util."""

import logging
from datetime import datetime, timezone
from unittest import mock

from pymos import util


def test_logger_level():
    """A terminal session logs at INFO."""
    # Mock sys.stdout.isatty
    with mock.patch("sys.stdout.isatty", return_value=True):
        log = util.logger()
        assert log.level == logging.INFO


def test_logger():
    """Test the default level and our formatter."""
    with mock.patch("sys.stdout.isatty", return_value=False):
        log = util.logger(name="pymos_testing")
    assert log.level == logging.WARNING
    assert isinstance(log.handlers[-1].formatter, util.CustomFormatter)


def test_custom_formatter():
    """Test that the formatter includes where the message came from."""
    record = logging.LogRecord(
        "pymos", logging.INFO, "/tmp/bah.py", 42, "hello %s", ("bob",), None
    )
    record.funcName = "myfunc"
    res = util.CustomFormatter().format(record)
    assert res.endswith("bah.py:42 myfunc] hello bob")


def test_utc():
    """Does the utc() function work as expected."""
    answer = datetime(2017, 2, 1, 2, 20).replace(tzinfo=timezone.utc)
    res = util.utc(2017, 2, 1, 2, 20)
    assert answer == res
    answer = datetime.now(timezone.utc)
    assert answer.year == util.utc().year


def test_get_test_file():
    """Test that we can read a test file."""
    assert util.get_test_filepath("MOS/MAVKFIT.txt").endswith(
        "data/product_examples/MOS/MAVKFIT.txt"
    )
    assert util.get_test_file("MOS/MAVKFIT.txt").startswith(" KFIT")
