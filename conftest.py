"""Centralized Testing Stuff."""

# third party
import pytest

# This repo
from pymos.util import get_test_file


@pytest.fixture()
def mav_text():
    """Return the text of a full GFS MOS bulletin."""
    return get_test_file("MOS/MAVKFIT.txt")


@pytest.fixture()
def mav_html():
    """Return the NWS web page holding the GFS MOS bulletin."""
    return get_test_file("MOS/MAVKFIT.html")
