"""Test the command line interface."""

import json

from click.testing import CliRunner
from pytest_httpx import HTTPXMock

from pymos import reference
from pymos.cli import main
from pymos.util import get_test_filepath


def test_file():
    """Test decoding a local file."""
    runner = CliRunner()
    result = runner.invoke(
        main, ["--file", get_test_filepath("MOS/MAVKFIT.txt")]
    )
    assert result.exit_code == 0
    lines = result.output.strip().split("\n")
    assert lines[0] == "KFIT 2020-01-02 00:00Z"
    assert len(lines) == 22
    assert lines[1].startswith("2020-01-02 06:00Z temperature=30")
    assert "thunder_prob_6h=12/3" in lines[-1]


def test_json():
    """Test the JSON output."""
    runner = CliRunner()
    result = runner.invoke(
        main, ["--json", "--file", get_test_filepath("MOS/MAVKFIT.txt")]
    )
    assert result.exit_code == 0
    data = json.loads(result.output)
    assert data["meta"]["station_id"] == "KFIT"
    assert len(data["entries"]) == 21


def test_raw(mav_text):
    """Test that raw prints the bulletin."""
    runner = CliRunner()
    result = runner.invoke(
        main, ["--raw", "--file", get_test_filepath("MOS/MAVKFIT.txt")]
    )
    assert result.exit_code == 0
    assert result.output == mav_text + "\n"


def test_station(httpx_mock: HTTPXMock, mav_html):
    """Test fetching by station."""
    httpx_mock.add_response(
        url=reference.MAV_URI.format(station="KFIT"), text=mav_html
    )
    runner = CliRunner()
    result = runner.invoke(main, ["kfit"])
    assert result.exit_code == 0
    assert result.output.startswith("KFIT 2020-01-02 00:00Z")


def test_decode_failure():
    """Test that a decode failure exits non-zero."""
    runner = CliRunner()
    result = runner.invoke(
        main, ["--file", get_test_filepath("MOS/MAV_nohr.txt")]
    )
    assert result.exit_code == 1
    assert "NoHourRow" in result.output


def test_usage():
    """Test that we need something to work with."""
    runner = CliRunner()
    result = runner.invoke(main, [])
    assert result.exit_code == 2
