"""Retrieve a station's MOS bulletin from the NWS website.

The decoder in :mod:`pymos.nws.products.mos` only deals with text, this
module does the web part: fetch the bulletin page, pull the text out of
its ``<pre>`` block and hand that to the decoder.
"""

import re
from typing import Optional, Protocol

# third party
import httpx
from bs4 import BeautifulSoup

from pymos import reference
from pymos.exceptions import ExtractionError, InvalidStation, RetrievalError
from pymos.models.mos import Report
from pymos.nws.products.mos import parser
from pymos.util import LOG

STATION_RE = re.compile(r"^[A-Z0-9]{4}$")


class MOSFetcher(Protocol):
    """Something that returns the bulletin page for a station."""

    def fetch(self, station: str) -> str:
        """Return the HTML document for this station."""


def normalize_station(station: str) -> str:
    """Return the upper case four character station identifier."""
    sid = (station or "").strip().upper()
    if not STATION_RE.match(sid):
        raise InvalidStation(
            f"station `{station}` is not a 4 character identifier"
        )
    return sid


def fetch_html(
    station: str,
    uri: str = reference.MAV_URI,
    timeout: float = reference.HTTP_TIMEOUT,
    client: Optional[httpx.Client] = None,
) -> str:
    """Fetch the bulletin page for a station.

    Args:
      station (str): four character station identifier, any case.
      uri (str): URL template with a ``{station}`` placeholder.
      timeout (float): seconds to wait on the NWS.
      client (httpx.Client, optional): client to make the request with.

    Returns:
      str HTML document
    """
    url = uri.format(station=normalize_station(station))
    LOG.info("fetching %s", url)
    try:
        if client is None:
            resp = httpx.get(url, timeout=timeout)
        else:
            resp = client.get(url, timeout=timeout)
        resp.raise_for_status()
    except httpx.HTTPError as exp:
        raise RetrievalError(f"fetch of {url} failed: {exp}") from exp
    LOG.debug("got %s bytes from %s", len(resp.content), url)
    return resp.text


class HTTPMOSFetcher:
    """Fetch bulletin pages over HTTP with httpx."""

    def __init__(
        self,
        uri: str = reference.MAV_URI,
        timeout: float = reference.HTTP_TIMEOUT,
        client: Optional[httpx.Client] = None,
    ):
        """constructor"""
        self.uri = uri
        self.timeout = timeout
        self.client = client

    def fetch(self, station: str) -> str:
        """Return the HTML document for this station."""
        return fetch_html(
            station, uri=self.uri, timeout=self.timeout, client=self.client
        )


def extract_pre(html: str) -> str:
    """Return the text of the first <pre> block in the document."""
    soup = BeautifulSoup(html, "html.parser")
    pre = soup.find("pre")
    if pre is None:
        raise ExtractionError("did not find a pre block containing the data")
    # the header must be the first line of what we decode
    return pre.get_text().lstrip("\r\n")


def get(station: str, fetcher: Optional[MOSFetcher] = None) -> Report:
    """Fetch and decode the current MOS bulletin for a station.

    Args:
      station (str): four character station identifier, any case.
      fetcher (MOSFetcher, optional): what gets the bulletin page, defaults
        to :class:`HTTPMOSFetcher`.

    Returns:
      Report
    """
    if fetcher is None:
        fetcher = HTTPMOSFetcher()
    html = fetcher.fetch(normalize_station(station))
    return parser(extract_pre(html))
