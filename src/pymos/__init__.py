"""Python Utilities for NWS Model Output Statistics (MOS) bulletins

Decodes the fixed width GFS MOS text bulletin into typed, timestamped
forecast records and, optionally, fetches that bulletin from the NWS.
"""

import os
from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("pymos")
    pkgdir = os.path.dirname(os.path.dirname(os.path.realpath(__file__)))
    if not pkgdir.endswith("site-packages"):
        __version__ += "-dev"
except PackageNotFoundError:
    # package is not installed
    __version__ = "dev"
