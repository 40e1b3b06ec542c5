"""
 Supports decoding of the fixed width GFS MOS (MAV) text bulletin
"""
import re
from datetime import datetime, timedelta, timezone
from typing import List, Optional, Tuple

from pymos import reference
from pymos.exceptions import (
    EmptyInput,
    MalformedHeader,
    NoColumns,
    NoHourRow,
    TimestampParse,
)
from pymos.models.mos import ForecastEntry, Report, ReportMeta
from pymos.util import LOG

LABEL_RE = re.compile(r"^ *([^ ]+)")
HOUR_ROW_RE = re.compile(r"^ *([^ ]+) +.*$")
COLUMN_RE = re.compile(r"( *[0-9][0-9])")
INT_RE = re.compile(r"^[+-]?[0-9]+$")


def parse_header(line: Optional[str]) -> ReportMeta:
    """Get the station and issuance time from the first line.

    Args:
      line (str): The bulletin's first line, something like
        ``KFIT   GFS MOS GUIDANCE    1/02/2020  0000 UTC``

    Returns:
      ReportMeta
    """
    if line is None:
        raise MalformedHeader("no header line in the mos")
    tokens = line.split()
    if len(tokens) <= reference.HEADER_STATION_TOKEN:
        raise MalformedHeader("no station in the first line of the mos")
    if len(tokens) <= reference.HEADER_DATE_TOKEN:
        raise MalformedHeader("no date in the first line of the mos")
    if len(tokens) <= reference.HEADER_TIME_TOKEN:
        raise MalformedHeader("no time in the first line of the mos")
    date = tokens[reference.HEADER_DATE_TOKEN]
    hhmm = tokens[reference.HEADER_TIME_TOKEN]
    try:
        valid = datetime.strptime(
            f"{date} {hhmm}", reference.HEADER_TIME_FORMAT
        )
    except ValueError as exp:
        raise TimestampParse(
            f"`{date} {hhmm}` does not match `{reference.HEADER_TIME_FORMAT}`"
        ) from exp
    return ReportMeta(
        station_id=tokens[reference.HEADER_STATION_TOKEN],
        base_timestamp=valid.replace(tzinfo=timezone.utc),
    )


def find_hour_row(lines: List[str]) -> int:
    """Return the index of the line labelled with the hour row marker."""
    for idx, line in enumerate(lines):
        m = HOUR_ROW_RE.match(line)
        if m and m.group(1) == reference.HOUR_ROW_LABEL:
            return idx
    raise NoHourRow(
        f"could not find the `{reference.HOUR_ROW_LABEL}` line in the mos"
    )


def locate_columns(line: str) -> List[Tuple[int, int]]:
    """Compute the (start, end) character span of each hour column.

    The first span includes the blank run after the row label, so it is
    wider than the data it holds.
    """
    spans = [m.span() for m in COLUMN_RE.finditer(line)]
    if not spans:
        raise NoColumns(f"no hour columns found in `{line.strip()}`")
    return spans


def row_cells(line: str, label_end: int, spans) -> List[str]:
    """Slice one row into its per column cell text, whitespace trimmed."""
    cells = []
    for i, (start, end) in enumerate(spans):
        # labels vary in width, so column 0 starts where this row's
        # label ends and not where the hour row says it does
        if i == 0:
            start = label_end
        cells.append(line[start:end].strip())
    return cells


def _int_cell(cells, i):
    """Signed integer or None."""
    if INT_RE.match(cells[i]):
        return int(cells[i])
    if cells[i] != "":
        LOG.debug("column %s value `%s` is not an integer", i, cells[i])
    return None


def _str_cell(cells, i):
    """The code verbatim, even when blank."""
    return cells[i]


def _pair_cell(cells, i):
    """A `a/ b` pair straddling this column and the one before."""
    if i == 0:
        return None
    first, second = cells[i - 1], cells[i]
    # the slash lands in exactly one of the two columns
    if first.endswith("/") == second.startswith("/"):
        return None
    first = first.rstrip("/").strip()
    second = second.lstrip("/").strip()
    if INT_RE.match(first) and INT_RE.match(second):
        return int(first), int(second)
    LOG.debug("column %s pair `%s/%s` is not valid", i, first, second)
    return None


FIELD_DECODERS = {
    "high_low": _int_cell,
    "temperature": _int_cell,
    "dewpoint": _int_cell,
    "cloud_cover": _str_cell,
    "wind_direction": _int_cell,
    "wind_speed": _int_cell,
    "precip_prob_6h": _int_cell,
    "precip_prob_12h": _int_cell,
    "precip_amount_6h": _int_cell,
    "precip_amount_12h": _int_cell,
    "thunder_prob_6h": _pair_cell,
    "thunder_prob_12h": _pair_cell,
    "freezing_precip_prob": _int_cell,
    "sleet_prob": _int_cell,
    "precip_type": _str_cell,
    "snow_amount": _int_cell,
    "ceiling_height": _int_cell,
    "visibility": _int_cell,
    "obstruction": _str_cell,
}


def map_fields(lines: List[str], spans) -> List[dict]:
    """Decode each labelled row into per column field dictionaries.

    Args:
      lines (list): the data rows, without the header and hour row
      spans (list): column spans from `locate_columns`

    Returns:
      list of dicts, one per column, holding only the fields found
    """
    data = [{} for _ in spans]
    for line in lines:
        m = LABEL_RE.match(line)
        if m is None:
            continue
        label = m.group(1)
        vname = reference.ROW_LABELS.get(label)
        if vname is None:
            LOG.debug("ignoring row with label `%s`", label)
            continue
        decoder = FIELD_DECODERS[vname]
        cells = row_cells(line, m.end(), spans)
        for i, entry in enumerate(data):
            entry[vname] = decoder(cells, i)
    return data


def forecast_hour(i: int, count: int) -> int:
    """Hours after issuance for column `i` of `count` columns.

    Columns step by three hours, but the last two of a long bulletin
    cover six hour windows.
    """
    add_hours = reference.COLUMN_STEP_HOURS * i + reference.FIRST_FORECAST_HOUR
    if count > 2 and i >= count - 2:
        mult = 3 - (count - i)
        add_hours += reference.COLUMN_STEP_HOURS * mult
    return add_hours


def assign_timestamps(base: datetime, count: int) -> List[datetime]:
    """Return the valid time of each of the `count` columns."""
    return [
        base + timedelta(hours=forecast_hour(i, count)) for i in range(count)
    ]


def parser(text: str) -> Report:
    """Decode a MOS bulletin.

    Args:
      text (str): The bulletin text, the first line being the header.

    Returns:
      Report
    """
    if text is None or text.strip() == "":
        raise EmptyInput("mos string is empty")
    lines = text.split("\n")
    meta = parse_header(lines[0])
    hridx = find_hour_row(lines)
    spans = locate_columns(lines[hridx])
    rows = [ln for i, ln in enumerate(lines) if i not in (0, hridx)]
    data = map_fields(rows, spans)
    times = assign_timestamps(meta.base_timestamp, len(data))
    LOG.debug(
        "%s %s decoded %s columns",
        meta.station_id,
        meta.base_timestamp,
        len(data),
    )
    return Report(
        meta=meta,
        entries=[
            ForecastEntry(timestamp=ts, **entry)
            for ts, entry in zip(times, data)
        ],
        raw_text=text,
    )
