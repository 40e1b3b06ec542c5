"""Command line access to MOS bulletins.

Example:
  pymos KFIT
  pymos --file KFIT.txt --json
"""

import logging

import click

from pymos.exceptions import MOSError
from pymos.fetch import get
from pymos.nws.products.mos import parser
from pymos.util import LOG, logger


def format_entry(entry) -> str:
    """One line summary of a ForecastEntry."""
    parts = [f"{entry.timestamp:%Y-%m-%d %H:%MZ}"]
    for key, val in entry.model_dump(exclude={"timestamp"}).items():
        if val is None:
            continue
        if isinstance(val, (tuple, list)):
            val = "/".join(str(x) for x in val)
        parts.append(f"{key}={val}")
    return " ".join(parts)


@click.command()
@click.argument("station", required=False)
@click.option(
    "--file",
    "filename",
    type=click.Path(exists=True, dir_okay=False),
    help="Decode this bulletin text file instead of fetching one.",
)
@click.option("--json", "as_json", is_flag=True, default=False)
@click.option("--raw", is_flag=True, default=False, help="Print raw text.")
@click.option("-v", "--verbose", is_flag=True, default=False)
def main(station, filename, as_json, raw, verbose):
    """Decode the GFS MOS bulletin for STATION."""
    logger(level=logging.INFO if verbose else None)
    if station is None and filename is None:
        raise click.UsageError("Provide a STATION or --file")
    try:
        if filename is not None:
            with open(filename, encoding="utf-8") as fh:
                report = parser(fh.read())
        else:
            report = get(station)
    except MOSError as exp:
        LOG.info("decode failed with %s", exp.kind)
        raise click.ClickException(f"{exp.kind}: {exp}") from exp
    if raw:
        click.echo(report.raw_text)
    elif as_json:
        click.echo(report.to_json(indent=2))
    else:
        click.echo(
            f"{report.meta.station_id} "
            f"{report.meta.base_timestamp:%Y-%m-%d %H:%MZ}"
        )
        for entry in report.entries:
            click.echo(format_entry(entry))


if __name__ == "__main__":
    main()
