"""Custom Exceptions."""


class MOSError(Exception):
    """Base Exception for everything pymos raises."""

    kind = "MOSError"
    origin = "decoder"


class EmptyInput(MOSError):
    """The raw text has no lines."""

    kind = "EmptyInput"


class MalformedHeader(MOSError):
    """Header line is missing its station, date or time token."""

    kind = "MalformedHeader"


class TimestampParse(MOSError):
    """Header date/time tokens do not match the expected format."""

    kind = "TimestampParse"


class NoHourRow(MOSError):
    """No line carries the hour row label."""

    kind = "NoHourRow"


class NoColumns(MOSError):
    """The hour row has no two digit columns."""

    kind = "NoColumns"


class InvalidStation(MOSError):
    """Station identifier is not four alphanumeric characters."""

    kind = "InvalidStation"
    origin = "retrieval"


class RetrievalError(MOSError):
    """Fetching the bulletin page failed."""

    kind = "RetrievalError"
    origin = "retrieval"


class ExtractionError(MOSError):
    """The bulletin page has no preformatted block."""

    kind = "ExtractionError"
    origin = "extraction"
