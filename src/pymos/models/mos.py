"""MOS Data Model."""
# pylint: disable=too-few-public-methods

from datetime import datetime
from typing import List, Optional, Tuple

# third party
from pydantic import BaseModel, ConfigDict, Field


class ReportMeta(BaseModel):
    """The bulletin header."""

    model_config = ConfigDict(frozen=True)

    station_id: str = Field(..., min_length=1)
    base_timestamp: datetime


class ForecastEntry(BaseModel):
    """One forecast hour column of the bulletin."""

    model_config = ConfigDict(frozen=True)

    timestamp: datetime
    high_low: Optional[int] = None
    temperature: Optional[int] = None
    dewpoint: Optional[int] = None
    cloud_cover: Optional[str] = None
    wind_direction: Optional[int] = None
    wind_speed: Optional[int] = None
    precip_prob_6h: Optional[int] = None
    precip_prob_12h: Optional[int] = None
    precip_amount_6h: Optional[int] = None
    precip_amount_12h: Optional[int] = None
    thunder_prob_6h: Optional[Tuple[int, int]] = None
    thunder_prob_12h: Optional[Tuple[int, int]] = None
    freezing_precip_prob: Optional[int] = None
    sleet_prob: Optional[int] = None
    precip_type: Optional[str] = None
    snow_amount: Optional[int] = None
    ceiling_height: Optional[int] = None
    visibility: Optional[int] = None
    obstruction: Optional[str] = None


class Report(BaseModel):
    """A decoded MOS bulletin."""

    model_config = ConfigDict(frozen=True)

    meta: ReportMeta
    entries: List[ForecastEntry] = Field(default_factory=list)
    raw_text: str

    def to_json(self, **kwargs) -> str:
        """Serialize this report, keyword arguments go to pydantic."""
        kwargs.setdefault("exclude_none", False)
        return self.model_dump_json(**kwargs)
