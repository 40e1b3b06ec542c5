"""Reference Values for the MOS bulletins and where to find them."""

# Where the NWS serves a single station GFS MOS (MAV) bulletin
MAV_URI = "https://www.nws.noaa.gov/cgi-bin/mos/getmav.pl?sta={station}"
# seconds
HTTP_TIMEOUT = 30

# The row label that carries the forecast hour columns
HOUR_ROW_LABEL = "HR"
# Header tokens (0-based) after splitting on whitespace, the fourth token
# is the model/run label and is not used
HEADER_STATION_TOKEN = 0
HEADER_DATE_TOKEN = 4
HEADER_TIME_TOKEN = 5
HEADER_TIME_FORMAT = "%m/%d/%Y %H%M"

# First forecast column is this many hours after the bulletin issuance
FIRST_FORECAST_HOUR = 6
# Hours between columns
COLUMN_STEP_HOURS = 3

# Row label -> ForecastEntry attribute
ROW_LABELS = {
    "N/X": "high_low",
    "X/N": "high_low",
    "TMP": "temperature",
    "DPT": "dewpoint",
    "CLD": "cloud_cover",
    "WDR": "wind_direction",
    "WSP": "wind_speed",
    "P06": "precip_prob_6h",
    "P12": "precip_prob_12h",
    "Q06": "precip_amount_6h",
    "Q12": "precip_amount_12h",
    "T06": "thunder_prob_6h",
    "T12": "thunder_prob_12h",
    "POZ": "freezing_precip_prob",
    "POS": "sleet_prob",
    "TYP": "precip_type",
    "SNW": "snow_amount",
    "CIG": "ceiling_height",
    "VIS": "visibility",
    "OBV": "obstruction",
}
