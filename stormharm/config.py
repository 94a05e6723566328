"""
Storm Harm Analytics — Configuration: paths, column mapping, multipliers.
"""
import os
from pathlib import Path

# ---------------------------------------------------------------------------
# Paths — override with STORMHARM_DATA_DIR env var
# ---------------------------------------------------------------------------
_data_dir = Path(os.environ.get("STORMHARM_DATA_DIR", str(Path.home() / "StormHarm")))
INBOX_FOLDER = _data_dir / "inbox"
REPORTS_FOLDER = _data_dir / "reports"

# ---------------------------------------------------------------------------
# File discovery: plain or compressed storm-data CSV exports
# ---------------------------------------------------------------------------
STORM_FILE_SUFFIXES = (".csv", ".csv.gz", ".csv.bz2", ".csv.zip")

# ---------------------------------------------------------------------------
# Column mapping from raw NOAA storm-data CSV → internal names
# ---------------------------------------------------------------------------
COLUMN_MAP = {
    "EVTYPE": "event_type",
    "FATALITIES": "fatalities",
    "INJURIES": "injuries",
    "PROPDMG": "property_damage",
    "PROPDMGEXP": "property_exp",
    "CROPDMG": "crop_damage",
    "CROPDMGEXP": "crop_exp",
}

REQUIRED_COLUMNS = list(COLUMN_MAP.values())

COUNT_COLS = ["fatalities", "injuries"]
DAMAGE_COLS = ["property_damage", "crop_damage"]
EXP_COLS = ["property_exp", "crop_exp"]

# Damage column → (magnitude code column, rescaled cost column)
DAMAGE_SCALING = {
    "property_damage": ("property_exp", "property_cost"),
    "crop_damage": ("crop_exp", "crop_cost"),
}

# ---------------------------------------------------------------------------
# Magnitude codes (matched after uppercasing). Anything else scales by 1.
# ---------------------------------------------------------------------------
MAGNITUDE_MULTIPLIERS = {
    "K": 1e3,
    "M": 1e6,
    "B": 1e9,
}
DEFAULT_MULTIPLIER = 1.0

# ---------------------------------------------------------------------------
# Reporting
# ---------------------------------------------------------------------------
TOP_N = 10

# Costs are reported in billions of USD; applied only when displaying
COST_DISPLAY_SCALE = 1e9
