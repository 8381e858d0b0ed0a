"""
Sport unit catalog - nominal top-view footprints

Every sport surface the layout engine can place is listed here with its
real-world footprint in feet, including runouts:

    Unit                     Footprint      Area
    ----------------------   ------------   ---------
    Volleyball court         72' x 36'      2,592 SF
    Pickleball court         60' x 30'      1,800 SF
    Basketball (full)        112' x 56'     ~6,272 SF
    Basketball (half)        56' x 56'      3,136 SF
    Batting tunnel           70' x 15'      1,050 SF
    Training turf zone       120' x 60'     7,200 SF
    Small-sided soccer       180' x 80'     14,400 SF
    Football field           240' x 80'     19,200 SF

The table is static and shared by every layout computation.
"""

from enum import Enum
from typing import Dict, NamedTuple, Optional, Union


class UnitKind(Enum):
    """Categories of sports surface with a fixed nominal footprint"""
    VOLLEYBALL_COURT = "volleyball_court"
    PICKLEBALL_COURT = "pickleball_court"
    BASKETBALL_COURT_FULL = "basketball_court_full"
    BASKETBALL_COURT_HALF = "basketball_court_half"
    BASEBALL_TUNNEL = "baseball_tunnel"
    TRAINING_TURF_ZONE = "training_turf_zone"
    SOCCER_FIELD_SMALL = "soccer_field_small"
    FOOTBALL_FIELD = "football_field"


class UnitDimensions(NamedTuple):
    width: float   # feet
    height: float  # feet
    label: str


UNIT_DIMENSIONS_FT: Dict[str, UnitDimensions] = {
    UnitKind.VOLLEYBALL_COURT.value:      UnitDimensions(72, 36, "Volleyball"),
    UnitKind.PICKLEBALL_COURT.value:      UnitDimensions(60, 30, "Pickleball"),
    UnitKind.BASKETBALL_COURT_FULL.value: UnitDimensions(112, 56, "Basketball (Full)"),
    UnitKind.BASKETBALL_COURT_HALF.value: UnitDimensions(56, 56, "Basketball (Half)"),
    UnitKind.BASEBALL_TUNNEL.value:       UnitDimensions(70, 15, "Batting Tunnel"),
    UnitKind.TRAINING_TURF_ZONE.value:    UnitDimensions(120, 60, "Training Turf"),
    UnitKind.SOCCER_FIELD_SMALL.value:    UnitDimensions(180, 80, "Small Soccer"),
    UnitKind.FOOTBALL_FIELD.value:        UnitDimensions(240, 80, "Football Field"),
}


# ===== COLOR PALETTE =====

BRAND_BLUE = "#0B63E5"
BRAND_GREEN = "#00A66A"
BRAND_GRAY = "#C7D2FE"
TURF_GREEN = "#65A30D"
FOOTBALL_BROWN = "#8B4513"

UNIT_STROKE = "#111111"

# Checked in order; first family keyword contained in the kind wins
FAMILY_FILLS = (
    ("basketball", BRAND_BLUE),
    ("baseball", BRAND_GREEN),
    ("soccer", TURF_GREEN),
    ("football", FOOTBALL_BROWN),
    ("turf", TURF_GREEN),
)


def kind_key(kind: Union[UnitKind, str]) -> str:
    """Return the string key for a UnitKind or a raw kind identifier"""
    if isinstance(kind, UnitKind):
        return kind.value
    return str(kind)


def lookup_unit(kind: Union[UnitKind, str]) -> Optional[UnitDimensions]:
    """
    Look up the nominal footprint for a unit kind

    Args:
        kind: UnitKind member or its string value

    Returns:
        UnitDimensions, or None for kinds not in the catalog
    """
    return UNIT_DIMENSIONS_FT.get(kind_key(kind))


def default_fill_for(kind: Union[UnitKind, str]) -> str:
    """Default fill color for a unit kind, chosen by sport family"""
    key = kind_key(kind)
    for family, fill in FAMILY_FILLS:
        if family in key:
            return fill
    return BRAND_GRAY
