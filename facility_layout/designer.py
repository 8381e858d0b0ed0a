"""
Visual designer - shell sizing and unit counts from a sport + size pick

Turns a user selection (one or more sports, a typical size) into the inputs
the layout engine consumes:

    shell area    -> typical gross SF for the sport(s) and size
    unit counts   -> recommended courts/tunnels/fields, summed across sports

Shell selection rules:
    - one sport:                its own shell table (fallback 16,000 SF)
    - several, incl. soccer:    soccer drives the shell (fallback 36,000 SF)
    - several, no soccer:       multi-sport shell (fallback 26,000 SF)

The tables live in data/facility_presets.json (Omaha baseline) and are
editable without touching code. A selection is built up front and passed in
whole; nothing here keeps UI state.
"""

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional

from .gallery import LayoutChoice
from .geometry.core_elements import AdminBlock, AnchorCorner
from .geometry.layout_modes import DEFAULT_ASPECT_RATIO
from .pipeline import LayoutInputs

SOCCER = "soccer_indoor_small_sided"
MULTI_SPORT = "multi_sport"

SINGLE_SPORT_FALLBACK_SF = 16000
SOCCER_FALLBACK_SF = 36000
MULTI_SPORT_FALLBACK_SF = 26000

SHELL_PREVIEW_WIDTH_PX = 560


def load_facility_presets(path: Optional[Path] = None) -> Dict[str, Any]:
    base = path or Path(__file__).resolve().parent / "data" / "facility_presets.json"
    with open(base, "r", encoding="utf-8") as fp:
        return json.load(fp)


@dataclass(frozen=True)
class DesignerSelection:
    """Sports picked by the user and the typical size ('small', 'medium', 'large')"""
    sports: List[str] = field(default_factory=list)
    size: Optional[str] = None


class FacilityDesigner:
    """
    Maps designer selections to shell areas, unit counts and hand-off payloads

    Args:
        presets: Preset tables; loaded from the bundled JSON when omitted
    """

    def __init__(self, presets: Optional[Dict[str, Any]] = None):
        self.presets = presets if presets is not None else load_facility_presets()
        self.sport_labels: Dict[str, str] = self.presets.get('sports', {})
        self.size_labels: Dict[str, str] = self.presets.get('sizes', {})
        self.shell_sf: Dict[str, Dict[str, float]] = self.presets.get('shell_sf', {})
        self.unit_counts: Dict[str, Dict[str, Dict[str, int]]] = self.presets.get('unit_counts', {})
        self.size_tiers: Dict[str, Dict[str, Any]] = self.presets.get('size_tiers', {})

    # ------------------------------------------------------------ shell sizing
    def shell_area_for(self, selection: DesignerSelection) -> float:
        """
        Gross shell area (SF) for a selection

        Returns:
            0 when no size or no sports are selected
        """
        if not selection.size or not selection.sports:
            return 0
        size = selection.size

        if len(selection.sports) == 1:
            sport = selection.sports[0]
            return self.shell_sf.get(sport, {}).get(size) or SINGLE_SPORT_FALLBACK_SF
        if SOCCER in selection.sports:
            return self.shell_sf.get(SOCCER, {}).get(size) or SOCCER_FALLBACK_SF
        return self.shell_sf.get(MULTI_SPORT, {}).get(size) or MULTI_SPORT_FALLBACK_SF

    def aggregate_counts(self, selection: DesignerSelection) -> Dict[str, int]:
        """
        Recommended unit counts summed over the selected sports

        Sports without a count table (e.g. football) contribute nothing.
        """
        if not selection.size or not selection.sports:
            return {}
        bundle: Dict[str, int] = {}
        for sport in selection.sports:
            per_size = self.unit_counts.get(sport)
            if not per_size:
                continue
            for key, count in per_size.get(selection.size, {}).items():
                bundle[key] = bundle.get(key, 0) + (count or 0)
        return bundle

    def shell_preview_inputs(self, selection: DesignerSelection) -> LayoutInputs:
        """Layout inputs for the empty-shell preview (lobby only, no units)"""
        area = self.shell_area_for(selection) or SINGLE_SPORT_FALLBACK_SF
        return LayoutInputs(
            gross_area_sqft=area,
            units=[],
            admin_blocks=[AdminBlock("Lobby", 40, 25, AnchorCorner.FRONT_LEFT)],
            aspect_ratio=DEFAULT_ASPECT_RATIO,
            pixel_width=SHELL_PREVIEW_WIDTH_PX,
            title="Typical building shell",
            building_label=f"{round(area):,} sf",
        )

    # ------------------------------------------------------------ size tiers
    def tier_layout_inputs(self, tier_key: str, variant: int = 0) -> LayoutInputs:
        """
        Layout inputs for a facility size tier preview

        The aspect ratio comes from the tier's nominal shell dimensions. The
        variant index is clamped to the available previews.

        Raises:
            KeyError: If the tier does not exist
        """
        if tier_key not in self.size_tiers:
            raise KeyError(f"Unknown size tier: {tier_key}")
        tier = self.size_tiers[tier_key]
        previews = tier['preview']
        counts = previews[max(0, min(variant, len(previews) - 1))]
        dims = tier['dims']
        return LayoutInputs(
            gross_area_sqft=tier['gross'],
            counts=dict(counts),
            aspect_ratio=dims['w'] / dims['h'],
            pixel_width=320,
            show_legend=False,
            title=tier['label'],
            building_label=f"{dims['w']}' × {dims['h']}'",
        )

    # ------------------------------------------------------------ hand-off
    def build_layout_selection(self, selection: DesignerSelection,
                               choice: LayoutChoice) -> Dict[str, Any]:
        """
        Payload handed to the facility wizard when a layout is chosen

        Raises:
            ValueError: If no size has been selected
        """
        if not selection.size:
            raise ValueError("A facility size must be selected before choosing a layout")

        gross_sf = self.shell_area_for(selection) or SINGLE_SPORT_FALLBACK_SF
        counts = self.aggregate_counts(selection)
        return {
            'selectedSports': list(selection.sports),
            'size': selection.size,
            'layoutChoice': choice.to_dict(),
            'grossSf': gross_sf,
            'counts': counts,
            'facilityType': "lease",
            'clearHeight': "24",
            'totalSquareFootage': str(gross_sf),
            'numberOfCourts': (counts.get('basketball_courts_full')
                               or counts.get('volleyball_courts')
                               or counts.get('pickleball_courts') or ''),
            'numberOfFields': counts.get('soccer_field_small') or '',
            'numberOfCages': counts.get('baseball_tunnels') or '',
            'amenities': ["lobby", "storage"],
        }
