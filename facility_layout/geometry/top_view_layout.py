"""
Top-View Layout Module - 2D Spatial Facility Layout

This module composes the layout stages for one parameter set:

    gross area + aspect + buffer  ->  BuildingEnvelope
    unit requests                 ->  Rectangles (largest first)
    rectangles + algorithm + gap  ->  PackingResult
    admin blocks                  ->  corner-snapped PlacedRectangles

TWO SEPARATE PLACEMENT PASSES:
==============================

1. SPORT UNITS (packing.py):
   - Courts, tunnels, turf zones, fields
   - Packed with a greedy algorithm, never overlapping each other
   - Units that do not fit are dropped and reported in the PackingResult

2. ADMIN BLOCKS (this module):
   - Lobby, storage, office, party room
   - Snapped directly to an interior corner
   - NOT checked against sport units or against each other; overlap is an
     accepted limitation of a preview-quality plan

Coordinates are in feet relative to the interior origin. The render layer
adds the perimeter buffer when drawing.
"""

from typing import Dict, Iterable, List, Optional, Sequence

from .core_elements import (
    ADMIN_FILL, AdminBlock, AnchorCorner, PlacedRectangle, UnitRequest,
)
from .envelope import BuildingEnvelope, compute_envelope
from .expansion import expand_unit_requests
from .layout_modes import (
    DEFAULT_ASPECT_RATIO, DEFAULT_GAP_FT, DEFAULT_PERIMETER_FT, LayoutAlgorithm,
)
from .packing import PackingResult, pack_rectangles
from .unit_catalog import UNIT_STROKE


def place_admin_blocks(blocks: Iterable[AdminBlock], inner_w: float,
                       inner_h: float) -> List[PlacedRectangle]:
    """
    Snap admin blocks to the corners of the interior rectangle

        front-left  -> (0, 0)
        front-right -> (inner_w - w, 0)
        back-left   -> (0, inner_h - h)
        back-right  -> (inner_w - w, inner_h - h)

    Args:
        blocks: AdminBlock objects
        inner_w: Interior width (feet)
        inner_h: Interior height (feet)

    Returns:
        One PlacedRectangle per block, in input order
    """
    placed = []
    for block in blocks:
        anchor = AnchorCorner.parse(block.anchor)
        x, y = 0.0, 0.0
        if anchor in (AnchorCorner.FRONT_RIGHT, AnchorCorner.BACK_RIGHT):
            x = inner_w - block.width
        if anchor in (AnchorCorner.BACK_LEFT, AnchorCorner.BACK_RIGHT):
            y = inner_h - block.height

        placed.append(PlacedRectangle(
            x, y, block.width, block.height, block.label, ADMIN_FILL, UNIT_STROKE
        ))
    return placed


class TopViewLayout:
    """
    Complete 2D top-view layout for one facility configuration

    The layout is computed once in the constructor from scratch; nothing is
    cached between instances. Re-run by constructing a new TopViewLayout.
    """

    def __init__(self, gross_area_sqft: float, units: Sequence[UnitRequest],
                 admin_blocks: Optional[Sequence[AdminBlock]] = None,
                 algorithm=LayoutAlgorithm.ROWS,
                 aspect_ratio: float = DEFAULT_ASPECT_RATIO,
                 perimeter_ft: float = DEFAULT_PERIMETER_FT,
                 gap_ft: float = DEFAULT_GAP_FT):
        """
        Initialize top-view layout

        Args:
            gross_area_sqft: Shell gross floor area (SF)
            units: Requested sport units
            admin_blocks: Optional support spaces snapped to corners
            algorithm: LayoutAlgorithm or tag ('rows', 'columns', 'staggered')
            aspect_ratio: Building width / height
            perimeter_ft: Walkway buffer inside the shell (feet)
            gap_ft: Spacing between units (feet)
        """
        self.gross_area_sqft = gross_area_sqft
        self.units = list(units)
        self.admin_blocks = list(admin_blocks or [])
        self.algorithm = LayoutAlgorithm.parse(algorithm)
        self.aspect_ratio = aspect_ratio
        self.perimeter_ft = perimeter_ft
        self.gap_ft = gap_ft

        self.envelope: BuildingEnvelope = compute_envelope(
            gross_area_sqft, aspect_ratio, perimeter_ft
        )
        self.items = expand_unit_requests(self.units)
        self.packing: PackingResult = pack_rectangles(
            self.algorithm,
            self.envelope.inner_width_ft,
            self.envelope.inner_height_ft,
            self.items,
            gap_ft,
        )
        self.placed_admin = place_admin_blocks(
            self.admin_blocks,
            self.envelope.inner_width_ft,
            self.envelope.inner_height_ft,
        )

    @property
    def placed_units(self) -> List[PlacedRectangle]:
        return self.packing.placed

    @property
    def utilization(self) -> float:
        """
        Fraction of the interior covered by placed sport units

        Returns:
            Placed unit area / interior area (0.0 when the interior is empty)
        """
        inner = self.envelope.inner_area_sqft
        if inner <= 0:
            return 0.0
        return sum(p.area for p in self.placed_units) / inner

    def counts_by_label(self) -> Dict[str, Dict[str, int]]:
        """
        Requested vs placed units per label

        Returns:
            {label: {'requested': n, 'placed': n, 'dropped': n}}
        """
        counts: Dict[str, Dict[str, int]] = {}
        for item in self.items:
            entry = counts.setdefault(item.label, {'requested': 0, 'placed': 0, 'dropped': 0})
            entry['requested'] += 1
        for p in self.placed_units:
            counts[p.label]['placed'] += 1
        for entry in counts.values():
            entry['dropped'] = entry['requested'] - entry['placed']
        return counts

    def get_summary(self) -> Dict:
        """
        Return summary of the layout

        Returns:
            Dict with envelope dimensions, fit counts and placements
        """
        env = self.envelope
        return {
            'algorithm': self.algorithm.value,
            'envelope': {
                'gross_area_sqft': env.gross_area_sqft,
                'aspect_ratio': env.aspect_ratio,
                'perimeter_ft': env.perimeter_buffer_ft,
                'outer_width_ft': env.outer_width_ft,
                'outer_height_ft': env.outer_height_ft,
                'inner_width_ft': env.inner_width_ft,
                'inner_height_ft': env.inner_height_ft,
            },
            'requested_units': self.packing.requested_count,
            'placed_units': self.packing.placed_count,
            'dropped_units': self.packing.dropped_count,
            'utilization': self.utilization,
            'units': [
                {'label': p.label, 'x': p.x, 'y': p.y, 'width': p.width, 'height': p.height}
                for p in self.placed_units
            ],
            'admin_blocks': [
                {'label': p.label, 'x': p.x, 'y': p.y, 'width': p.width, 'height': p.height}
                for p in self.placed_admin
            ],
        }
