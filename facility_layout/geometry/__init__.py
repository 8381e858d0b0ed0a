"""
Geometry package for the sports facility top-view layout

This package provides the foot-based layout calculations:

Main Classes:
    - TopViewLayout: Facade running envelope -> expansion -> packing -> admin blocks
    - BuildingEnvelope: Shell and interior dimensions
    - UnitRequest / Rectangle / PlacedRectangle / AdminBlock: layout elements
    - PackingResult: Placed and unplaced units from one packing pass

Architecture:
    Each stage lives in its own module and is a pure function of its inputs,
    so every stage can be tested on its own.
"""

from .unit_catalog import UnitKind, UnitDimensions, UNIT_DIMENSIONS_FT, lookup_unit, default_fill_for
from .core_elements import UnitRequest, Rectangle, PlacedRectangle, AdminBlock, AnchorCorner
from .layout_modes import LayoutAlgorithm, get_layout_defaults
from .envelope import BuildingEnvelope, compute_envelope
from .expansion import COUNT_KEY_KINDS, expand_unit_requests, unit_requests_from_counts
from .packing import PackingResult, pack_rows, pack_columns, pack_staggered, pack_rectangles
from .top_view_layout import TopViewLayout, place_admin_blocks

__all__ = [
    # Dimension table
    'UnitKind',
    'UnitDimensions',
    'UNIT_DIMENSIONS_FT',
    'lookup_unit',
    'default_fill_for',

    # Elements
    'UnitRequest',
    'Rectangle',
    'PlacedRectangle',
    'AdminBlock',
    'AnchorCorner',

    # Stages
    'LayoutAlgorithm',
    'get_layout_defaults',
    'BuildingEnvelope',
    'compute_envelope',
    'expand_unit_requests',
    'unit_requests_from_counts',
    'COUNT_KEY_KINDS',
    'PackingResult',
    'pack_rows',
    'pack_columns',
    'pack_staggered',
    'pack_rectangles',
    'place_admin_blocks',

    # Facade
    'TopViewLayout',
]
