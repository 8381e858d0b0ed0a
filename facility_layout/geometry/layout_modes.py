"""
Layout mode configuration for the top-view packing engine

Defines the three packing algorithms and the fixed defaults used whenever a
caller omits a layout parameter.
"""

from enum import Enum


class LayoutAlgorithm(Enum):
    """
    Greedy packing strategies

    ROWS: fill left to right, wrap to a new row
    COLUMNS: fill top to bottom, wrap to a new column
    STAGGERED: ROWS, then nudge every other row right by half a gap
    """
    ROWS = "rows"
    COLUMNS = "columns"
    STAGGERED = "staggered"

    @staticmethod
    def parse(value) -> 'LayoutAlgorithm':
        """
        Accept a LayoutAlgorithm or its string tag

        Unknown tags fall back to ROWS, matching the packer dispatch default.
        """
        if isinstance(value, LayoutAlgorithm):
            return value
        for algo in LayoutAlgorithm:
            if algo.value == value:
                return algo
        return LayoutAlgorithm.ROWS


# ============================================================================
# LAYOUT CONSTANTS
# ============================================================================

# Building shell (feet)
DEFAULT_ASPECT_RATIO = 2.0       # width / height
DEFAULT_PERIMETER_FT = 6.0       # walkway strip on all four sides
DEFAULT_GAP_FT = 6.0             # spacing between units
MIN_INTERIOR_FT = 10.0           # interior never collapses below this

# Staggered rows shift right by this fraction of the gap
STAGGER_FACTOR = 0.5

# Rendering (pixels)
DEFAULT_VIEW_WIDTH_PX = 900
GALLERY_VIEW_WIDTH_PX = 320
LEGEND_HEIGHT_PX = 60
SCALE_BAR_PX = 100


def get_layout_defaults() -> dict:
    """
    Get the default layout parameters

    Returns:
        Dictionary with:
        - aspect_ratio: Building width / height
        - perimeter_ft: Perimeter buffer width
        - gap_ft: Spacing between units
        - algorithm: Packing algorithm
        - view_width_px: Rendered scene width
    """
    return {
        'aspect_ratio': DEFAULT_ASPECT_RATIO,
        'perimeter_ft': DEFAULT_PERIMETER_FT,
        'gap_ft': DEFAULT_GAP_FT,
        'algorithm': LayoutAlgorithm.ROWS,
        'view_width_px': DEFAULT_VIEW_WIDTH_PX,
    }
