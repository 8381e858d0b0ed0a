"""
Top-view layout engine for indoor sports facilities

Sizes a building shell from a gross area, packs courts, tunnels and fields
into it with one of three greedy algorithms, snaps support spaces to the
corners and renders the result as a pixel-scaled vector scene.
"""

from .geometry import (
    AdminBlock, AnchorCorner, BuildingEnvelope, LayoutAlgorithm, PackingResult,
    PlacedRectangle, Rectangle, TopViewLayout, UnitKind, UnitRequest,
    compute_envelope, expand_unit_requests, pack_rectangles, place_admin_blocks,
)
from .scene import TopViewScene, export_svg, render_top_view, scene_to_svg
from .pipeline import LayoutInputs, LayoutResult, run_layout, validate_layout_inputs
from .gallery import GALLERY_PRESETS, LayoutChoice, LayoutGallery, build_choices
from .designer import DesignerSelection, FacilityDesigner, load_facility_presets

__version__ = "0.1.0"

__all__ = [
    'AdminBlock',
    'AnchorCorner',
    'BuildingEnvelope',
    'LayoutAlgorithm',
    'PackingResult',
    'PlacedRectangle',
    'Rectangle',
    'TopViewLayout',
    'UnitKind',
    'UnitRequest',
    'compute_envelope',
    'expand_unit_requests',
    'pack_rectangles',
    'place_admin_blocks',
    'TopViewScene',
    'export_svg',
    'render_top_view',
    'scene_to_svg',
    'LayoutInputs',
    'LayoutResult',
    'run_layout',
    'validate_layout_inputs',
    'GALLERY_PRESETS',
    'LayoutChoice',
    'LayoutGallery',
    'build_choices',
    'DesignerSelection',
    'FacilityDesigner',
    'load_facility_presets',
]
