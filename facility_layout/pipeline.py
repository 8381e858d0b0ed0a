"""
End-to-end layout pipeline:

1. Normalize inbound values (defaults for aspect, perimeter, gap, algorithm).
2. Size the building envelope and pack sport units via TopViewLayout.
3. Snap admin blocks to their corners.
4. Render the pixel-scaled scene.
5. Return the layout, the scene and summary diagnostics.

Every call recomputes from scratch; nothing is cached between runs.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional, Sequence

from .geometry.core_elements import AdminBlock, AnchorCorner, UnitRequest
from .geometry.expansion import unit_requests_from_counts
from .geometry.layout_modes import (
    DEFAULT_ASPECT_RATIO, DEFAULT_GAP_FT, DEFAULT_PERIMETER_FT, DEFAULT_VIEW_WIDTH_PX,
    LayoutAlgorithm,
)
from .geometry.top_view_layout import TopViewLayout
from .scene import TopViewScene, render_top_view

logger = logging.getLogger(__name__)


@dataclass
class LayoutInputs:
    """
    Inbound parameters for one layout computation

    Either `units` (explicit requests) or `counts` (count key -> count, with
    optional `rotate` flags) describes what to place; explicit units win.
    """
    gross_area_sqft: float
    counts: Dict[str, int] = field(default_factory=dict)
    rotate: Dict[str, bool] = field(default_factory=dict)
    units: Optional[List[UnitRequest]] = None
    admin_blocks: List[AdminBlock] = field(default_factory=list)
    algorithm: LayoutAlgorithm = LayoutAlgorithm.ROWS
    aspect_ratio: float = DEFAULT_ASPECT_RATIO
    perimeter_ft: float = DEFAULT_PERIMETER_FT
    gap_ft: float = DEFAULT_GAP_FT
    pixel_width: float = DEFAULT_VIEW_WIDTH_PX
    show_legend: bool = True
    title: str = "Example Top-View Layout"
    building_label: Optional[str] = None

    @classmethod
    def from_dict(cls, inputs: Mapping[str, Any]) -> 'LayoutInputs':
        """
        Build inputs from a plain dict, filling omitted values with defaults

        Recognized keys: gross_area_sqft, counts, rotate, units, admin_blocks,
        algorithm, aspect_ratio, perimeter_ft, gap_ft, pixel_width,
        show_legend, title, building_label. None values mean "use default".
        """
        def pick(key, default):
            value = inputs.get(key)
            return default if value is None else value

        admin = [
            b if isinstance(b, AdminBlock) else AdminBlock(
                b['label'], b['width'], b['height'], AnchorCorner.parse(b.get('anchor'))
            )
            for b in inputs.get('admin_blocks') or []
        ]
        units = inputs.get('units')
        if units is not None:
            units = [
                u if isinstance(u, UnitRequest) else UnitRequest(
                    u['kind'], u.get('count', 0), bool(u.get('rotate', False)), u.get('color')
                )
                for u in units
            ]
        return cls(
            gross_area_sqft=inputs['gross_area_sqft'],
            counts=dict(inputs.get('counts') or {}),
            rotate=dict(inputs.get('rotate') or {}),
            units=units,
            admin_blocks=admin,
            algorithm=LayoutAlgorithm.parse(pick('algorithm', LayoutAlgorithm.ROWS)),
            aspect_ratio=pick('aspect_ratio', DEFAULT_ASPECT_RATIO),
            perimeter_ft=pick('perimeter_ft', DEFAULT_PERIMETER_FT),
            gap_ft=pick('gap_ft', DEFAULT_GAP_FT),
            pixel_width=pick('pixel_width', DEFAULT_VIEW_WIDTH_PX),
            show_legend=bool(pick('show_legend', True)),
            title=pick('title', "Example Top-View Layout"),
            building_label=inputs.get('building_label'),
        )

    def unit_requests(self) -> List[UnitRequest]:
        if self.units is not None:
            return list(self.units)
        return unit_requests_from_counts(self.counts, self.rotate)


def validate_layout_inputs(inputs: LayoutInputs) -> None:
    """
    Validate inbound values before running the engine

    The engine itself does not validate; callers sanitize with this.

    Raises:
        ValueError: On non-positive area, aspect ratio or pixel width,
            negative buffer or gap, or negative unit counts
    """
    if inputs.gross_area_sqft is None or inputs.gross_area_sqft <= 0:
        raise ValueError(f"Gross area must be positive (got {inputs.gross_area_sqft} SF)")
    if inputs.aspect_ratio <= 0:
        raise ValueError(f"Aspect ratio must be positive (got {inputs.aspect_ratio})")
    if inputs.perimeter_ft < 0:
        raise ValueError(f"Perimeter buffer cannot be negative (got {inputs.perimeter_ft}')")
    if inputs.gap_ft < 0:
        raise ValueError(f"Gap cannot be negative (got {inputs.gap_ft}')")
    if inputs.pixel_width <= 0:
        raise ValueError(f"Pixel width must be positive (got {inputs.pixel_width})")
    for key, count in inputs.counts.items():
        if count is not None and count < 0:
            raise ValueError(f"Count for {key} cannot be negative (got {count})")
    for unit in inputs.units or []:
        if unit.count < 0:
            raise ValueError(f"Count for {unit.kind} cannot be negative (got {unit.count})")


@dataclass
class LayoutResult:
    layout: TopViewLayout
    scene: TopViewScene
    diagnostics: Dict[str, Any]

    @property
    def envelope(self):
        return self.layout.envelope

    @property
    def packing(self):
        return self.layout.packing


def build_diagnostics(layout: TopViewLayout) -> Dict[str, Any]:
    """Summary metrics for a computed layout"""
    env = layout.envelope
    return {
        'algorithm': layout.algorithm.value,
        'requested_units': layout.packing.requested_count,
        'placed_units': layout.packing.placed_count,
        'dropped_units': layout.packing.dropped_count,
        'dropped_labels': [r.label for r in layout.packing.unplaced],
        'all_fit': layout.packing.all_fit,
        'utilization': layout.utilization,
        'admin_blocks': len(layout.placed_admin),
        'outer_width_ft': env.outer_width_ft,
        'outer_height_ft': env.outer_height_ft,
        'inner_width_ft': env.inner_width_ft,
        'inner_height_ft': env.inner_height_ft,
    }


def run_layout(inputs) -> LayoutResult:
    """
    Execute the full layout pipeline and return a LayoutResult

    Args:
        inputs: LayoutInputs or a dict accepted by LayoutInputs.from_dict
    """
    if not isinstance(inputs, LayoutInputs):
        inputs = LayoutInputs.from_dict(inputs)

    layout = TopViewLayout(
        gross_area_sqft=inputs.gross_area_sqft,
        units=inputs.unit_requests(),
        admin_blocks=inputs.admin_blocks,
        algorithm=inputs.algorithm,
        aspect_ratio=inputs.aspect_ratio,
        perimeter_ft=inputs.perimeter_ft,
        gap_ft=inputs.gap_ft,
    )
    scene = render_top_view(
        layout.envelope,
        layout.placed_units,
        layout.placed_admin,
        pixel_width=inputs.pixel_width,
        show_legend=inputs.show_legend,
        title=inputs.title,
        building_label=inputs.building_label,
    )
    diagnostics = build_diagnostics(layout)
    if diagnostics['dropped_units']:
        logger.debug("%s layout dropped %d of %d units: %s",
                     diagnostics['algorithm'], diagnostics['dropped_units'],
                     diagnostics['requested_units'], diagnostics['dropped_labels'])

    return LayoutResult(layout, scene, diagnostics)


def run_units(gross_area_sqft: float, units: Sequence[UnitRequest], **kwargs) -> LayoutResult:
    """Convenience wrapper: run the pipeline for explicit unit requests"""
    return run_layout(LayoutInputs(gross_area_sqft=gross_area_sqft, units=list(units), **kwargs))
