"""
Render/export adapter for top-view layouts

Converts the foot-based geometry into a pixel-scaled vector scene:

    px_per_ft   = pixel_width / outer_width_ft
    view_height = round(outer_height_ft x px_per_ft)
    total       = view_height (+ 60px legend strip when shown)

Draw order (back to front):
    1. Building shell outline
    2. Perimeter buffer (inner rectangle, light fill)
    3. Admin blocks (gray, labeled)
    4. Sport units (colored, labeled), offset by the perimeter buffer
    5. Scale bar (fixed 100px span, labeled in feet)
    6. Legend (optional, fixed category swatches)

The scene is a flat list of primitives in absolute pixel coordinates so every
backend (SVG string, plotly, matplotlib) draws exactly the same picture.
"""

import logging
import math
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Sequence, Union
from xml.sax.saxutils import escape, quoteattr

from .geometry.core_elements import ADMIN_FILL, PlacedRectangle
from .geometry.envelope import BuildingEnvelope
from .geometry.layout_modes import DEFAULT_VIEW_WIDTH_PX, LEGEND_HEIGHT_PX, SCALE_BAR_PX
from .geometry.unit_catalog import BRAND_BLUE, BRAND_GRAY, BRAND_GREEN, TURF_GREEN

logger = logging.getLogger(__name__)


# ===== COLOR PALETTE =====

COLORS = {
    'shell_fill': '#FFFFFF',
    'shell_stroke': '#111111',
    'buffer_fill': '#F7F9FC',
    'buffer_stroke': '#D1D5DB',
    'text': '#111111',
    'scale_bar': '#111111',
}

LEGEND = [
    ("Basketball", BRAND_BLUE),
    ("Volleyball", BRAND_GRAY),
    ("Pickleball", BRAND_GRAY),
    ("Batting Tunnel", BRAND_GREEN),
    ("Turf/Soccer", TURF_GREEN),
    ("Admin/Support", ADMIN_FILL),
]

LABEL_FONT_PX = 12
SCALE_FONT_PX = 10
LEGEND_SWATCH_PX = 16
LEGEND_PITCH_PX = 140


# ===== SCENE PRIMITIVES =====

@dataclass(frozen=True)
class SceneRect:
    x: float
    y: float
    width: float
    height: float
    fill: str
    stroke: Optional[str] = None
    stroke_width: float = 1.0
    role: str = 'unit'  # shell, buffer, admin, unit, scale_bar, legend


@dataclass(frozen=True)
class SceneText:
    x: float
    y: float
    text: str
    font_size: float = LABEL_FONT_PX
    anchor: str = 'start'      # start | middle
    baseline: str = 'auto'     # auto | central
    fill: str = COLORS['text']
    role: str = 'label'


@dataclass
class TopViewScene:
    """Pixel-space scene ready for display or export"""
    title: str
    description: str
    width_px: float
    height_px: float
    view_height_px: float
    px_per_ft: float
    rects: List[SceneRect] = field(default_factory=list)
    texts: List[SceneText] = field(default_factory=list)

    def rects_with_role(self, role: str) -> List[SceneRect]:
        return [r for r in self.rects if r.role == role]

    def texts_with_role(self, role: str) -> List[SceneText]:
        return [t for t in self.texts if t.role == role]


# ===== RENDERING =====

def _round_half_up(value: float) -> int:
    """Round to the nearest integer with halves rounded up (2.5 -> 3)"""
    return math.floor(value + 0.5)


def _draw_block(scene: TopViewScene, p: PlacedRectangle, offset_ft: float, role: str):
    """Draw one placed rectangle with a centred label, shifted by the buffer"""
    s = scene.px_per_ft
    x = (offset_ft + p.x) * s
    y = (offset_ft + p.y) * s
    w = p.width * s
    h = p.height * s
    scene.rects.append(SceneRect(x, y, w, h, p.fill_color, p.stroke_color, 1.0, role))
    scene.texts.append(SceneText(x + w / 2, y + h / 2, p.label, LABEL_FONT_PX,
                                 'middle', 'central', COLORS['text'], role))


def render_top_view(envelope: BuildingEnvelope,
                    placed_units: Sequence[PlacedRectangle],
                    placed_admin: Sequence[PlacedRectangle] = (),
                    pixel_width: float = DEFAULT_VIEW_WIDTH_PX,
                    show_legend: bool = True,
                    title: str = "Example Top-View Layout",
                    building_label: Optional[str] = None) -> TopViewScene:
    """
    Build a pixel-scaled vector scene for a layout

    Args:
        envelope: Building envelope (feet)
        placed_units: Packed sport units (interior coordinates)
        placed_admin: Corner-snapped admin blocks (interior coordinates)
        pixel_width: Scene width in pixels; height follows the shell aspect
        show_legend: Append the legend strip below the plan
        title: Scene title for accessibility and export
        building_label: Optional suffix for the title, e.g. "16,000 sf"

    Returns:
        TopViewScene
    """
    px_per_ft = pixel_width / envelope.outer_width_ft
    view_h = _round_half_up(envelope.outer_height_ft * px_per_ft)
    total_h = view_h + (LEGEND_HEIGHT_PX if show_legend else 0)

    full_title = f"{title} - {building_label}" if building_label else title
    description = (f"{title}. Building {_round_half_up(envelope.outer_width_ft)} by "
                   f"{_round_half_up(envelope.outer_height_ft)} feet.")

    scene = TopViewScene(full_title, description, pixel_width, total_h, view_h, px_per_ft)
    buffer_ft = envelope.perimeter_buffer_ft

    # Building shell
    scene.rects.append(SceneRect(
        0, 0, envelope.outer_width_ft * px_per_ft, envelope.outer_height_ft * px_per_ft,
        COLORS['shell_fill'], COLORS['shell_stroke'], 2.0, 'shell'
    ))
    # Perimeter walkway (inner box)
    scene.rects.append(SceneRect(
        buffer_ft * px_per_ft, buffer_ft * px_per_ft,
        envelope.inner_width_ft * px_per_ft, envelope.inner_height_ft * px_per_ft,
        COLORS['buffer_fill'], COLORS['buffer_stroke'], 1.0, 'buffer'
    ))

    for p in placed_admin:
        _draw_block(scene, p, buffer_ft, 'admin')
    for p in placed_units:
        _draw_block(scene, p, buffer_ft, 'unit')

    # Scale bar: fixed pixel span expressed in feet
    bar_x, bar_y = 10, view_h - 20
    scene.rects.append(SceneRect(bar_x, bar_y, SCALE_BAR_PX, 4, COLORS['scale_bar'],
                                 None, 0.0, 'scale_bar'))
    scale_ft = _round_half_up(SCALE_BAR_PX / px_per_ft)
    scene.texts.append(SceneText(bar_x, bar_y - 4, f"~ {scale_ft} ft",
                                 SCALE_FONT_PX, role='scale_bar'))

    if show_legend:
        legend_y = view_h + 10
        for i, (label, fill) in enumerate(LEGEND):
            lx = 10 + i * LEGEND_PITCH_PX
            scene.rects.append(SceneRect(lx, legend_y, LEGEND_SWATCH_PX, LEGEND_SWATCH_PX,
                                         fill, COLORS['shell_stroke'], 1.0, 'legend'))
            scene.texts.append(SceneText(lx + 22, legend_y + 12, label, LABEL_FONT_PX,
                                         role='legend'))

    return scene


# ===== EXPORT =====

def _fmt(value: float) -> str:
    return f"{value:.2f}".rstrip('0').rstrip('.')


def scene_to_svg(scene: TopViewScene) -> str:
    """Serialize a scene to a standalone SVG document"""
    svg = [
        f'<svg xmlns="http://www.w3.org/2000/svg" width="{_fmt(scene.width_px)}" '
        f'height="{_fmt(scene.height_px)}" '
        f'viewBox="0 0 {_fmt(scene.width_px)} {_fmt(scene.height_px)}" '
        f'role="img" aria-label={quoteattr(scene.description)}>',
        f'<title>{escape(scene.title)}</title>',
    ]

    for r in scene.rects:
        stroke = (f' stroke="{r.stroke}" stroke-width="{_fmt(r.stroke_width)}"'
                  if r.stroke else '')
        svg.append(f'<rect x="{_fmt(r.x)}" y="{_fmt(r.y)}" width="{_fmt(r.width)}" '
                   f'height="{_fmt(r.height)}" fill="{r.fill}"{stroke}/>')

    for t in scene.texts:
        baseline = f' dominant-baseline="{t.baseline}"' if t.baseline != 'auto' else ''
        svg.append(f'<text x="{_fmt(t.x)}" y="{_fmt(t.y)}" font-size="{_fmt(t.font_size)}" '
                   f'text-anchor="{t.anchor}"{baseline} fill="{t.fill}">{escape(t.text)}</text>')

    svg.append('</svg>')
    return "\n".join(svg)


def export_svg(scene: Optional[TopViewScene],
               filename: Union[str, Path] = "layout.svg") -> Optional[Path]:
    """
    Save a scene as a standalone SVG file

    One-shot and synchronous. When there is no scene this is a no-op.

    Args:
        scene: Scene to export (None means nothing to export)
        filename: Target path

    Returns:
        Path written, or None when nothing was exported
    """
    if scene is None:
        return None

    path = Path(filename)
    path.write_text(scene_to_svg(scene), encoding="utf-8")
    logger.debug("Exported layout %r to %s", scene.title, path)
    return path
