"""
Static plan diagrams (matplotlib)

Draws a TopViewLayout in feet on matplotlib axes for reports and image
export (PNG/SVG/PDF through Figure.savefig).
"""

import io
from typing import Optional

import matplotlib.pyplot as plt
from matplotlib.figure import Figure
from matplotlib.patches import Rectangle as RectPatch

from .geometry.top_view_layout import TopViewLayout
from .scene import COLORS, LEGEND


def _init_figure(title: str, aspect_ratio: float) -> Figure:
    width_in = 10
    fig: Figure = plt.figure(figsize=(width_in, max(width_in / max(aspect_ratio, 0.1), 3) + 1))
    ax = fig.add_subplot(111)
    ax.set_aspect("equal")
    ax.set_title(title)
    ax.set_xlabel("Width (ft)")
    ax.set_ylabel("Depth (ft)")
    ax.grid(True, linestyle="--", linewidth=0.5, alpha=0.5)
    return fig


def create_top_view_diagram_figure(layout: TopViewLayout, title: Optional[str] = None,
                                   show_legend: bool = True) -> Figure:
    """
    Top-view plan of the shell, buffer, admin blocks and sport units

    The y axis is inverted so "front" (y=0) is at the top, as in the SVG.
    """
    env = layout.envelope
    fig = _init_figure(title or f"Top View ({layout.algorithm.value})", env.aspect_ratio)
    ax = fig.axes[0]
    buffer_ft = env.perimeter_buffer_ft

    ax.add_patch(RectPatch((0, 0), env.outer_width_ft, env.outer_height_ft,
                           facecolor=COLORS['shell_fill'], edgecolor=COLORS['shell_stroke'],
                           linewidth=2))
    ax.add_patch(RectPatch((buffer_ft, buffer_ft), env.inner_width_ft, env.inner_height_ft,
                           facecolor=COLORS['buffer_fill'], edgecolor=COLORS['buffer_stroke']))

    for p in list(layout.placed_admin) + list(layout.placed_units):
        ax.add_patch(RectPatch((buffer_ft + p.x, buffer_ft + p.y), p.width, p.height,
                               facecolor=p.fill_color, edgecolor=p.stroke_color, linewidth=1))
        ax.text(buffer_ft + p.x + p.width / 2, buffer_ft + p.y + p.height / 2, p.label,
                ha="center", va="center", fontsize=8)

    ax.text(
        2, env.outer_height_ft - 2,
        f"Placed: {layout.packing.placed_count}/{layout.packing.requested_count}\n"
        f"Shell: {env.outer_width_ft:.0f}' × {env.outer_height_ft:.0f}'",
        va="bottom", ha="left", fontsize=9,
        bbox=dict(boxstyle="round", facecolor="white", alpha=0.7),
    )

    if show_legend:
        handles = [RectPatch((0, 0), 1, 1, facecolor=fill, edgecolor=COLORS['shell_stroke'],
                             label=label) for label, fill in LEGEND]
        ax.legend(handles=handles, loc="upper center", bbox_to_anchor=(0.5, -0.12),
                  ncol=len(handles), fontsize=8, frameon=False)

    ax.set_xlim(0, max(env.outer_width_ft, 10))
    ax.set_ylim(max(env.outer_height_ft, 10), 0)
    return fig


def figure_to_bytes(fig: Figure, fmt: str = "png") -> bytes:
    """Render a figure to bytes in the given format ('png', 'svg', 'pdf')"""
    buf = io.BytesIO()
    fig.savefig(buf, format=fmt, bbox_inches="tight")
    plt.close(fig)
    return buf.getvalue()
