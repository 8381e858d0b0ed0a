"""
Interactive visualization for top-view facility layouts

Draws a TopViewScene as a Plotly figure:
- Shell, perimeter buffer, admin blocks and sport units as rectangle shapes
- Labels, scale bar caption and legend captions as annotations
- An invisible marker per block so hovering shows its name and size

The figure uses the scene's pixel coordinates with the y axis reversed, so it
matches the exported SVG exactly. Designed for Streamlit integration.
"""

from typing import List, Optional

import plotly.graph_objects as go

from .scene import TopViewScene


# ===== HELPER FUNCTIONS =====

def _hover_trace(scene: TopViewScene, role: str, name: str) -> Optional[go.Scatter]:
    """One marker per labeled block, placed at the block centre"""
    rects = scene.rects_with_role(role)
    labels = scene.texts_with_role(role)
    if not rects:
        return None

    s = scene.px_per_ft
    hover = [
        f"<b>{t.text}</b><br>{r.width / s:.0f}' × {r.height / s:.0f}'"
        for r, t in zip(rects, labels)
    ]
    return go.Scatter(
        x=[t.x for t in labels],
        y=[t.y for t in labels],
        mode='markers',
        marker=dict(size=1, opacity=0),
        name=name,
        hovertext=hover,
        hoverinfo='text',
        showlegend=False,
    )


def create_scene_shapes(scene: TopViewScene) -> List[dict]:
    """Convert scene rectangles to Plotly layout shapes (back to front)"""
    shapes = []
    for r in scene.rects:
        shapes.append(dict(
            type='rect',
            xref='x', yref='y',
            x0=r.x, y0=r.y, x1=r.x + r.width, y1=r.y + r.height,
            fillcolor=r.fill,
            line=dict(color=r.stroke or r.fill, width=r.stroke_width if r.stroke else 0),
            layer='below',
        ))
    return shapes


def create_scene_annotations(scene: TopViewScene) -> List[dict]:
    """Convert scene texts to Plotly annotations"""
    annotations = []
    for t in scene.texts:
        annotations.append(dict(
            x=t.x, y=t.y,
            xref='x', yref='y',
            text=t.text,
            showarrow=False,
            font=dict(size=t.font_size, color=t.fill),
            xanchor='center' if t.anchor == 'middle' else 'left',
            yanchor='middle' if t.baseline == 'central' else 'bottom',
        ))
    return annotations


# ===== MAIN VISUALIZATION FUNCTION =====

def create_top_view_figure(scene: TopViewScene, show_title: bool = True) -> go.Figure:
    """
    Create an interactive Plotly figure for a top-view scene

    Args:
        scene: Rendered scene
        show_title: Show the scene title above the plan

    Returns:
        Plotly Figure sized to the scene
    """
    fig = go.Figure()

    for role, name in (('admin', 'Admin/Support'), ('unit', 'Sport units')):
        trace = _hover_trace(scene, role, name)
        if trace is not None:
            fig.add_trace(trace)

    margin_top = 40 if show_title else 10
    fig.update_layout(
        shapes=create_scene_shapes(scene),
        annotations=create_scene_annotations(scene),
        title=dict(text=scene.title, x=0.0) if show_title else None,
        width=scene.width_px + 20,
        height=scene.height_px + margin_top + 10,
        margin=dict(l=10, r=10, t=margin_top, b=10),
        plot_bgcolor='white',
        paper_bgcolor='white',
        showlegend=False,
        hovermode='closest',
    )
    fig.update_xaxes(range=[0, scene.width_px], visible=False, fixedrange=True)
    # SVG coordinates grow downward
    fig.update_yaxes(range=[scene.height_px, 0], visible=False, fixedrange=True,
                     scaleanchor='x', scaleratio=1)
    return fig
