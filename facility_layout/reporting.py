"""
Reporting utilities for presenting layout placements and fit results.
"""

from __future__ import annotations

from typing import Dict, List, Mapping

import pandas as pd

from .geometry.top_view_layout import TopViewLayout
from .pipeline import LayoutResult


PLACEMENT_COLUMNS = ["label", "category", "x_ft", "y_ft", "width_ft", "height_ft", "area_sf"]


def build_placement_table(layout: TopViewLayout) -> pd.DataFrame:
    """
    One row per placed rectangle (admin blocks first, then sport units)

    Coordinates are interior-relative feet, as produced by the engine.
    """
    rows: List[Dict] = []
    for category, placed in (("admin", layout.placed_admin), ("unit", layout.placed_units)):
        for p in placed:
            rows.append({
                "label": p.label,
                "category": category,
                "x_ft": round(p.x, 2),
                "y_ft": round(p.y, 2),
                "width_ft": p.width,
                "height_ft": p.height,
                "area_sf": p.area,
            })
    return pd.DataFrame(rows, columns=PLACEMENT_COLUMNS)


def build_fit_summary(layout: TopViewLayout) -> pd.DataFrame:
    """Requested vs placed vs dropped units per label, with a TOTAL row"""
    rows = [
        {"label": label, **counts}
        for label, counts in layout.counts_by_label().items()
    ]
    if rows:
        rows.append({
            "label": "TOTAL",
            "requested": sum(r["requested"] for r in rows),
            "placed": sum(r["placed"] for r in rows),
            "dropped": sum(r["dropped"] for r in rows),
        })
    return pd.DataFrame(rows, columns=["label", "requested", "placed", "dropped"])


def build_gallery_comparison(results: Mapping[str, LayoutResult],
                             names: Mapping[str, str] = None) -> pd.DataFrame:
    """
    Side-by-side metrics for gallery choices

    Args:
        results: Choice id -> LayoutResult
        names: Optional choice id -> display name
    """
    names = names or {}
    rows = []
    for choice_id, result in results.items():
        diag = result.diagnostics
        rows.append({
            "choice": choice_id,
            "name": names.get(choice_id, choice_id),
            "algorithm": diag["algorithm"],
            "shell": f"{diag['outer_width_ft']:.0f}' × {diag['outer_height_ft']:.0f}'",
            "placed": diag["placed_units"],
            "requested": diag["requested_units"],
            "dropped": diag["dropped_units"],
            "utilization_pct": round(diag["utilization"] * 100, 1),
        })
    return pd.DataFrame(rows)
