"""
Building envelope calculator

Sizes a rectangular building shell from a target gross floor area and an
aspect ratio, then removes the perimeter walkway to get the usable interior:

    outer_width  = sqrt(area x aspect)
    outer_height = outer_width / aspect          (so W x H == area)
    inner_width  = max(outer_width  - 2 x buffer, 10')
    inner_height = max(outer_height - 2 x buffer, 10')

Inputs are not validated here; callers pass sanitized positive values.
"""

import math
from dataclasses import dataclass

from .layout_modes import MIN_INTERIOR_FT


@dataclass(frozen=True)
class BuildingEnvelope:
    """Building shell and interior dimensions in feet"""
    gross_area_sqft: float
    aspect_ratio: float
    perimeter_buffer_ft: float
    outer_width_ft: float
    outer_height_ft: float
    inner_width_ft: float
    inner_height_ft: float

    @property
    def outer_area_sqft(self) -> float:
        return self.outer_width_ft * self.outer_height_ft

    @property
    def inner_area_sqft(self) -> float:
        return self.inner_width_ft * self.inner_height_ft


def building_dims_from_area(area_sqft: float, aspect_ratio: float):
    """
    Compute building width/height from area and aspect ratio

    Returns:
        (width_ft, height_ft) tuple
    """
    width = math.sqrt(area_sqft * aspect_ratio)
    height = width / aspect_ratio
    return width, height


def compute_envelope(gross_area_sqft: float, aspect_ratio: float,
                     perimeter_buffer_ft: float) -> BuildingEnvelope:
    """
    Compute the building envelope

    Args:
        gross_area_sqft: Total enclosed floor area (SF)
        aspect_ratio: Width / height, e.g. 2.0 for a 2:1 shell
        perimeter_buffer_ft: Walkway strip removed from each side

    Returns:
        BuildingEnvelope with outer and inner dimensions
    """
    outer_w, outer_h = building_dims_from_area(gross_area_sqft, aspect_ratio)
    inner_w = max(outer_w - 2 * perimeter_buffer_ft, MIN_INTERIOR_FT)
    inner_h = max(outer_h - 2 * perimeter_buffer_ft, MIN_INTERIOR_FT)

    return BuildingEnvelope(
        gross_area_sqft=gross_area_sqft,
        aspect_ratio=aspect_ratio,
        perimeter_buffer_ft=perimeter_buffer_ft,
        outer_width_ft=outer_w,
        outer_height_ft=outer_h,
        inner_width_ft=inner_w,
        inner_height_ft=inner_h,
    )
