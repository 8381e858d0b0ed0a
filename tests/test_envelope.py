import math

import pytest

from facility_layout.geometry.envelope import building_dims_from_area, compute_envelope
from facility_layout.geometry.layout_modes import MIN_INTERIOR_FT


def test_basic_fit_envelope():
    """16,000 SF at 2:1 with a 6' buffer"""
    env = compute_envelope(16000, 2.0, 6)
    assert env.outer_width_ft == pytest.approx(178.885, abs=0.01)
    assert env.outer_height_ft == pytest.approx(89.443, abs=0.01)
    assert env.inner_width_ft == pytest.approx(166.885, abs=0.01)
    assert env.inner_height_ft == pytest.approx(77.443, abs=0.01)


@pytest.mark.parametrize("area", [500, 2500, 16000, 36000, 123456.7])
@pytest.mark.parametrize("aspect", [0.5, 1.0, 1.6, 2.0, 2.2, 3.75])
def test_area_identity(area, aspect):
    """Outer W x H equals the gross area and W / H equals the aspect ratio"""
    env = compute_envelope(area, aspect, 6)
    assert env.outer_width_ft * env.outer_height_ft == pytest.approx(area, rel=1e-9)
    assert env.outer_width_ft / env.outer_height_ft == pytest.approx(aspect, rel=1e-9)
    assert env.outer_area_sqft == pytest.approx(area, rel=1e-9)


@pytest.mark.parametrize("buffer_ft", [0, 6, 40, 100, 10000])
def test_interior_floor(buffer_ft):
    """Interior never collapses below 10' no matter how large the buffer"""
    env = compute_envelope(400, 1.0, buffer_ft)
    assert env.inner_width_ft >= MIN_INTERIOR_FT
    assert env.inner_height_ft >= MIN_INTERIOR_FT


def test_interior_floor_exact_value():
    env = compute_envelope(400, 1.0, 15)  # 20' x 20' shell, buffer eats it all
    assert env.inner_width_ft == MIN_INTERIOR_FT
    assert env.inner_height_ft == MIN_INTERIOR_FT
    assert env.inner_area_sqft == MIN_INTERIOR_FT ** 2


def test_zero_buffer_keeps_outer_dims():
    env = compute_envelope(10000, 1.0, 0)
    assert env.inner_width_ft == pytest.approx(100.0)
    assert env.inner_height_ft == pytest.approx(100.0)


def test_building_dims_from_area():
    w, h = building_dims_from_area(20000, 2.0)
    assert w == pytest.approx(200.0)
    assert h == pytest.approx(100.0)
    assert math.isclose(w * h, 20000)
