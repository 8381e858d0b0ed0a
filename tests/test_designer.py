import json

import pytest

from facility_layout.designer import (
    DesignerSelection, FacilityDesigner, MULTI_SPORT_FALLBACK_SF, SINGLE_SPORT_FALLBACK_SF,
    load_facility_presets,
)
from facility_layout.gallery import build_choices
from facility_layout.pipeline import run_layout


@pytest.fixture(scope="module")
def designer():
    return FacilityDesigner()


def test_presets_load():
    presets = load_facility_presets()
    assert set(presets) >= {'sports', 'sizes', 'shell_sf', 'unit_counts', 'size_tiers'}
    assert presets['shell_sf']['basketball']['medium'] == 24000


def test_presets_from_custom_path(tmp_path):
    path = tmp_path / "presets.json"
    path.write_text(json.dumps({'shell_sf': {'basketball': {'small': 9000}}}), encoding="utf-8")
    designer = FacilityDesigner(load_facility_presets(path))
    assert designer.shell_area_for(DesignerSelection(['basketball'], 'small')) == 9000
    assert designer.size_tiers == {}


def test_shell_area_single_sport(designer):
    assert designer.shell_area_for(DesignerSelection(['basketball'], 'medium')) == 24000
    assert designer.shell_area_for(DesignerSelection(['pickleball'], 'large')) == 28000


def test_shell_area_football_falls_back(designer):
    """Football has no shell table entry"""
    selection = DesignerSelection(['football'], 'medium')
    assert designer.shell_area_for(selection) == SINGLE_SPORT_FALLBACK_SF


def test_shell_area_multi_sport(designer):
    with_soccer = DesignerSelection(['basketball', 'soccer_indoor_small_sided'], 'large')
    without_soccer = DesignerSelection(['basketball', 'volleyball'], 'small')
    assert designer.shell_area_for(with_soccer) == 54000
    assert designer.shell_area_for(without_soccer) == 18000


def test_shell_area_multi_sport_fallback():
    designer = FacilityDesigner({'shell_sf': {}})
    selection = DesignerSelection(['basketball', 'volleyball'], 'medium')
    assert designer.shell_area_for(selection) == MULTI_SPORT_FALLBACK_SF


def test_shell_area_needs_size_and_sports(designer):
    assert designer.shell_area_for(DesignerSelection(['basketball'], None)) == 0
    assert designer.shell_area_for(DesignerSelection([], 'medium')) == 0


def test_aggregate_counts(designer):
    selection = DesignerSelection(['multi_sport', 'pickleball', 'football'], 'medium')
    assert designer.aggregate_counts(selection) == {
        'training_turf_zone': 1, 'volleyball_courts': 2, 'pickleball_courts': 10,
    }
    assert designer.aggregate_counts(DesignerSelection(['basketball'])) == {}


def test_shell_preview_inputs(designer):
    inputs = designer.shell_preview_inputs(DesignerSelection(['basketball'], 'medium'))
    assert inputs.gross_area_sqft == 24000
    assert inputs.units == []
    assert [b.label for b in inputs.admin_blocks] == ["Lobby"]
    assert inputs.building_label == "24,000 sf"

    result = run_layout(inputs)
    assert result.packing.requested_count == 0
    assert len(result.scene.rects_with_role('admin')) == 1


def test_tier_layout_inputs(designer):
    inputs = designer.tier_layout_inputs('small_plus')
    assert inputs.gross_area_sqft == 6000
    assert inputs.aspect_ratio == pytest.approx(100 / 60)
    assert inputs.counts == {'basketball_courts_full': 1, 'baseball_tunnels': 1}
    assert inputs.show_legend is False


def test_tier_variant_is_clamped(designer):
    last = designer.tier_layout_inputs('small_plus', variant=99)
    assert last.counts == {'volleyball_courts': 2, 'baseball_tunnels': 2}
    first = designer.tier_layout_inputs('small_plus', variant=-3)
    assert first.counts == {'basketball_courts_full': 1, 'baseball_tunnels': 1}


def test_unknown_tier_raises(designer):
    with pytest.raises(KeyError):
        designer.tier_layout_inputs('colossal')


def test_every_tier_renders(designer):
    for key in designer.size_tiers:
        result = run_layout(designer.tier_layout_inputs(key))
        assert result.scene.width_px == 320


def test_build_layout_selection(designer):
    selection = DesignerSelection(['basketball'], 'medium')
    counts = designer.aggregate_counts(selection)
    choice = build_choices(designer.shell_area_for(selection), counts)[0]

    payload = designer.build_layout_selection(selection, choice)
    assert payload['selectedSports'] == ['basketball']
    assert payload['size'] == 'medium'
    assert payload['layoutChoice']['id'] == "rows-ns"
    assert payload['grossSf'] == 24000
    assert payload['totalSquareFootage'] == "24000"
    assert payload['numberOfCourts'] == 2
    assert payload['numberOfFields'] == ''
    assert payload['numberOfCages'] == ''
    assert payload['facilityType'] == "lease"
    assert payload['amenities'] == ["lobby", "storage"]
    json.dumps(payload)


def test_build_layout_selection_requires_size(designer):
    choice = build_choices(16000, {})[0]
    with pytest.raises(ValueError):
        designer.build_layout_selection(DesignerSelection(['basketball']), choice)
