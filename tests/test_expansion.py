from facility_layout.geometry.core_elements import UnitRequest
from facility_layout.geometry.expansion import expand_unit_requests, unit_requests_from_counts
from facility_layout.geometry.unit_catalog import (
    BRAND_BLUE, BRAND_GRAY, BRAND_GREEN, FOOTBALL_BROWN, TURF_GREEN, UNIT_STROKE,
    UnitKind, default_fill_for, lookup_unit,
)


def test_rotation_swap():
    """Rotated 72' x 36' volleyball court becomes 36' x 72'"""
    rects = expand_unit_requests([UnitRequest(UnitKind.VOLLEYBALL_COURT, 1, rotate=True)])
    assert len(rects) == 1
    assert rects[0].width == 36
    assert rects[0].height == 72
    assert rects[0].label == "Volleyball"


def test_count_expands_to_copies():
    rects = expand_unit_requests([UnitRequest("baseball_tunnel", 3)])
    assert len(rects) == 3
    assert all((r.width, r.height) == (70, 15) for r in rects)
    assert all(r.stroke_color == UNIT_STROKE for r in rects)


def test_sorted_largest_first():
    rects = expand_unit_requests([
        UnitRequest("baseball_tunnel", 2),
        UnitRequest("pickleball_court", 1),
        UnitRequest("basketball_court_full", 1),
    ])
    areas = [r.area for r in rects]
    assert areas == sorted(areas, reverse=True)
    assert rects[0].label == "Basketball (Full)"
    assert rects[-1].label == "Batting Tunnel"


def test_zero_count_and_unknown_kind_skipped():
    rects = expand_unit_requests([
        UnitRequest("volleyball_court", 0),
        UnitRequest("volleyball_court", -2),
        UnitRequest("curling_sheet", 4),
        UnitRequest("pickleball_court", 1),
    ])
    assert [r.label for r in rects] == ["Pickleball"]


def test_color_override_wins():
    rects = expand_unit_requests([UnitRequest("basketball_court_half", 1, color="#FF0000")])
    assert rects[0].fill_color == "#FF0000"


def test_default_family_fills():
    assert default_fill_for(UnitKind.BASKETBALL_COURT_FULL) == BRAND_BLUE
    assert default_fill_for("basketball_court_half") == BRAND_BLUE
    assert default_fill_for("baseball_tunnel") == BRAND_GREEN
    assert default_fill_for("soccer_field_small") == TURF_GREEN
    assert default_fill_for("football_field") == FOOTBALL_BROWN
    assert default_fill_for("training_turf_zone") == TURF_GREEN
    assert default_fill_for("volleyball_court") == BRAND_GRAY
    assert default_fill_for("pickleball_court") == BRAND_GRAY


def test_lookup_accepts_enum_and_string():
    assert lookup_unit(UnitKind.FOOTBALL_FIELD) == lookup_unit("football_field")
    assert lookup_unit("football_field").width == 240
    assert lookup_unit("not_a_sport") is None


def test_requests_from_counts_ignores_unknown_keys():
    requests = unit_requests_from_counts({
        'volleyball_courts': 2,
        'pickleball_courts': 0,
        'hockey_rinks': 3,
    })
    assert requests == [UnitRequest('volleyball_court', 2, False)]


def test_requests_from_counts_rotation_flags():
    requests = unit_requests_from_counts(
        {'volleyball_courts': 1, 'basketball_courts_full': 2, 'baseball_tunnels': 4},
        {'volleyball_courts': True, 'basketball_courts_full': False},
    )
    by_kind = {r.kind: r for r in requests}
    assert by_kind['volleyball_court'].rotate is True
    assert by_kind['basketball_court_full'].rotate is False
    assert by_kind['baseball_tunnel'].rotate is False


def test_requests_from_counts_accepts_kind_ids():
    requests = unit_requests_from_counts({'training_turf_zone': 1, 'pickleball_court': 2})
    kinds = [r.kind for r in requests]
    assert kinds == ['pickleball_court', 'training_turf_zone']


def test_requests_from_counts_one_request_per_kind():
    """Both spellings of a kind count once; the plural count key wins"""
    requests = unit_requests_from_counts({'volleyball_courts': 1, 'volleyball_court': 3})
    assert requests == [UnitRequest('volleyball_court', 1, False)]

    total = sum(r.count for r in unit_requests_from_counts(
        {'training_turf_zone': 2, 'baseball_tunnels': 1, 'baseball_tunnel': 5}
    ))
    assert total == 3
