import pytest

from facility_layout.gallery import GALLERY_PRESETS, LayoutGallery, build_choices, run_choice
from facility_layout.geometry import AnchorCorner, LayoutAlgorithm

COUNTS = {'volleyball_courts': 2, 'basketball_courts_full': 1, 'pickleball_courts': 2}


def test_three_choices_in_order():
    choices = build_choices(16000, COUNTS)
    assert [c.id for c in choices] == ["rows-ns", "rows-ew", "staggered-mix"]
    assert [c.name for c in choices] == [
        "Parallel (North–South)", "Parallel (East–West)", "Staggered + Mix",
    ]
    assert [c.aspect_ratio for c in choices] == [2.0, 1.6, 2.2]
    assert [c.algorithm for c in choices] == [
        LayoutAlgorithm.ROWS, LayoutAlgorithm.ROWS, LayoutAlgorithm.STAGGERED,
    ]
    assert len(choices) == len(GALLERY_PRESETS)


def test_rotation_pattern_per_choice():
    choices = {c.id: c for c in build_choices(16000, COUNTS)}

    def rotated(choice_id):
        return {u.kind: u.rotate for u in choices[choice_id].unit_requests}

    assert rotated("rows-ns") == {
        'volleyball_court': False, 'basketball_court_full': False, 'pickleball_court': False,
    }
    assert rotated("rows-ew") == {
        'volleyball_court': True, 'basketball_court_full': True, 'pickleball_court': False,
    }
    assert rotated("staggered-mix") == {
        'volleyball_court': False, 'basketball_court_full': True, 'pickleball_court': False,
    }


def test_admin_blocks_per_choice():
    choices = {c.id: c for c in build_choices(16000, COUNTS)}
    assert [(b.label, b.anchor) for b in choices["rows-ns"].admin_blocks] == [
        ("Lobby", AnchorCorner.FRONT_LEFT), ("Storage", AnchorCorner.BACK_RIGHT),
    ]
    assert [(b.label, b.anchor) for b in choices["rows-ew"].admin_blocks] == [
        ("Lobby", AnchorCorner.FRONT_RIGHT), ("Party Room", AnchorCorner.BACK_LEFT),
    ]
    assert [(b.label, b.width, b.height) for b in choices["staggered-mix"].admin_blocks] == [
        ("Lobby", 40, 25), ("Office", 20, 15),
    ]


def test_unknown_count_keys_ignored():
    choices = build_choices(16000, {'ice_rinks': 2, 'volleyball_courts': 1})
    for choice in choices:
        assert [u.kind for u in choice.unit_requests] == ['volleyball_court']


def test_render_all_is_independent_per_choice():
    gallery = LayoutGallery(16000, COUNTS)
    results = gallery.render_all()
    assert list(results) == ["rows-ns", "rows-ew", "staggered-mix"]

    for choice in gallery.choices:
        result = results[choice.id]
        env = result.envelope
        assert env.outer_width_ft / env.outer_height_ft == pytest.approx(choice.aspect_ratio)
        assert env.outer_width_ft * env.outer_height_ft == pytest.approx(16000)
        assert result.scene.title == f"{choice.name} - 16,000 sf"
        assert result.scene.width_px == 320
        assert result.scene.height_px == result.scene.view_height_px
        assert result.packing.algorithm is choice.algorithm


def test_run_choice_matches_render_choice():
    gallery = LayoutGallery(16000, COUNTS)
    choice = gallery.get_choice("staggered-mix")
    direct = run_choice(choice, 16000)
    via_gallery = gallery.render_choice(choice)
    assert direct.packing.placed == via_gallery.packing.placed


def test_choose_invokes_callback():
    chosen = []
    gallery = LayoutGallery(16000, COUNTS, on_choose=chosen.append)

    result = gallery.choose("rows-ew")
    assert result.id == "rows-ew"
    assert chosen == [result]

    gallery.choose(gallery.choices[0])
    assert [c.id for c in chosen] == ["rows-ew", "rows-ns"]


def test_choose_without_callback():
    gallery = LayoutGallery(16000, COUNTS)
    assert gallery.choose("rows-ns").id == "rows-ns"


def test_unknown_choice_raises():
    gallery = LayoutGallery(16000, COUNTS, on_choose=lambda c: None)
    with pytest.raises(KeyError):
        gallery.choose("diagonal")


def test_selection_flag():
    gallery = LayoutGallery(16000, COUNTS, selected_id="rows-ew")
    assert [gallery.is_selected(c) for c in gallery.choices] == [False, True, False]


def test_choice_to_dict():
    choice = build_choices(16000, {'volleyball_courts': 1})[1]
    data = choice.to_dict()
    assert data['id'] == "rows-ew"
    assert data['algorithm'] == "rows"
    assert data['unit_requests'] == [
        {'kind': 'volleyball_court', 'count': 1, 'rotate': True, 'color': None},
    ]
    assert data['admin_blocks'][0] == {
        'label': "Lobby", 'width': 40, 'height': 25, 'anchor': "front-right",
    }
    assert data['perimeter_buffer_ft'] == 6
    assert data['gap_ft'] == 6


def test_choices_are_hashable():
    first = build_choices(16000, COUNTS)
    second = build_choices(16000, COUNTS)
    assert {hash(c) for c in first} == {hash(c) for c in second}
    assert len(set(first) | set(second)) == 3


def test_on_select_takes_precedence_over_on_choose():
    chosen, selected = [], []
    gallery = LayoutGallery(16000, COUNTS, on_choose=chosen.append,
                            on_select=selected.append, selected_id="rows-ns")

    result = gallery.choose("staggered-mix")
    assert selected == [result]
    assert chosen == []
    assert result.id == "staggered-mix"
