"""
Item expansion - unit requests to individual rectangles

Each UnitRequest with count N becomes N independent Rectangles. The full list
is sorted largest footprint first so big fields and courts get placed before
small items fill the gaps (greedy, not optimal).
"""

from typing import Iterable, List, Mapping, Optional

from .core_elements import Rectangle, UnitRequest
from .unit_catalog import UNIT_STROKE, default_fill_for, lookup_unit


def expand_unit_requests(requests: Iterable[UnitRequest]) -> List[Rectangle]:
    """
    Expand unit requests into rectangles sorted by area descending

    Requests with count <= 0 or an unknown kind are skipped.

    Args:
        requests: UnitRequest objects

    Returns:
        List of Rectangles, one per physical unit
    """
    items: List[Rectangle] = []

    for request in requests:
        dims = lookup_unit(request.kind)
        if dims is None or request.count <= 0:
            continue

        width, height = dims.width, dims.height
        if request.rotate:
            width, height = height, width

        fill = request.color or default_fill_for(request.kind)
        for _ in range(int(request.count)):
            items.append(Rectangle(width, height, dims.label, fill, UNIT_STROKE))

    # sorted() is stable, so equal areas keep request order
    return sorted(items, key=lambda r: r.area, reverse=True)


# Caller-facing count keys (plural, as the designer and gallery use them)
COUNT_KEY_KINDS = (
    ('volleyball_courts', 'volleyball_court'),
    ('pickleball_courts', 'pickleball_court'),
    ('basketball_courts_full', 'basketball_court_full'),
    ('basketball_courts_half', 'basketball_court_half'),
    ('baseball_tunnels', 'baseball_tunnel'),
    ('training_turf_zone', 'training_turf_zone'),
    ('soccer_field_small', 'soccer_field_small'),
    ('football_field', 'football_field'),
)


def unit_requests_from_counts(counts: Mapping[str, int],
                              rotate_map: Optional[Mapping[str, bool]] = None) -> List[UnitRequest]:
    """
    Build unit requests from a {count key: count} mapping

    Keys may be the plural count keys ('volleyball_courts') or unit kind ids
    ('volleyball_court'). Unknown keys and non-positive counts are ignored.
    Rotation flags are looked up under the same key as the count.

    Args:
        counts: Requested count per key
        rotate_map: Optional rotation flag per key

    Returns:
        UnitRequests in catalog order
    """
    rotate_map = rotate_map or {}
    requests = []
    for count_key, kind in COUNT_KEY_KINDS:
        # One count per kind; the plural key wins when both spellings are given
        key = count_key if count_key in counts else kind
        count = counts.get(key)
        if not count or count <= 0:
            continue
        rotate = bool(rotate_map.get(key, rotate_map.get(count_key, False)))
        requests.append(UnitRequest(kind, int(count), rotate))
    return requests
