"""
Layout gallery - curated side-by-side layout recipes

The gallery does not search or rank layouts. It offers a fixed table of
hand-picked recipes, each a complete parameterization of the pipeline
(algorithm, rotation pattern, admin-block anchors, aspect ratio), and lets
the caller pick one:

    id              name                      algorithm   rotated             aspect
    rows-ns         Parallel (North–South)    rows        none                2.0
    rows-ew         Parallel (East–West)      rows        volleyball, bball   1.6
    staggered-mix   Staggered + Mix           staggered   bball               2.2

Adding a recipe means adding a row to GALLERY_PRESETS. Each choice runs the
full pipeline on its own; choices never share intermediate state. Choosing
is terminal: the gallery hands the LayoutChoice to a caller callback and
keeps nothing.
"""

import logging
from dataclasses import dataclass
from typing import Callable, Dict, List, Mapping, Optional, Tuple, Union

from .geometry.core_elements import AdminBlock, AnchorCorner, UnitRequest
from .geometry.expansion import unit_requests_from_counts
from .geometry.layout_modes import (
    DEFAULT_GAP_FT, DEFAULT_PERIMETER_FT, GALLERY_VIEW_WIDTH_PX, LayoutAlgorithm,
)
from .pipeline import LayoutInputs, LayoutResult, run_layout

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LayoutChoice:
    """A named, fully specified layout recipe"""
    id: str
    name: str
    algorithm: LayoutAlgorithm
    unit_requests: Tuple[UnitRequest, ...]
    admin_blocks: Tuple[AdminBlock, ...]
    aspect_ratio: float
    perimeter_buffer_ft: float = DEFAULT_PERIMETER_FT
    gap_ft: float = DEFAULT_GAP_FT

    def to_dict(self) -> Dict:
        return {
            'id': self.id,
            'name': self.name,
            'algorithm': self.algorithm.value,
            'unit_requests': [
                {'kind': getattr(u.kind, 'value', u.kind), 'count': u.count,
                 'rotate': u.rotate, 'color': u.color}
                for u in self.unit_requests
            ],
            'admin_blocks': [
                {'label': b.label, 'width': b.width, 'height': b.height,
                 'anchor': b.anchor.value}
                for b in self.admin_blocks
            ],
            'aspect_ratio': self.aspect_ratio,
            'perimeter_buffer_ft': self.perimeter_buffer_ft,
            'gap_ft': self.gap_ft,
        }


@dataclass
class GalleryPreset:
    id: str
    name: str
    algorithm: LayoutAlgorithm
    rotate: Dict[str, bool]
    admin_blocks: List[AdminBlock]
    aspect_ratio: float
    perimeter_ft: float = DEFAULT_PERIMETER_FT
    gap_ft: float = DEFAULT_GAP_FT


LOBBY = ("Lobby", 40, 25)

GALLERY_PRESETS: List[GalleryPreset] = [
    GalleryPreset(
        id="rows-ns",
        name="Parallel (North–South)",
        algorithm=LayoutAlgorithm.ROWS,
        rotate={'volleyball_courts': False, 'basketball_courts_full': False},
        admin_blocks=[
            AdminBlock(*LOBBY, AnchorCorner.FRONT_LEFT),
            AdminBlock("Storage", 30, 20, AnchorCorner.BACK_RIGHT),
        ],
        aspect_ratio=2.0,
    ),
    GalleryPreset(
        id="rows-ew",
        name="Parallel (East–West)",
        algorithm=LayoutAlgorithm.ROWS,
        rotate={'volleyball_courts': True, 'basketball_courts_full': True},
        admin_blocks=[
            AdminBlock(*LOBBY, AnchorCorner.FRONT_RIGHT),
            AdminBlock("Party Room", 30, 20, AnchorCorner.BACK_LEFT),
        ],
        aspect_ratio=1.6,  # slightly squarer
    ),
    GalleryPreset(
        id="staggered-mix",
        name="Staggered + Mix",
        algorithm=LayoutAlgorithm.STAGGERED,
        rotate={'volleyball_courts': False, 'basketball_courts_full': True},
        admin_blocks=[
            AdminBlock(*LOBBY, AnchorCorner.FRONT_LEFT),
            AdminBlock("Office", 20, 15, AnchorCorner.FRONT_RIGHT),
        ],
        aspect_ratio=2.2,  # slightly wider
    ),
]


def build_choices(gross_area_sqft: float, unit_counts: Mapping[str, int]) -> List[LayoutChoice]:
    """
    Build one LayoutChoice per gallery preset for the current counts

    Args:
        gross_area_sqft: Shell gross area (SF); every choice shares it
        unit_counts: Count key -> requested count; unknown keys are ignored

    Returns:
        List of LayoutChoices in preset order
    """
    return [
        LayoutChoice(
            id=preset.id,
            name=preset.name,
            algorithm=preset.algorithm,
            unit_requests=tuple(unit_requests_from_counts(unit_counts, preset.rotate)),
            admin_blocks=tuple(preset.admin_blocks),
            aspect_ratio=preset.aspect_ratio,
            perimeter_buffer_ft=preset.perimeter_ft,
            gap_ft=preset.gap_ft,
        )
        for preset in GALLERY_PRESETS
    ]


def run_choice(choice: LayoutChoice, gross_area_sqft: float,
               pixel_width: float = GALLERY_VIEW_WIDTH_PX,
               show_legend: bool = False) -> LayoutResult:
    """Run the full pipeline for one gallery choice"""
    return run_layout(LayoutInputs(
        gross_area_sqft=gross_area_sqft,
        units=list(choice.unit_requests),
        admin_blocks=list(choice.admin_blocks),
        algorithm=choice.algorithm,
        aspect_ratio=choice.aspect_ratio,
        perimeter_ft=choice.perimeter_buffer_ft,
        gap_ft=choice.gap_ft,
        pixel_width=pixel_width,
        show_legend=show_legend,
        title=choice.name,
        building_label=f"{round(gross_area_sqft):,} sf",
    ))


class LayoutGallery:
    """
    Side-by-side layout options for a gross area and unit counts

    Args:
        gross_area_sqft: Shell gross area (SF)
        counts: Count key -> requested count
        on_choose: Callback invoked with the chosen LayoutChoice
        selected_id: Id of the currently selected choice, for display only
        on_select: Callback for caller-controlled selection; when given it
            receives the choice instead of on_choose
    """

    def __init__(self, gross_area_sqft: float, counts: Mapping[str, int],
                 on_choose: Optional[Callable[[LayoutChoice], None]] = None,
                 selected_id: Optional[str] = None,
                 on_select: Optional[Callable[[LayoutChoice], None]] = None):
        self.gross_area_sqft = gross_area_sqft
        self.counts = dict(counts)
        self.on_choose = on_choose
        self.selected_id = selected_id
        self.on_select = on_select
        self.choices = build_choices(gross_area_sqft, self.counts)

    def get_choice(self, choice_id: str) -> LayoutChoice:
        for choice in self.choices:
            if choice.id == choice_id:
                return choice
        raise KeyError(f"Unknown layout choice: {choice_id}")

    def is_selected(self, choice: LayoutChoice) -> bool:
        return self.selected_id == choice.id

    def render_choice(self, choice: LayoutChoice,
                      pixel_width: float = GALLERY_VIEW_WIDTH_PX) -> LayoutResult:
        return run_choice(choice, self.gross_area_sqft, pixel_width=pixel_width)

    def render_all(self, pixel_width: float = GALLERY_VIEW_WIDTH_PX) -> Dict[str, LayoutResult]:
        """Render every choice independently, keyed by choice id"""
        return {c.id: self.render_choice(c, pixel_width) for c in self.choices}

    def choose(self, choice: Union[LayoutChoice, str]) -> LayoutChoice:
        """
        Hand a choice to the caller

        In selection mode (on_select given) only on_select is called.

        Raises:
            KeyError: If a choice id is not in the gallery
        """
        if isinstance(choice, str):
            choice = self.get_choice(choice)
        logger.debug("Layout choice selected: %s", choice.id)
        if self.on_select is not None:
            self.on_select(choice)
        elif self.on_choose is not None:
            self.on_choose(choice)
        return choice
