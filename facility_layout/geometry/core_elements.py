"""
Core layout elements for the top-view facility plan

Contains the value objects exchanged between the layout stages:
- UnitRequest: "place N of this kind" as requested by the caller
- Rectangle / PlacedRectangle: one physical unit before and after packing
- AdminBlock: non-sport support space (lobby, storage) snapped to a corner

All dimensions are in feet. Placed coordinates are relative to the interior
rectangle's origin (inside the perimeter buffer).
"""

from dataclasses import dataclass, replace
from enum import Enum
from typing import Optional, Union

from .unit_catalog import UnitKind, UNIT_STROKE


ADMIN_FILL = "#E5E7EB"


@dataclass(frozen=True)
class UnitRequest:
    """
    Request to place `count` instances of one unit kind

    Args:
        kind: UnitKind or its string value (unknown kinds are skipped later)
        count: Number of instances (0 or less means none)
        rotate: Swap nominal width and height (rotate 90 degrees)
        color: Optional fill override
    """
    kind: Union[UnitKind, str]
    count: int
    rotate: bool = False
    color: Optional[str] = None


@dataclass(frozen=True)
class Rectangle:
    """One unit to place, in feet"""
    width: float
    height: float
    label: str
    fill_color: str
    stroke_color: str = UNIT_STROKE

    @property
    def area(self) -> float:
        return self.width * self.height


@dataclass(frozen=True)
class PlacedRectangle:
    """A Rectangle with an (x, y) offset inside the interior rectangle"""
    x: float
    y: float
    width: float
    height: float
    label: str
    fill_color: str
    stroke_color: str = UNIT_STROKE

    @classmethod
    def at(cls, rect: Rectangle, x: float, y: float) -> 'PlacedRectangle':
        return cls(x, y, rect.width, rect.height, rect.label, rect.fill_color, rect.stroke_color)

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def bottom(self) -> float:
        return self.y + self.height

    @property
    def area(self) -> float:
        return self.width * self.height

    def fits_within(self, width: float, height: float) -> bool:
        """True when the rectangle lies inside a (0, 0, width, height) box"""
        return self.x >= 0 and self.y >= 0 and self.right <= width and self.bottom <= height

    def overlaps(self, other: 'PlacedRectangle') -> bool:
        """
        True when the interiors of two rectangles intersect

        Rectangles that only share an edge do not overlap.
        """
        return (self.x < other.right and other.x < self.right
                and self.y < other.bottom and other.y < self.bottom)

    def with_x(self, x: float) -> 'PlacedRectangle':
        return replace(self, x=x)


class AnchorCorner(Enum):
    """Interior corner an admin block snaps to ("front" is the y=0 side)"""
    FRONT_LEFT = "front-left"
    FRONT_RIGHT = "front-right"
    BACK_LEFT = "back-left"
    BACK_RIGHT = "back-right"

    @staticmethod
    def parse(value) -> 'AnchorCorner':
        """Accept an AnchorCorner or its tag; missing or unknown tags mean front-left"""
        if isinstance(value, AnchorCorner):
            return value
        for corner in AnchorCorner:
            if corner.value == value:
                return corner
        return AnchorCorner.FRONT_LEFT


@dataclass(frozen=True)
class AdminBlock:
    """
    Non-sport support space (lobby, storage, office, party room)

    Admin blocks are placed independently of sport units and are not checked
    for collisions with them or with each other.
    """
    label: str
    width: float
    height: float
    anchor: AnchorCorner = AnchorCorner.FRONT_LEFT
