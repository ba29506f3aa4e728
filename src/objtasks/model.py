"""
Core Shape Objects

Plain data objects with computed behavior:
    - Rectangle (width, height, area)
    - Circle (radius, circumference)

ARCHITECTURAL RULE:
    These objects:
        - Keep data in fields, behavior on the class
        - Are fully serializable (only fields are emitted)
        - Know nothing about JSON/YAML
"""

import math
from dataclasses import dataclass
from typing import Union

Number = Union[int, float]


@dataclass
class Rectangle:
    """
    Rectangle with a computed area.

    Example:
        r = Rectangle(10, 20)
        r.width       # => 10
        r.height      # => 20
        r.get_area()  # => 200

    Properties:
        width: Horizontal size
        height: Vertical size
    """

    width: Number
    height: Number

    def get_area(self) -> Number:
        return self.width * self.height


@dataclass
class Circle:
    """Circle with a computed circumference."""

    radius: Number

    def get_circumference(self) -> float:
        return 2 * math.pi * self.radius
