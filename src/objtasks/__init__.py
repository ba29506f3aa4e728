"""
objtasks: object exercises

    - Shape objects with computed behavior (Rectangle, Circle)
    - JSON/YAML serialization into typed objects
    - A chainable CSS selector builder with ordering validation

ARCHITECTURAL GUARANTEE:
------------------------
Everything here works on in-memory values only.
No file, network or environment access happens in this package.
"""

from objtasks.model import Circle, Rectangle
from objtasks.selector import (
    CssSelectorBuilder,
    DuplicateSingletonSelector,
    OutOfOrderSelector,
    Selector,
    SelectorError,
    css_selector_builder,
)
from objtasks.serialization import SerializationError, from_json, get_json

__version__ = "0.1.0"

__all__ = [
    "Circle",
    "Rectangle",
    "CssSelectorBuilder",
    "DuplicateSingletonSelector",
    "OutOfOrderSelector",
    "Selector",
    "SelectorError",
    "css_selector_builder",
    "SerializationError",
    "from_json",
    "get_json",
]
