"""
Example objects for demos and tests.

Builds the rectangle and the nested selector combination shown in the
selector builder documentation.
"""
from objtasks.model import Rectangle
from objtasks.selector import Selector, css_selector_builder


def build_example_rectangle() -> Rectangle:
    return Rectangle(width=10, height=20)


def build_example_selector() -> Selector:
    """
    Nested combination of four compound selectors.

    Renders as:
        div#main.container.draggable + table#data ~ tr:nth-of-type(even)   td:nth-of-type(even)
    """
    builder = css_selector_builder

    # Innermost: descendant combinator (' ' gives three spaces)
    rows = builder.combine(
        builder.element("tr").pseudo_class("nth-of-type(even)"),
        " ",
        builder.element("td").pseudo_class("nth-of-type(even)"),
    )

    table = builder.combine(
        builder.element("table").id("data"),
        "~",
        rows,
    )

    return builder.combine(
        builder.element("div").id("main").class_("container").class_("draggable"),
        "+",
        table,
    )
