#!/usr/bin/env python3
"""
Demo: Build CSS selectors and serialize shape objects.

Shows chaining, combination, validation errors and JSON/YAML output.
"""

import argparse

from objtasks.examples import build_example_rectangle, build_example_selector
from objtasks.logging_config import configure_logging
from objtasks.model import Circle
from objtasks.selector import SelectorError, css_selector_builder
from objtasks.serialization import from_json, get_json, to_yaml


def main():
    parser = argparse.ArgumentParser(description="objtasks selector builder demo")
    parser.add_argument("--log-level", default="INFO", help="Logging level (DEBUG, INFO, ...)")
    args = parser.parse_args()
    configure_logging(args.log_level)

    builder = css_selector_builder

    print("=" * 80)
    print("SELECTOR BUILDER DEMO")
    print("=" * 80)

    print(builder.id("main").class_("container").class_("editable").render())
    print(builder.element("a").attribute('href$=".png"').pseudo_class("focus").render())
    print(build_example_selector().render())

    print("\nINVALID CHAINS:")
    print("-" * 80)
    for label, chain in [
        ("id twice", lambda: builder.id("a").id("b")),
        ("id after class", lambda: builder.class_("y").id("x")),
    ]:
        try:
            chain()
        except SelectorError as e:
            print(f"{label}: {type(e).__name__}: {e}")

    print("\nSERIALIZATION:")
    print("-" * 80)
    rect = build_example_rectangle()
    print(get_json(rect))
    print(to_yaml(rect), end="")
    circle = from_json(Circle, '{"radius":10}')
    print(f"{circle} circumference={circle.get_circumference():.2f}")


if __name__ == "__main__":
    main()
