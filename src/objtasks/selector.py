"""
CSS selector builder.

Each compound selector can consist of element, id, class, attribute,
pseudo-class and pseudo-element parts, in that order. Compound selectors
can be joined with a combinator (' ', '+', '~', '>').

Usage:
    builder = css_selector_builder
    builder.id("main").class_("container").class_("editable").render()
        => '#main.container.editable'

The facade is stateless. Every facade call returns a fresh Selector;
every chaining call mutates that Selector in place and returns it.
"""

from __future__ import annotations

import logging
from typing import List

from objtasks.fragments import (
    SELECTOR_ORDER,
    SINGLETON_KINDS,
    SelectorFragment,
    SelectorKind,
    make_fragment,
)

logger = logging.getLogger(__name__)


class SelectorError(Exception):
    """Base error for invalid selector chains."""
    pass


class DuplicateSingletonSelector(SelectorError):
    """Raised when element, id or pseudo-element is added twice."""

    def __init__(self, message: str = (
        "Element, id and pseudo-element should not occur more than one time inside the selector"
    )):
        super().__init__(message)


class OutOfOrderSelector(SelectorError):
    """Raised when selector parts are added out of canonical order."""

    def __init__(self, message: str = (
        "Selector parts should be arranged in the following order: "
        "element, id, class, attribute, pseudo-class, pseudo-element"
    )):
        super().__init__(message)


class Selector:
    """
    Mutable, chainable sequence of selector fragments.

    IMPORTANT:
        Validation runs after the fragment is appended and there is
        no rollback. Once a chaining call has raised, discard the selector.
    """

    def __init__(self, kind: SelectorKind, value: str):
        self.fragments: List[SelectorFragment] = [make_fragment(kind, value)]

    def __repr__(self) -> str:
        return f"Selector({self.render()!r})"

    def __str__(self) -> str:
        return self.render()

    @property
    def combined(self) -> bool:
        return any(f.kind is SelectorKind.COMBINED for f in self.fragments)

    def element(self, value: str) -> Selector:
        return self._add(SelectorKind.ELEMENT, value)

    def id(self, value: str) -> Selector:
        return self._add(SelectorKind.ID, value)

    def class_(self, value: str) -> Selector:
        return self._add(SelectorKind.CLASS, value)

    def attribute(self, value: str) -> Selector:
        return self._add(SelectorKind.ATTRIBUTE, value)

    attr = attribute

    def pseudo_class(self, value: str) -> Selector:
        return self._add(SelectorKind.PSEUDO_CLASS, value)

    def pseudo_element(self, value: str) -> Selector:
        return self._add(SelectorKind.PSEUDO_ELEMENT, value)

    def render(self) -> str:
        """Concatenate all fragment texts in append order."""
        return "".join(f.text for f in self.fragments)

    stringify = render

    def _has_kind(self, kind: SelectorKind) -> bool:
        return any(f.kind is kind for f in self.fragments)

    def _add(self, kind: SelectorKind, value: str) -> Selector:
        if self.combined:
            raise SelectorError("Combined selectors cannot be extended")

        duplicate = kind in SINGLETON_KINDS and self._has_kind(kind)

        self.fragments.append(make_fragment(kind, value))
        logger.debug("Appended %s fragment: %s", kind.value, self.fragments[-1].text)

        if duplicate:
            logger.debug("Duplicate %s in selector %r", kind.value, self.render())
            raise DuplicateSingletonSelector()
        if not self._in_order():
            logger.debug("Out of order %s in selector %r", kind.value, self.render())
            raise OutOfOrderSelector()

        return self

    def _in_order(self) -> bool:
        present = [f.kind for f in self.fragments if f.kind in SELECTOR_ORDER]
        expected = [kind for kind in SELECTOR_ORDER if kind in present]
        # only first-occurrence order matters, repeats of a kind are fine
        seen: List[SelectorKind] = []
        for kind in present:
            if kind not in seen:
                seen.append(kind)
        return seen == expected


class CssSelectorBuilder:
    """Facade creating new selectors, one per call."""

    def element(self, value: str) -> Selector:
        return Selector(SelectorKind.ELEMENT, value)

    def id(self, value: str) -> Selector:
        return Selector(SelectorKind.ID, value)

    def class_(self, value: str) -> Selector:
        return Selector(SelectorKind.CLASS, value)

    def attribute(self, value: str) -> Selector:
        return Selector(SelectorKind.ATTRIBUTE, value)

    attr = attribute

    def pseudo_class(self, value: str) -> Selector:
        return Selector(SelectorKind.PSEUDO_CLASS, value)

    def pseudo_element(self, value: str) -> Selector:
        return Selector(SelectorKind.PSEUDO_ELEMENT, value)

    def combine(self, left: Selector, combinator: str, right: Selector) -> Selector:
        """
        Join two selectors with a combinator.

        The combinator is padded with one space on each side and inserted
        verbatim, so a ' ' combinator produces three spaces.
        """
        for operand in (left, right):
            if not isinstance(operand, Selector):
                raise TypeError(f"Unsupported selector type: {type(operand)}")
        combined = f"{left.render()} {combinator} {right.render()}"
        logger.debug("Combined selector: %r", combined)
        return Selector(SelectorKind.COMBINED, combined)


css_selector_builder = CssSelectorBuilder()
