"""
Selector Fragments

A CSS compound selector is stored as an ordered list of fragments.
Each fragment pairs a kind with the exact text that will be emitted:

    element#id.class[attr]:pseudoClass::pseudoElement
              \\----/\\----/\\----------/
              Can be several occurrences

ARCHITECTURAL RULE:
    Fragments are structure only.
    They do not validate CSS syntax and they do not know
    about neighbouring fragments. Ordering rules live in the selector.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, List


class SelectorKind(Enum):
    """
    Kinds of selector parts.

    COMBINED is synthetic: it wraps two already rendered selectors
    joined by a combinator and never takes part in ordering checks.
    """

    ELEMENT = "element"
    ID = "id"
    CLASS = "class"
    ATTRIBUTE = "attribute"
    PSEUDO_CLASS = "pseudoClass"
    PSEUDO_ELEMENT = "pseudoElement"
    COMBINED = "combined"


# Canonical order of parts inside a compound selector
SELECTOR_ORDER: List[SelectorKind] = [
    SelectorKind.ELEMENT,
    SelectorKind.ID,
    SelectorKind.CLASS,
    SelectorKind.ATTRIBUTE,
    SelectorKind.PSEUDO_CLASS,
    SelectorKind.PSEUDO_ELEMENT,
]

# Kinds allowed at most once per selector
SINGLETON_KINDS = frozenset({
    SelectorKind.ELEMENT,
    SelectorKind.ID,
    SelectorKind.PSEUDO_ELEMENT,
})

_PREFIXES: Dict[SelectorKind, str] = {
    SelectorKind.ELEMENT: "",
    SelectorKind.ID: "#",
    SelectorKind.CLASS: ".",
    SelectorKind.PSEUDO_CLASS: ":",
    SelectorKind.PSEUDO_ELEMENT: "::",
}


@dataclass(frozen=True)
class SelectorFragment:
    """
    One rendered piece of a selector.

    Examples:
        SelectorFragment(SelectorKind.ID, "#main")
        SelectorFragment(SelectorKind.ATTRIBUTE, "[href]")

    Properties:
        kind: SelectorKind enum
        text: Exact text to emit
    """

    kind: SelectorKind
    text: str


def decorate(kind: SelectorKind, value: str) -> str:
    """Wrap a raw value in the punctuation of its kind."""
    if kind is SelectorKind.COMBINED:
        return value
    if kind is SelectorKind.ATTRIBUTE:
        return f"[{value}]"
    return f"{_PREFIXES[kind]}{value}"


def make_fragment(kind: SelectorKind, value: str) -> SelectorFragment:
    return SelectorFragment(kind=kind, text=decorate(kind, value))
