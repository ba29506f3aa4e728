"""
Serialization helpers for objtasks objects (Rectangle, Circle, plain values).

Provides JSON/YAML conversion via an intermediate dict representation.
Deserialization never patches behavior onto a parsed value: the parsed
mapping is copied field by field into a fresh instance of the target class.
"""
from __future__ import annotations

import dataclasses
import json
import logging
from typing import Any, Type, TypeVar

import yaml

logger = logging.getLogger(__name__)

T = TypeVar("T")


class SerializationError(Exception):
    """Raised when text cannot be turned into an object of the target class."""
    pass


def to_dict(obj: Any) -> Any:
    if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
        return dataclasses.asdict(obj)
    if isinstance(obj, (list, tuple)):
        return [to_dict(item) for item in obj]
    if isinstance(obj, dict):
        return {key: to_dict(value) for key, value in obj.items()}
    if obj is None or isinstance(obj, (str, int, float, bool)):
        return obj
    raise TypeError(f"Unsupported object type: {type(obj)}")


def from_dict(cls: Type[T], d: Any) -> T:
    if not (dataclasses.is_dataclass(cls) and isinstance(cls, type)):
        raise TypeError(f"Unsupported target type: {cls}")
    if not isinstance(d, dict):
        raise SerializationError(f"Expected a mapping for {cls.__name__}, got {type(d).__name__}")

    fields = {f.name: f for f in dataclasses.fields(cls) if f.init}
    unknown = set(d) - set(fields)
    if unknown:
        raise SerializationError(f"Unknown fields for {cls.__name__}: {sorted(unknown, key=str)}")
    missing = [
        name for name, f in fields.items()
        if name not in d
        and f.default is dataclasses.MISSING
        and f.default_factory is dataclasses.MISSING
    ]
    if missing:
        raise SerializationError(f"Missing fields for {cls.__name__}: {missing}")

    return cls(**d)


def get_json(obj: Any) -> str:
    """
    Return the compact JSON representation of obj.

    Examples:
        [1, 2, 3]         => '[1,2,3]'
        Rectangle(10, 20) => '{"width":10,"height":20}'
    """
    text = json.dumps(to_dict(obj), separators=(",", ":"))
    logger.debug("Serialized %s to JSON (%d chars)", type(obj).__name__, len(text))
    return text


def from_json(cls: Type[T], s: str) -> T:
    """
    Return an object of class cls from its JSON representation.

    Example:
        c = from_json(Circle, '{"radius":10}')
        c.get_circumference()
    """
    try:
        d = json.loads(s)
    except json.JSONDecodeError as e:
        raise SerializationError(f"Invalid JSON for {cls.__name__}: {e}") from e
    logger.debug("Parsed JSON into %s", cls.__name__)
    return from_dict(cls, d)


def to_yaml(obj: Any) -> str:
    text = yaml.safe_dump(to_dict(obj), sort_keys=False)
    logger.debug("Serialized %s to YAML (%d chars)", type(obj).__name__, len(text))
    return text


def from_yaml(cls: Type[T], s: str) -> T:
    try:
        d = yaml.safe_load(s)
    except yaml.YAMLError as e:
        raise SerializationError(f"Invalid YAML for {cls.__name__}: {e}") from e
    logger.debug("Parsed YAML into %s", cls.__name__)
    return from_dict(cls, d)
