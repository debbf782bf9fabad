"""
Object Flattener

Turns an arbitrary value into a flat dict that can be bound into a template
context. Members are discovered structurally:

- an object providing ``to_context()`` supplies its own mapping
- a Mapping is copied as-is
- dataclass fields annotated on the class (optionally renamed through
  ``context_field``)
- class annotations and ``__slots__`` of other classes, plus the instance
  ``__dict__``

Names starting with an underscore are never exposed. The source value is only
read, never modified.
"""

import dataclasses
import inspect
import logging
from collections.abc import Mapping
from typing import Any, Iterable, Optional

from .exceptions import ReflectionAccessError


logger = logging.getLogger(__name__)

# Dataclass field metadata key holding the name used in the template context
CONTEXT_NAME = 'context_name'


def context_field(name: str, **kwargs) -> Any:
    """
    Declare a dataclass field exposed to templates under another name.

    Example:
        precio_unitario: float = context_field('precioUnitario', default=0.0)
    """
    metadata = dict(kwargs.pop('metadata', None) or {})
    metadata[CONTEXT_NAME] = name
    return dataclasses.field(metadata=metadata, **kwargs)


def _is_public(name: str) -> bool:
    return not name.startswith('_')


def _declared_members(cls: type) -> list[tuple[str, str]]:
    """
    Members declared directly on `cls` as (attribute, context key) pairs.
    """
    own_annotations = inspect.get_annotations(cls)

    if dataclasses.is_dataclass(cls):
        return [
            (f.name, f.metadata.get(CONTEXT_NAME, f.name))
            for f in dataclasses.fields(cls)
            if f.name in own_annotations and _is_public(f.name)
        ]

    names = [name for name in own_annotations if _is_public(name)]

    slots = cls.__dict__.get('__slots__', ())
    if isinstance(slots, str):
        slots = (slots,)
    for slot in slots:
        if _is_public(slot) and slot not in names:
            names.append(slot)

    return [(name, name) for name in names]


def _instance_members(value: Any) -> list[tuple[str, str]]:
    """Attributes stored on the instance itself (not for dataclasses)."""
    if dataclasses.is_dataclass(value):
        return []
    try:
        attributes = vars(value)
    except TypeError:
        return []
    return [(name, name) for name in attributes if _is_public(name)]


def _read_member(value: Any, attribute: str) -> Any:
    try:
        return getattr(value, attribute)
    except Exception as e:
        raise ReflectionAccessError(
            f"Cannot read member '{attribute}' of {type(value).__name__}: {e}"
        ) from e


def _collect(value: Any, members: Iterable[tuple[str, str]], into: dict) -> None:
    """Read `members` of `value` into `into` without overwriting keys."""
    for attribute, key in members:
        if key in into:
            continue
        try:
            into[key] = _read_member(value, attribute)
        except ReflectionAccessError as e:
            logger.warning(f"Skipping unreadable member while flattening: {e}")


def _direct_mapping(value: Any) -> Optional[dict]:
    """Mapping for values that describe their own context, else None."""
    to_context = getattr(type(value), 'to_context', None)
    if callable(to_context):
        return dict(value.to_context())
    if isinstance(value, Mapping):
        return dict(value)
    return None


def flatten(value: Any) -> dict:
    """
    Flatten the members declared on the value's own type.

    Args:
        value: Any object, mapping or None

    Returns:
        Dict from context key to member value (empty for None)
    """
    if value is None:
        return {}

    direct = _direct_mapping(value)
    if direct is not None:
        return direct

    result: dict = {}
    _collect(value, _declared_members(type(value)), result)
    _collect(value, _instance_members(value), result)
    return result


def flatten_with_ancestors(value: Any) -> dict:
    """
    Flatten the members of the value's type and of all its ancestors.

    The MRO is walked from the most-derived type towards ``object``; a key
    captured from a more-derived type is never overwritten by an ancestor.

    Args:
        value: Any object, mapping or None

    Returns:
        Dict from context key to member value (empty for None)
    """
    if value is None:
        return {}

    direct = _direct_mapping(value)
    if direct is not None:
        return direct

    result: dict = {}
    for cls in type(value).__mro__:
        if cls is object:
            break
        _collect(value, _declared_members(cls), result)
        if cls is type(value):
            _collect(value, _instance_members(value), result)
    return result


def flatten_excluding(value: Any, names: Iterable[str]) -> dict:
    """
    Flatten the value's own members, leaving out the given keys.

    Names that are not present are ignored.

    Args:
        value: Any object, mapping or None
        names: Context keys to drop

    Returns:
        Dict from context key to member value
    """
    if isinstance(names, str):
        names = (names,)

    result = flatten(value)
    for name in names:
        result.pop(name, None)
    return result
