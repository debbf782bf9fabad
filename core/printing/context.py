"""
Template Context Builder

Assembles the dict handed to the template engine from named assignments and
at most one flattened object. Writes are applied in call order and the last
write for a key wins. Nested values (lists of line items, mappings) are
passed through untouched; only the object given to add_object() is flattened.
"""

import logging
from collections.abc import Mapping
from typing import Any, Iterable, Optional

from .flattener import flatten, flatten_excluding, flatten_with_ancestors


logger = logging.getLogger(__name__)


class TemplateContextBuilder:
    """
    Builder for template contexts.

    Usage:
        context = (
            TemplateContextBuilder()
            .add_object(reporte, exclude={'posiciones'})
            .set('posiciones', rows)
            .build()
        )
    """

    def __init__(self):
        self._values: dict = {}
        self._object_added = False

    def set(self, name: str, value: Any) -> 'TemplateContextBuilder':
        """Assign a single variable, replacing any earlier value."""
        self._values[name] = value
        return self

    def update(self, mapping: Optional[Mapping] = None, **values) -> 'TemplateContextBuilder':
        """Assign every key of `mapping`, then every keyword argument."""
        if mapping:
            for name, value in mapping.items():
                self._values[name] = value
        for name, value in values.items():
            self._values[name] = value
        return self

    def add_object(
        self,
        obj: Any,
        *,
        include_ancestors: bool = False,
        exclude: Iterable[str] = ()
    ) -> 'TemplateContextBuilder':
        """
        Flatten `obj` and merge its members into the context.

        Args:
            obj: Object to flatten (None contributes nothing)
            include_ancestors: Also include members declared on base classes
            exclude: Keys to leave out of the flattened members

        Raises:
            ValueError: If an object was already added to this builder
        """
        if self._object_added:
            raise ValueError("Only one object can be flattened into a template context")
        self._object_added = True

        if include_ancestors:
            members = flatten_with_ancestors(obj)
            for name in ([exclude] if isinstance(exclude, str) else exclude):
                members.pop(name, None)
        else:
            members = flatten_excluding(obj, exclude)

        logger.debug(
            f"Adding {len(members)} members of {type(obj).__name__} to template context"
        )
        self._values.update(members)
        return self

    def build(self) -> dict:
        """Return the assembled context as a new dict."""
        return dict(self._values)


def build_context(obj: Any = None, *mappings: Mapping, **values) -> dict:
    """
    Build a template context in one call.

    The flattened `obj` is applied first, then each mapping in order, then
    the keyword arguments; later writes win.
    """
    builder = TemplateContextBuilder()
    if obj is not None:
        builder.add_object(obj)
    for mapping in mappings:
        builder.update(mapping)
    builder.update(values)
    return builder.build()
