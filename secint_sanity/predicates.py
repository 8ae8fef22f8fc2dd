"""Presence predicates used by the validation engine.

A slot counts as set once its ``Opt`` wrapper is present, whatever the
wrapped value is: ``Opt.of(False)``, ``Opt.of(0)`` and ``Opt.of([])`` are all
set.  A bare ``None`` is absent; any other non-``Opt`` value is set.
"""

from typing import Any

from .identifiers import valid_object_identifier
from .optional import Opt


def is_set(value: Any) -> bool:
    if isinstance(value, Opt):
        return value.present
    return value is not None


def exactly_one_set(*values: Any) -> bool:
    return sum(1 for v in values if is_set(v)) == 1


def every_set(*values: Any) -> bool:
    return all(is_set(v) for v in values)


def any_set(*values: Any) -> bool:
    return any(is_set(v) for v in values)


def identifier_valid(identifier: Any) -> bool:
    return valid_object_identifier(identifier)
