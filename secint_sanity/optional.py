"""Explicit optional slot used for every optional option field.

``Opt`` keeps "absent" and "present with an empty/zero value" apart, so that
``Opt.of(False)`` and ``Opt.of("")`` both count as set.
"""

from typing import Any


class Opt:
    """An optional value: either absent, or present with any value."""

    __slots__ = ("present", "value")

    def __init__(self, present: bool = False, value: Any = None):
        self.present = present
        self.value = value if present else None

    @classmethod
    def of(cls, value: Any) -> "Opt":
        return cls(True, value)

    @classmethod
    def absent(cls) -> "Opt":
        return ABSENT

    @classmethod
    def wrap(cls, value: Any) -> "Opt":
        """Wrap a raw value; ``Opt`` instances pass through unchanged.

        A bare ``None`` becomes ``ABSENT``; use ``Opt.of(None)`` for a present
        null.
        """
        if isinstance(value, Opt):
            return value
        if value is None:
            return ABSENT
        return cls.of(value)

    def get(self, default: Any = None) -> Any:
        return self.value if self.present else default

    def __bool__(self):
        return self.present

    def __eq__(self, other):
        if not isinstance(other, Opt):
            return NotImplemented
        return self.present == other.present and self.value == other.value

    def __hash__(self):
        return hash((self.present, repr(self.value)))

    def __repr__(self):
        if not self.present:
            return "Opt.absent()"
        return f"Opt.of({self.value!r})"


ABSENT = Opt()
