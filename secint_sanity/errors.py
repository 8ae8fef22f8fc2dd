"""Validation violations and the composite error that carries them."""

from typing import Any, Dict, Iterable, Optional, Tuple


# Rules a violation can break
MISSING_OPTIONS = "missing_options"
INVALID_IDENTIFIER = "invalid_identifier"
EXCLUSIVITY = "exclusivity"
COMPLETENESS = "completeness"
CONDITIONAL_REQUIREMENT = "conditional_requirement"


class Violation:
    """A single broken rule found while validating one options value.

    Attributes:
        kind:     Name of the options type (e.g. ``AlterScimSecurityIntegrationOptions``),
                  suffixed with ``.set``/``.unset`` for payload checks.
        rule:     One of the rule constants above.
        fields:   Names of the fields involved, in schema order.
        message:  Human-readable description.
    """

    __slots__ = ("kind", "rule", "fields", "message")

    def __init__(self, kind: str, rule: str, fields: Tuple[str, ...], message: str):
        self.kind = kind
        self.rule = rule
        self.fields = tuple(fields)
        self.message = message

    # -- Constructors --------------------------------------------------------

    @classmethod
    def missing_options(cls, kind: str) -> "Violation":
        return cls(kind, MISSING_OPTIONS, (), "options must not be empty")

    @classmethod
    def invalid_identifier(cls, kind: str, field: str = "name") -> "Violation":
        return cls(kind, INVALID_IDENTIFIER, (field,), "invalid object identifier")

    @classmethod
    def one_of(cls, kind: str, *fields: str) -> "Violation":
        """Fields that are incompatible and cannot be set at the same time."""
        return cls(kind, EXCLUSIVITY, fields,
                   f"fields {_names(fields)} are incompatible and cannot be set at the same time")

    @classmethod
    def exactly_one_of(cls, kind: str, *fields: str) -> "Violation":
        return cls(kind, EXCLUSIVITY, fields, f"exactly one of {_names(fields)} must be set")

    @classmethod
    def at_least_one_of(cls, kind: str, *fields: str) -> "Violation":
        return cls(kind, COMPLETENESS, fields, f"at least one of {_names(fields)} must be set")

    @classmethod
    def conditional_requirement(cls, kind: str, trigger_field: str, trigger_value: Any,
                                required_field: str) -> "Violation":
        value = getattr(trigger_value, "value", trigger_value)
        return cls(kind, CONDITIONAL_REQUIREMENT, (trigger_field, required_field),
                   f"{required_field} is required when {trigger_field} is {value}")

    # -- Presentation --------------------------------------------------------

    def to_dict(self) -> Dict[str, Any]:
        return {
            "kind": self.kind,
            "rule": self.rule,
            "fields": list(self.fields),
            "message": self.message,
        }

    def __eq__(self, other):
        if not isinstance(other, Violation):
            return NotImplemented
        return (self.kind, self.rule, self.fields, self.message) == \
            (other.kind, other.rule, other.fields, other.message)

    def __hash__(self):
        return hash((self.kind, self.rule, self.fields, self.message))

    def __str__(self):
        return f"{self.kind}: {self.message} [{self.rule}]"

    def __repr__(self):
        return f"Violation({self.kind!r}, {self.rule!r}, fields={self.fields!r})"


class OptionsValidationError(Exception):
    """Composite error holding every violation found in one validation call."""

    def __init__(self, violations: Iterable[Violation]):
        self.violations: Tuple[Violation, ...] = tuple(violations)
        super().__init__(self._format())

    def _format(self) -> str:
        if len(self.violations) == 1:
            return str(self.violations[0])
        lines = [f"{len(self.violations)} validation errors:"]
        lines.extend(f"  - {v}" for v in self.violations)
        return "\n".join(lines)

    @property
    def rules(self) -> Tuple[str, ...]:
        return tuple(v.rule for v in self.violations)

    def __eq__(self, other):
        if not isinstance(other, OptionsValidationError):
            return NotImplemented
        return self.violations == other.violations

    def __hash__(self):
        return hash(self.violations)


class OptionsLoadError(ValueError):
    """Raised when options cannot be built from JSON input."""


class ObjectNotFoundError(LookupError):
    """Raised when a SHOW ... LIKE lookup returns no exact match."""


def join_errors(violations: Iterable[Violation]) -> Optional[OptionsValidationError]:
    """Merge violations into one error, or return None when there are none."""
    collected = list(violations)
    if not collected:
        return None
    return OptionsValidationError(collected)


def _names(fields: Iterable[str]) -> str:
    return "[" + ", ".join(fields) + "]"
