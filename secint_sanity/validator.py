"""Core option validation logic for security integration commands."""

import logging
from typing import Any, List, Optional, Tuple

from .errors import OptionsValidationError, Violation, join_errors
from .optional import Opt
from .predicates import any_set, every_set, exactly_one_set, identifier_valid, is_set
from .schema import OperationSchema, get_schema

logger = logging.getLogger(__name__)


class OptionsValidator:
    """Validates options for all security integration commands.

    Every check that applies to the command kind runs, so one call reports
    every independent problem.  The options value is only read.
    """

    def validate(self, options: Any, kind: Any = None) -> Tuple[bool, List[Violation]]:
        """
        Validate one options value.

        Args:
            options: Options object to validate, or None if it was never built
            kind: ``OperationKind``, its string value, or an options class.
                  Defaults to the kind of ``options``.

        Returns:
            Tuple of (is_valid, list_of_violations)
        """
        schema = self._resolve_schema(options, kind)

        if options is None:
            logger.debug("validate %s: options missing", schema.name)
            return False, [Violation.missing_options(schema.name)]

        violations: List[Violation] = []
        self._check_identifier(options, schema, violations)
        self._check_exclusive_pairs(options, schema, violations)
        self._check_conditionals(options, schema, violations)
        self._check_modes(options, schema, violations)
        self._check_payloads(options, schema, violations)

        logger.debug("validate %s: %d violation(s)", schema.name, len(violations))
        return len(violations) == 0, violations

    def _resolve_schema(self, options: Any, kind: Any) -> OperationSchema:
        if kind is None:
            if options is None:
                raise TypeError("kind is required when options is None")
            kind = type(options)
        schema = get_schema(kind)
        if schema is None:
            raise ValueError(f"Unknown security integration command kind: {kind!r}")
        return schema

    def _check_identifier(self, options: Any, schema: OperationSchema, violations: List[Violation]):
        if schema.identifier is None:
            return
        if not identifier_valid(getattr(options, schema.identifier, None)):
            violations.append(Violation.invalid_identifier(schema.name, schema.identifier))

    def _check_exclusive_pairs(self, options: Any, schema: OperationSchema, violations: List[Violation]):
        """Creation modifiers such as OR REPLACE and IF NOT EXISTS."""
        for pair in schema.exclusive_pairs:
            if every_set(*(getattr(options, f, None) for f in pair)):
                violations.append(Violation.one_of(schema.name, *pair))

    def _check_conditionals(self, options: Any, schema: OperationSchema, violations: List[Violation]):
        for rule in schema.conditionals:
            trigger = getattr(options, rule.trigger_field, None)
            if isinstance(trigger, Opt):
                trigger = trigger.get()
            if trigger == rule.trigger_value and not is_set(getattr(options, rule.required_field, None)):
                violations.append(Violation.conditional_requirement(
                    schema.name, rule.trigger_field, rule.trigger_value, rule.required_field
                ))

    def _check_modes(self, options: Any, schema: OperationSchema, violations: List[Violation]):
        """ALTER takes exactly one of its alternative modes."""
        if not schema.exactly_one_of:
            return
        if not exactly_one_set(*(getattr(options, f, None) for f in schema.exactly_one_of)):
            violations.append(Violation.exactly_one_of(schema.name, *schema.exactly_one_of))

    def _check_payloads(self, options: Any, schema: OperationSchema, violations: List[Violation]):
        """A present Set/Unset payload needs at least one field."""
        for mode, fields in schema.payloads.items():
            slot = getattr(options, mode, None)
            if not is_set(slot):
                continue
            payload = getattr(slot, "value", slot)
            if not any_set(*(getattr(payload, f, None) for f in fields)):
                violations.append(Violation.at_least_one_of(f"{schema.name}.{mode}", *fields))


def validate_options(options: Any, kind: Any = None) -> Optional[OptionsValidationError]:
    """Validate options and return a composite error, or None if valid."""
    _, violations = OptionsValidator().validate(options, kind)
    return join_errors(violations)
