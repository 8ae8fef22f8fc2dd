"""Cross-kind properties of the validation engine.

Covers the missing-options short circuit for every command kind, invalid
identifiers regardless of other settings, idempotence, validate-all
aggregation, and the guarantee that options are never modified.
"""

import copy

import pytest
from secint_sanity.enums import OperationKind
from secint_sanity.errors import (
    COMPLETENESS,
    EXCLUSIVITY,
    INVALID_IDENTIFIER,
    MISSING_OPTIONS,
    OptionsValidationError,
)
from secint_sanity.options import (
    OPTIONS_TYPES,
    AlterSaml2SecurityIntegrationOptions,
    AlterScimSecurityIntegrationOptions,
    Saml2IntegrationSet,
    ScimIntegrationSet,
    ShowSecurityIntegrationOptions,
)
from secint_sanity.schema import SCHEMAS, get_schema
from secint_sanity.validator import OptionsValidator, validate_options


@pytest.fixture
def validator():
    return OptionsValidator()


def test_schema_covers_every_kind():
    assert set(SCHEMAS) == set(OperationKind)
    assert set(OPTIONS_TYPES) == set(OperationKind)


@pytest.mark.parametrize("kind", list(OperationKind))
def test_missing_options_short_circuits(validator, kind):
    ok, violations = validator.validate(None, kind)
    assert not ok
    assert len(violations) == 1
    assert violations[0].rule == MISSING_OPTIONS
    assert violations[0].kind == OPTIONS_TYPES[kind].__name__


@pytest.mark.parametrize("options_type", list(OPTIONS_TYPES.values()))
def test_missing_options_by_class(options_type):
    error = validate_options(None, options_type)
    assert isinstance(error, OptionsValidationError)
    assert error.rules == (MISSING_OPTIONS,)


def test_kind_required_without_options(validator):
    with pytest.raises(TypeError):
        validator.validate(None)


def test_unknown_kind(validator):
    with pytest.raises(ValueError):
        validator.validate(None, "create-kerberos")


@pytest.mark.parametrize("kind", [k for k in OperationKind if k is not OperationKind.SHOW])
def test_invalid_identifier_always_reported(validator, kind):
    ok, violations = validator.validate(OPTIONS_TYPES[kind](name=""))
    assert not ok
    assert violations[0].rule == INVALID_IDENTIFIER


def test_show_schema_has_no_identifier():
    assert get_schema(OperationKind.SHOW).identifier is None
    assert get_schema(ShowSecurityIntegrationOptions).identifier is None


def test_validate_is_idempotent(validator):
    opts = AlterSaml2SecurityIntegrationOptions(name="", set=Saml2IntegrationSet(), set_tags=[])
    first = validate_options(opts)
    second = validate_options(opts)
    assert first == second
    assert first.violations == second.violations


def test_invalid_identifier_and_zero_modes_aggregated():
    error = validate_options(AlterScimSecurityIntegrationOptions(name=""))
    assert error.rules == (INVALID_IDENTIFIER, EXCLUSIVITY)


def test_all_three_violation_kinds_in_one_error():
    """Invalid identifier, two modes at once and an empty chosen payload."""
    opts = AlterScimSecurityIntegrationOptions(name="", set=ScimIntegrationSet(), unset_tags=[])
    error = validate_options(opts)
    assert error.rules == (INVALID_IDENTIFIER, EXCLUSIVITY, COMPLETENESS)
    assert len(str(error).splitlines()) == 4


def test_options_are_not_modified(validator):
    opts = AlterScimSecurityIntegrationOptions(name="MY_SCIM", set=ScimIntegrationSet(), unset_tags=[])
    before = copy.deepcopy(opts)
    validator.validate(opts)
    assert opts == before
