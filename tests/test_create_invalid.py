"""Tests for invalid CREATE security integration options."""

import pytest
from secint_sanity.enums import OauthSecurityIntegrationClient
from secint_sanity.errors import CONDITIONAL_REQUIREMENT, EXCLUSIVITY, INVALID_IDENTIFIER
from secint_sanity.factory import make_oauth_custom, make_oauth_partner, make_saml2, make_scim
from secint_sanity.optional import Opt
from secint_sanity.options import CreateOauthForPartnerApplicationsSecurityIntegrationOptions
from secint_sanity.validator import OptionsValidator


@pytest.fixture
def validator():
    return OptionsValidator()


@pytest.mark.parametrize("make", [make_oauth_partner, make_oauth_custom, make_saml2, make_scim])
def test_or_replace_and_if_not_exists(validator, make):
    opts = make(or_replace=True, if_not_exists=True)
    is_valid, violations = validator.validate(opts)
    assert not is_valid
    assert [v.rule for v in violations] == [EXCLUSIVITY]
    assert violations[0].fields == ("or_replace", "if_not_exists")
    assert violations[0].kind == type(opts).__name__


def test_or_replace_and_if_not_exists_both_false(validator):
    """Both modifiers present counts as both set, even when their values are False."""
    opts = make_scim(or_replace=Opt.of(False), if_not_exists=Opt.of(False))
    is_valid, violations = validator.validate(opts)
    assert not is_valid
    assert violations[0].rule == EXCLUSIVITY


@pytest.mark.parametrize("make", [make_oauth_partner, make_oauth_custom, make_saml2, make_scim])
def test_invalid_identifier(validator, make):
    opts = make(name="")
    is_valid, violations = validator.validate(opts)
    assert not is_valid
    assert violations[0].rule == INVALID_IDENTIFIER
    assert violations[0].fields == ("name",)


def test_looker_requires_redirect_uri(validator):
    opts = CreateOauthForPartnerApplicationsSecurityIntegrationOptions(
        name="LOOKER_INT",
        oauth_client=OauthSecurityIntegrationClient.LOOKER,
    )
    is_valid, violations = validator.validate(opts)
    assert not is_valid
    assert len(violations) == 1
    assert violations[0].rule == CONDITIONAL_REQUIREMENT
    assert violations[0].fields == ("oauth_client", "oauth_redirect_uri")
    assert "oauth_redirect_uri is required when oauth_client is LOOKER" in str(violations[0])


def test_looker_with_redirect_uri_is_valid(validator):
    opts = CreateOauthForPartnerApplicationsSecurityIntegrationOptions(
        name="LOOKER_INT",
        oauth_client=OauthSecurityIntegrationClient.LOOKER,
        oauth_redirect_uri="http://example.com",
    )
    is_valid, violations = validator.validate(opts)
    assert is_valid, f"Expected valid, got: {violations}"


def test_looker_given_as_plain_string(validator):
    opts = CreateOauthForPartnerApplicationsSecurityIntegrationOptions(name="LOOKER_INT", oauth_client="LOOKER")
    is_valid, violations = validator.validate(opts)
    assert not is_valid
    assert violations[0].rule == CONDITIONAL_REQUIREMENT


def test_create_reports_all_violations_in_order(validator):
    opts = CreateOauthForPartnerApplicationsSecurityIntegrationOptions(
        name="",
        oauth_client=OauthSecurityIntegrationClient.LOOKER,
        or_replace=True,
        if_not_exists=True,
    )
    is_valid, violations = validator.validate(opts)
    assert not is_valid
    assert [v.rule for v in violations] == [INVALID_IDENTIFIER, EXCLUSIVITY, CONDITIONAL_REQUIREMENT]
