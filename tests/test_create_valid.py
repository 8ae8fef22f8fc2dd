"""Tests for valid CREATE security integration options."""

import pytest
from secint_sanity.enums import (
    OauthSecurityIntegrationClient,
    OauthSecurityIntegrationClientType,
    OauthSecurityIntegrationUseSecondaryRoles,
    ScimSecurityIntegrationRunAsRole,
    ScimSecurityIntegrationScimClient,
)
from secint_sanity.options import (
    CreateOauthForCustomClientsSecurityIntegrationOptions,
    CreateOauthForPartnerApplicationsSecurityIntegrationOptions,
    CreateSaml2SecurityIntegrationOptions,
    CreateScimSecurityIntegrationOptions,
)
from secint_sanity.validator import OptionsValidator, validate_options


@pytest.fixture
def validator():
    return OptionsValidator()


def test_oauth_partner_looker_with_redirect_uri(validator):
    opts = CreateOauthForPartnerApplicationsSecurityIntegrationOptions(
        name="LOOKER_INT",
        oauth_client=OauthSecurityIntegrationClient.LOOKER,
        oauth_redirect_uri="http://example.com",
        enabled=True,
        oauth_issue_refresh_tokens=True,
        oauth_refresh_token_validity=12345,
        oauth_use_secondary_roles=OauthSecurityIntegrationUseSecondaryRoles.IMPLICIT,
        comment="a",
    )
    is_valid, violations = validator.validate(opts)
    assert is_valid, f"Expected valid, got: {violations}"


def test_oauth_partner_tableau_without_redirect_uri(validator):
    """Only LOOKER makes the redirect URI mandatory."""
    opts = CreateOauthForPartnerApplicationsSecurityIntegrationOptions(
        name="TABLEAU_INT",
        oauth_client=OauthSecurityIntegrationClient.TABLEAU_DESKTOP,
    )
    is_valid, violations = validator.validate(opts)
    assert is_valid, f"Expected valid, got: {violations}"


def test_oauth_custom_with_or_replace(validator):
    opts = CreateOauthForCustomClientsSecurityIntegrationOptions(
        name="CUSTOM_INT",
        oauth_client_type=OauthSecurityIntegrationClientType.PUBLIC,
        oauth_redirect_uri="https://example.com",
        or_replace=True,
        oauth_enforce_pkce=True,
        oauth_client_rsa_public_key="MIIB",
    )
    is_valid, violations = validator.validate(opts)
    assert is_valid, f"Expected valid, got: {violations}"


def test_saml2_with_if_not_exists(validator):
    opts = CreateSaml2SecurityIntegrationOptions(
        name="SAML_INT",
        enabled=False,
        saml2_issuer="issuer",
        saml2_sso_url="https://example.com",
        saml2_provider="Custom",
        saml2_x509_cert="MIIC",
        if_not_exists=True,
        saml2_force_authn=True,
        allowed_user_domains=["example.com"],
    )
    is_valid, violations = validator.validate(opts)
    assert is_valid, f"Expected valid, got: {violations}"


def test_scim_minimal():
    opts = CreateScimSecurityIntegrationOptions(
        name="SCIM_INT",
        enabled=False,
        scim_client=ScimSecurityIntegrationScimClient.GENERIC,
        run_as_role=ScimSecurityIntegrationRunAsRole.GENERIC_SCIM_PROVISIONER,
        sync_password=False,
    )
    assert validate_options(opts) is None
