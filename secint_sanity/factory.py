"""Generates minimal valid options for each security integration command.

Every generated identifier uses the ``SECINT_SANITY_TEST_`` prefix with an
8-character hex suffix, so objects created from these options are easy to
spot and clean up on a shared account.

The generated options are checked against ``OptionsValidator`` in
``test_factory.py`` so they stay valid as the schema evolves.
"""

from typing import Any, Optional

from .enums import (
    OauthSecurityIntegrationClient,
    OauthSecurityIntegrationClientType,
    ScimSecurityIntegrationRunAsRole,
    ScimSecurityIntegrationScimClient,
)
from .identifiers import AccountObjectIdentifier, random_account_object_identifier
from .options import (
    AlterScimSecurityIntegrationOptions,
    CreateOauthForCustomClientsSecurityIntegrationOptions,
    CreateOauthForPartnerApplicationsSecurityIntegrationOptions,
    CreateSaml2SecurityIntegrationOptions,
    CreateScimSecurityIntegrationOptions,
    DropSecurityIntegrationOptions,
    ScimIntegrationSet,
)

TEST_PREFIX = "SECINT_SANITY_TEST_"


def _new_id(identifier: Optional[AccountObjectIdentifier]) -> AccountObjectIdentifier:
    return identifier if identifier is not None else random_account_object_identifier(TEST_PREFIX)


def make_oauth_partner(identifier: Optional[AccountObjectIdentifier] = None, **extra: Any
                       ) -> CreateOauthForPartnerApplicationsSecurityIntegrationOptions:
    """LOOKER partner integration; LOOKER requires a redirect URI."""
    fields = {
        "name": _new_id(identifier),
        "oauth_client": OauthSecurityIntegrationClient.LOOKER,
        "oauth_redirect_uri": "http://example.com",
    }
    fields.update(extra)
    return CreateOauthForPartnerApplicationsSecurityIntegrationOptions(**fields)


def make_oauth_custom(identifier: Optional[AccountObjectIdentifier] = None, **extra: Any
                      ) -> CreateOauthForCustomClientsSecurityIntegrationOptions:
    fields = {
        "name": _new_id(identifier),
        "oauth_client_type": OauthSecurityIntegrationClientType.PUBLIC,
        "oauth_redirect_uri": "https://example.com",
    }
    fields.update(extra)
    return CreateOauthForCustomClientsSecurityIntegrationOptions(**fields)


def make_saml2(identifier: Optional[AccountObjectIdentifier] = None, cert: str = "MIIC", **extra: Any
               ) -> CreateSaml2SecurityIntegrationOptions:
    """Disabled SAML2 integration with a custom provider.

    ``cert`` is passed through as the IdP X.509 certificate body; the
    validator does not inspect it.
    """
    suffix = random_account_object_identifier("").name().lower()
    fields = {
        "name": _new_id(identifier),
        "enabled": False,
        "saml2_issuer": f"secint-sanity-test-{suffix}",
        "saml2_sso_url": "https://example.com",
        "saml2_provider": "Custom",
        "saml2_x509_cert": cert,
    }
    fields.update(extra)
    return CreateSaml2SecurityIntegrationOptions(**fields)


def make_scim(identifier: Optional[AccountObjectIdentifier] = None, **extra: Any
              ) -> CreateScimSecurityIntegrationOptions:
    fields = {
        "name": _new_id(identifier),
        "enabled": False,
        "scim_client": ScimSecurityIntegrationScimClient.GENERIC,
        "run_as_role": ScimSecurityIntegrationRunAsRole.GENERIC_SCIM_PROVISIONER,
    }
    fields.update(extra)
    return CreateScimSecurityIntegrationOptions(**fields)


def make_scim_set(identifier: AccountObjectIdentifier, **settings: Any) -> AlterScimSecurityIntegrationOptions:
    """ALTER ... SET for a SCIM integration; defaults to ``COMMENT = 'altered'``."""
    if not settings:
        settings = {"comment": "altered"}
    return AlterScimSecurityIntegrationOptions(name=identifier, set=ScimIntegrationSet(**settings))


def make_drop(identifier: AccountObjectIdentifier, if_exists: bool = True) -> DropSecurityIntegrationOptions:
    """DROP used for cleanup, ``IF EXISTS`` by default."""
    return DropSecurityIntegrationOptions(name=identifier, if_exists=if_exists or None)
