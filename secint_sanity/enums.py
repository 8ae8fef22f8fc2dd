"""Closed value sets used by security integration options."""

from enum import Enum


class OperationKind(str, Enum):
    """The administrative commands that can be validated."""

    CREATE_OAUTH_PARTNER = "create-oauth-partner"
    CREATE_OAUTH_CUSTOM = "create-oauth-custom"
    CREATE_SAML2 = "create-saml2"
    CREATE_SCIM = "create-scim"
    ALTER_OAUTH_PARTNER = "alter-oauth-partner"
    ALTER_OAUTH_CUSTOM = "alter-oauth-custom"
    ALTER_SAML2 = "alter-saml2"
    ALTER_SCIM = "alter-scim"
    DROP = "drop"
    DESCRIBE = "describe"
    SHOW = "show"


class OauthSecurityIntegrationClient(str, Enum):
    LOOKER = "LOOKER"
    TABLEAU_DESKTOP = "TABLEAU_DESKTOP"
    TABLEAU_SERVER = "TABLEAU_SERVER"


class OauthSecurityIntegrationClientType(str, Enum):
    PUBLIC = "PUBLIC"
    CONFIDENTIAL = "CONFIDENTIAL"


class OauthSecurityIntegrationUseSecondaryRoles(str, Enum):
    IMPLICIT = "IMPLICIT"
    NONE = "NONE"


class ScimSecurityIntegrationScimClient(str, Enum):
    OKTA = "OKTA"
    AZURE = "AZURE"
    GENERIC = "GENERIC"


class ScimSecurityIntegrationRunAsRole(str, Enum):
    OKTA_PROVISIONER = "OKTA_PROVISIONER"
    AAD_PROVISIONER = "AAD_PROVISIONER"
    GENERIC_SCIM_PROVISIONER = "GENERIC_SCIM_PROVISIONER"
