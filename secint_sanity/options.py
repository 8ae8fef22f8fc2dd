"""Options for every security integration command, plus Set/Unset payloads.

Each class declares its fields as data:

- ``PLAIN_FIELDS`` hold ordinary values (the target ``name`` and values that
  the statement always carries, such as the OAuth client).
- ``OPTIONAL_FIELDS`` are stored as ``Opt`` slots; a keyword argument left at
  ``None`` is absent.

Options objects are built by the caller and only read by the validator.
"""

from typing import Any, Dict, List, Optional, Tuple

from .enums import OperationKind
from .identifiers import AccountObjectIdentifier
from .optional import ABSENT, Opt


class _OptionFields:
    """Keyword-only constructor driven by the class-level field declarations."""

    PLAIN_FIELDS: Tuple[str, ...] = ()
    OPTIONAL_FIELDS: Tuple[str, ...] = ()

    def __init__(self, **kwargs: Any):
        unknown = set(kwargs) - set(self.PLAIN_FIELDS) - set(self.OPTIONAL_FIELDS)
        if unknown:
            raise TypeError(f"{type(self).__name__} got unexpected fields: {', '.join(sorted(unknown))}")
        for field in self.PLAIN_FIELDS:
            value = kwargs.get(field)
            if field == "name" and isinstance(value, str):
                value = AccountObjectIdentifier(value)
            setattr(self, field, value)
        for field in self.OPTIONAL_FIELDS:
            setattr(self, field, Opt.wrap(kwargs.get(field)))

    @classmethod
    def field_names(cls) -> Tuple[str, ...]:
        return cls.PLAIN_FIELDS + cls.OPTIONAL_FIELDS

    def set_fields(self) -> List[str]:
        """Names of the optional fields that are present."""
        return [f for f in self.OPTIONAL_FIELDS if getattr(self, f, ABSENT).present]

    def to_dict(self) -> Dict[str, Any]:
        """Plain fields plus present optional fields, payloads expanded."""
        d: Dict[str, Any] = {}
        for field in self.PLAIN_FIELDS:
            value = getattr(self, field)
            if value is not None:
                d[field] = value
        for field in self.set_fields():
            value = getattr(self, field).value
            d[field] = value.to_dict() if isinstance(value, _OptionFields) else value
        return d

    def __eq__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return all(getattr(self, f) == getattr(other, f) for f in self.field_names())

    def __repr__(self):
        parts = [f"{k}={v!r}" for k, v in self.to_dict().items()]
        return f"{type(self).__name__}({', '.join(parts)})"


class SecurityIntegrationOptions(_OptionFields):
    """Base class for the options of one administrative command."""

    KIND: Optional[OperationKind] = None


class TagAssociation:
    """A tag name and the value assigned to it."""

    def __init__(self, name: Any, value: str):
        self.name = name
        self.value = value

    def __eq__(self, other):
        if not isinstance(other, TagAssociation):
            return NotImplemented
        return self.name == other.name and self.value == other.value

    def __repr__(self):
        return f"TagAssociation({self.name!r}, {self.value!r})"


_CREATE_MODIFIERS = ("or_replace", "if_not_exists")
_ALTER_MODES = ("set", "unset", "set_tags", "unset_tags")

_OAUTH_PARTNER_SETTINGS = (
    "enabled",
    "oauth_issue_refresh_tokens",
    "oauth_redirect_uri",
    "oauth_refresh_token_validity",
    "oauth_use_secondary_roles",
    "blocked_roles_list",
    "comment",
)

_OAUTH_CUSTOM_SETTINGS = (
    "enabled",
    "oauth_redirect_uri",
    "oauth_allow_non_tls_redirect_uri",
    "oauth_enforce_pkce",
    "pre_authorized_roles_list",
    "blocked_roles_list",
    "oauth_issue_refresh_tokens",
    "oauth_refresh_token_validity",
    "oauth_use_secondary_roles",
    "network_policy",
    "oauth_client_rsa_public_key",
    "oauth_client_rsa_public_key_2",
    "comment",
)

_SAML2_SETTINGS = (
    "enabled",
    "saml2_issuer",
    "saml2_sso_url",
    "saml2_provider",
    "saml2_x509_cert",
    "allowed_user_domains",
    "allowed_email_patterns",
    "saml2_sp_initiated_login_page_label",
    "saml2_enable_sp_initiated",
    "saml2_snowflake_x509_cert",
    "saml2_sign_request",
    "saml2_requested_nameid_format",
    "saml2_post_logout_redirect_url",
    "saml2_force_authn",
    "saml2_snowflake_issuer_url",
    "saml2_snowflake_acs_url",
    "comment",
)

_SCIM_SETTINGS = ("enabled", "network_policy", "sync_password", "comment")

# Always carried by CREATE SAML2
_SAML2_REQUIRED = ("name", "enabled", "saml2_issuer", "saml2_sso_url", "saml2_provider", "saml2_x509_cert")


# -- Set / Unset payloads ------------------------------------------------------

class OauthForPartnerApplicationsIntegrationSet(_OptionFields):
    OPTIONAL_FIELDS = _OAUTH_PARTNER_SETTINGS


class OauthForPartnerApplicationsIntegrationUnset(_OptionFields):
    OPTIONAL_FIELDS = ("enabled", "oauth_use_secondary_roles")


class OauthForCustomClientsIntegrationSet(_OptionFields):
    OPTIONAL_FIELDS = _OAUTH_CUSTOM_SETTINGS


class OauthForCustomClientsIntegrationUnset(_OptionFields):
    OPTIONAL_FIELDS = (
        "enabled",
        "network_policy",
        "oauth_use_secondary_roles",
        "oauth_client_rsa_public_key",
        "oauth_client_rsa_public_key_2",
    )


class Saml2IntegrationSet(_OptionFields):
    OPTIONAL_FIELDS = _SAML2_SETTINGS


class Saml2IntegrationUnset(_OptionFields):
    OPTIONAL_FIELDS = (
        "saml2_force_authn",
        "saml2_requested_nameid_format",
        "saml2_post_logout_redirect_url",
        "comment",
    )


class ScimIntegrationSet(_OptionFields):
    OPTIONAL_FIELDS = _SCIM_SETTINGS


class ScimIntegrationUnset(_OptionFields):
    OPTIONAL_FIELDS = _SCIM_SETTINGS


# -- CREATE --------------------------------------------------------------------

class CreateOauthForPartnerApplicationsSecurityIntegrationOptions(SecurityIntegrationOptions):
    KIND = OperationKind.CREATE_OAUTH_PARTNER
    PLAIN_FIELDS = ("name", "oauth_client")
    OPTIONAL_FIELDS = _CREATE_MODIFIERS + _OAUTH_PARTNER_SETTINGS


class CreateOauthForCustomClientsSecurityIntegrationOptions(SecurityIntegrationOptions):
    KIND = OperationKind.CREATE_OAUTH_CUSTOM
    PLAIN_FIELDS = ("name", "oauth_client_type", "oauth_redirect_uri")
    OPTIONAL_FIELDS = _CREATE_MODIFIERS + tuple(f for f in _OAUTH_CUSTOM_SETTINGS if f != "oauth_redirect_uri")


class CreateSaml2SecurityIntegrationOptions(SecurityIntegrationOptions):
    KIND = OperationKind.CREATE_SAML2
    PLAIN_FIELDS = _SAML2_REQUIRED
    OPTIONAL_FIELDS = _CREATE_MODIFIERS + tuple(f for f in _SAML2_SETTINGS if f not in _SAML2_REQUIRED)


class CreateScimSecurityIntegrationOptions(SecurityIntegrationOptions):
    KIND = OperationKind.CREATE_SCIM
    PLAIN_FIELDS = ("name", "enabled", "scim_client", "run_as_role")
    OPTIONAL_FIELDS = _CREATE_MODIFIERS + ("network_policy", "sync_password", "comment")


# -- ALTER ---------------------------------------------------------------------

class AlterOauthForPartnerApplicationsSecurityIntegrationOptions(SecurityIntegrationOptions):
    KIND = OperationKind.ALTER_OAUTH_PARTNER
    PLAIN_FIELDS = ("name",)
    OPTIONAL_FIELDS = ("if_exists",) + _ALTER_MODES


class AlterOauthForCustomClientsSecurityIntegrationOptions(SecurityIntegrationOptions):
    KIND = OperationKind.ALTER_OAUTH_CUSTOM
    PLAIN_FIELDS = ("name",)
    OPTIONAL_FIELDS = ("if_exists",) + _ALTER_MODES


class AlterSaml2SecurityIntegrationOptions(SecurityIntegrationOptions):
    KIND = OperationKind.ALTER_SAML2
    PLAIN_FIELDS = ("name",)
    OPTIONAL_FIELDS = ("if_exists", "set", "unset", "refresh_saml2_snowflake_private_key", "set_tags", "unset_tags")


class AlterScimSecurityIntegrationOptions(SecurityIntegrationOptions):
    KIND = OperationKind.ALTER_SCIM
    PLAIN_FIELDS = ("name",)
    OPTIONAL_FIELDS = ("if_exists",) + _ALTER_MODES


# -- DROP / DESCRIBE / SHOW ----------------------------------------------------

class DropSecurityIntegrationOptions(SecurityIntegrationOptions):
    KIND = OperationKind.DROP
    PLAIN_FIELDS = ("name",)
    OPTIONAL_FIELDS = ("if_exists",)


class DescribeSecurityIntegrationOptions(SecurityIntegrationOptions):
    KIND = OperationKind.DESCRIBE
    PLAIN_FIELDS = ("name",)


class ShowSecurityIntegrationOptions(SecurityIntegrationOptions):
    KIND = OperationKind.SHOW
    OPTIONAL_FIELDS = ("like",)


OPTIONS_TYPES = {
    cls.KIND: cls
    for cls in (
        CreateOauthForPartnerApplicationsSecurityIntegrationOptions,
        CreateOauthForCustomClientsSecurityIntegrationOptions,
        CreateSaml2SecurityIntegrationOptions,
        CreateScimSecurityIntegrationOptions,
        AlterOauthForPartnerApplicationsSecurityIntegrationOptions,
        AlterOauthForCustomClientsSecurityIntegrationOptions,
        AlterSaml2SecurityIntegrationOptions,
        AlterScimSecurityIntegrationOptions,
        DropSecurityIntegrationOptions,
        DescribeSecurityIntegrationOptions,
        ShowSecurityIntegrationOptions,
    )
}
