"""Declarative validation schema for every security integration command.

Each ``OperationSchema`` says which checks apply to one command kind; the
validator interprets this table and holds no per-kind logic of its own.
Adding a command kind means adding an options class and an entry here.
"""

from typing import Any, Dict, Optional, Sequence, Tuple, Type

from .enums import OauthSecurityIntegrationClient, OperationKind
from .options import (
    AlterOauthForCustomClientsSecurityIntegrationOptions,
    AlterOauthForPartnerApplicationsSecurityIntegrationOptions,
    AlterSaml2SecurityIntegrationOptions,
    AlterScimSecurityIntegrationOptions,
    CreateOauthForCustomClientsSecurityIntegrationOptions,
    CreateOauthForPartnerApplicationsSecurityIntegrationOptions,
    CreateSaml2SecurityIntegrationOptions,
    CreateScimSecurityIntegrationOptions,
    DescribeSecurityIntegrationOptions,
    DropSecurityIntegrationOptions,
    OauthForCustomClientsIntegrationSet,
    OauthForCustomClientsIntegrationUnset,
    OauthForPartnerApplicationsIntegrationSet,
    OauthForPartnerApplicationsIntegrationUnset,
    Saml2IntegrationSet,
    Saml2IntegrationUnset,
    ScimIntegrationSet,
    ScimIntegrationUnset,
    SecurityIntegrationOptions,
    ShowSecurityIntegrationOptions,
)


class ConditionalRequirement:
    """``required_field`` must be set whenever ``trigger_field == trigger_value``."""

    def __init__(self, trigger_field: str, trigger_value: Any, required_field: str):
        self.trigger_field = trigger_field
        self.trigger_value = trigger_value
        self.required_field = required_field

    def __repr__(self):
        return (f"ConditionalRequirement({self.trigger_field!r}, {self.trigger_value!r}, "
                f"{self.required_field!r})")


class OperationSchema:
    """Validation rules for one command kind.

    Attributes:
        options_type:     The options class validated by this schema.
        identifier:       Field holding the target identifier, or None (SHOW).
        exclusive_pairs:  Field pairs that must never both be set.
        exactly_one_of:   Mode fields of which exactly one must be set.
        payloads:         Mode field -> payload fields of which at least one must be set.
        conditionals:     Conditional requirements checked last.
    """

    def __init__(
        self,
        options_type: Type[SecurityIntegrationOptions],
        identifier: Optional[str] = "name",
        exclusive_pairs: Sequence[Tuple[str, str]] = (),
        exactly_one_of: Sequence[str] = (),
        payloads: Optional[Dict[str, Tuple[str, ...]]] = None,
        conditionals: Sequence[ConditionalRequirement] = (),
    ):
        self.options_type = options_type
        self.kind = options_type.KIND
        self.name = options_type.__name__
        self.identifier = identifier
        self.exclusive_pairs = tuple(exclusive_pairs)
        self.exactly_one_of = tuple(exactly_one_of)
        self.payloads = dict(payloads or {})
        self.conditionals = tuple(conditionals)

    def __repr__(self):
        return f"OperationSchema({self.name})"


_CREATE_PAIRS = (("or_replace", "if_not_exists"),)
_ALTER_MODES = ("set", "unset", "set_tags", "unset_tags")


def _create(options_type, conditionals=()):
    return OperationSchema(options_type, exclusive_pairs=_CREATE_PAIRS, conditionals=conditionals)


def _alter(options_type, set_payload, unset_payload, modes=_ALTER_MODES):
    return OperationSchema(
        options_type,
        exactly_one_of=modes,
        payloads={
            "set": set_payload.OPTIONAL_FIELDS,
            "unset": unset_payload.OPTIONAL_FIELDS,
        },
    )


SCHEMAS: Dict[OperationKind, OperationSchema] = {
    s.kind: s
    for s in (
        _create(
            CreateOauthForPartnerApplicationsSecurityIntegrationOptions,
            conditionals=[
                ConditionalRequirement("oauth_client", OauthSecurityIntegrationClient.LOOKER, "oauth_redirect_uri"),
            ],
        ),
        _create(CreateOauthForCustomClientsSecurityIntegrationOptions),
        _create(CreateSaml2SecurityIntegrationOptions),
        _create(CreateScimSecurityIntegrationOptions),
        _alter(
            AlterOauthForPartnerApplicationsSecurityIntegrationOptions,
            OauthForPartnerApplicationsIntegrationSet,
            OauthForPartnerApplicationsIntegrationUnset,
        ),
        _alter(
            AlterOauthForCustomClientsSecurityIntegrationOptions,
            OauthForCustomClientsIntegrationSet,
            OauthForCustomClientsIntegrationUnset,
        ),
        _alter(
            AlterSaml2SecurityIntegrationOptions,
            Saml2IntegrationSet,
            Saml2IntegrationUnset,
            modes=("set", "unset", "refresh_saml2_snowflake_private_key", "set_tags", "unset_tags"),
        ),
        _alter(AlterScimSecurityIntegrationOptions, ScimIntegrationSet, ScimIntegrationUnset),
        OperationSchema(DropSecurityIntegrationOptions),
        OperationSchema(DescribeSecurityIntegrationOptions),
        OperationSchema(ShowSecurityIntegrationOptions, identifier=None),
    )
}


def get_schema(kind: Any) -> Optional[OperationSchema]:
    """Get the schema for an ``OperationKind``, its string value, or an options class."""
    if isinstance(kind, type) and issubclass(kind, SecurityIntegrationOptions):
        kind = kind.KIND
    try:
        kind = OperationKind(kind)
    except ValueError:
        return None
    return SCHEMAS.get(kind)
