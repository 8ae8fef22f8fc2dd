"""Build options objects from JSON documents.

The document uses snake_case field names and may name its command in a
``"kind"`` key::

    {"kind": "alter-scim", "name": "MY_SCIM", "set": {"enabled": true}}

A key that is present becomes a set field; JSON ``null`` is treated as absent.
"""

import json
from typing import Any, Dict, Optional, Union

from .enums import OperationKind
from .errors import OptionsLoadError
from .options import (
    OPTIONS_TYPES,
    OauthForCustomClientsIntegrationSet,
    OauthForCustomClientsIntegrationUnset,
    OauthForPartnerApplicationsIntegrationSet,
    OauthForPartnerApplicationsIntegrationUnset,
    Saml2IntegrationSet,
    Saml2IntegrationUnset,
    ScimIntegrationSet,
    ScimIntegrationUnset,
    SecurityIntegrationOptions,
    TagAssociation,
)

# Payload classes for the Set/Unset modes of each ALTER kind
_PAYLOAD_TYPES = {
    OperationKind.ALTER_OAUTH_PARTNER: {
        "set": OauthForPartnerApplicationsIntegrationSet,
        "unset": OauthForPartnerApplicationsIntegrationUnset,
    },
    OperationKind.ALTER_OAUTH_CUSTOM: {
        "set": OauthForCustomClientsIntegrationSet,
        "unset": OauthForCustomClientsIntegrationUnset,
    },
    OperationKind.ALTER_SAML2: {
        "set": Saml2IntegrationSet,
        "unset": Saml2IntegrationUnset,
    },
    OperationKind.ALTER_SCIM: {
        "set": ScimIntegrationSet,
        "unset": ScimIntegrationUnset,
    },
}


def parse_kind(value: Any) -> OperationKind:
    """Parse a kind name such as ``"alter-scim"`` (or ``ALTER_SCIM``)."""
    if isinstance(value, OperationKind):
        return value
    if isinstance(value, str):
        try:
            return OperationKind(value.lower().replace("_", "-"))
        except ValueError:
            pass
    valid = ", ".join(k.value for k in OperationKind)
    raise OptionsLoadError(f"Unknown kind {value!r}. Must be one of: {valid}")


def options_from_dict(data: Dict[str, Any], kind: Any = None) -> SecurityIntegrationOptions:
    """Build an options object from a decoded JSON object."""
    if not isinstance(data, dict):
        raise OptionsLoadError("Options document must be a JSON object")

    fields = dict(data)
    doc_kind = fields.pop("kind", None)
    if kind is None and doc_kind is None:
        raise OptionsLoadError("Missing command kind: pass --kind or add a 'kind' key")
    kind = parse_kind(kind if kind is not None else doc_kind)
    options_type = OPTIONS_TYPES[kind]

    unknown = sorted(map(str, set(fields) - set(options_type.field_names())))
    if unknown:
        raise OptionsLoadError(f"Unknown field(s) for {kind.value}: {', '.join(unknown)}")

    for mode, payload_type in _PAYLOAD_TYPES.get(kind, {}).items():
        if fields.get(mode) is not None:
            fields[mode] = _payload_from_dict(fields[mode], payload_type, f"{kind.value}.{mode}")
    if fields.get("set_tags") is not None:
        fields["set_tags"] = _tags_from_value(fields["set_tags"])

    return options_type(**fields)


def _payload_from_dict(value: Any, payload_type: type, where: str) -> Any:
    if not isinstance(value, dict):
        raise OptionsLoadError(f"'{where}' must be an object")
    unknown = sorted(map(str, set(value) - set(payload_type.OPTIONAL_FIELDS)))
    if unknown:
        raise OptionsLoadError(f"Unknown field(s) in '{where}': {', '.join(unknown)}")
    return payload_type(**value)


def _tags_from_value(value: Any) -> Any:
    if isinstance(value, dict):
        return [TagAssociation(name, tag_value) for name, tag_value in value.items()]
    if isinstance(value, list):
        tags = []
        for idx, item in enumerate(value):
            if not isinstance(item, dict) or "name" not in item or "value" not in item:
                raise OptionsLoadError(f"set_tags[{idx}] must be an object with 'name' and 'value'")
            tags.append(TagAssociation(item["name"], item["value"]))
        return tags
    raise OptionsLoadError("'set_tags' must be an object or an array")


def load_string(json_str: Union[str, bytes], kind: Optional[Any] = None) -> SecurityIntegrationOptions:
    """Build options from a JSON string, or UTF-8 encoded bytes."""
    try:
        if isinstance(json_str, bytes):
            json_str = json_str.decode("utf-8")
        data = json.loads(json_str)
    except UnicodeDecodeError as e:
        raise OptionsLoadError(f"Input is not valid UTF-8: {e}") from e
    except json.JSONDecodeError as e:
        raise OptionsLoadError(f"Invalid JSON: {e}") from e
    return options_from_dict(data, kind)


def load_file(file_path: str, kind: Optional[Any] = None) -> SecurityIntegrationOptions:
    """Build options from a JSON file."""
    with open(file_path, "rb") as f:
        return load_string(f.read(), kind)
