"""Validate-then-send facade over a security integration command executor.

The executor is the transport collaborator: any callable taking an options
object and returning the platform's result (for SHOW, a list of rows).  The
facade never calls it with options that fail validation.

Example::

    integrations = SecurityIntegrations(executor)
    integrations.alter_scim(AlterScimSecurityIntegrationOptions(
        name="MY_SCIM", set=ScimIntegrationSet(enabled=True),
    ))
"""

import logging
from typing import Any, Callable, List, Optional

from .errors import ObjectNotFoundError
from .identifiers import AccountObjectIdentifier
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
    SecurityIntegrationOptions,
    ShowSecurityIntegrationOptions,
)
from .validator import validate_options

logger = logging.getLogger(__name__)

Executor = Callable[[SecurityIntegrationOptions], Any]


class SecurityIntegrations:
    """One method per security integration command.

    Each method raises ``OptionsValidationError`` (carrying every violation)
    before anything is sent when its options are invalid, and ``TypeError``
    when given options for a different command.

    Args:
        executor: Callable that sends a validated options object to the
                  platform and returns its result.
    """

    def __init__(self, executor: Executor):
        self.executor = executor

    # -- CREATE --------------------------------------------------------------

    def create_oauth_for_partner_applications(
        self, options: CreateOauthForPartnerApplicationsSecurityIntegrationOptions
    ) -> Any:
        return self._execute(options, CreateOauthForPartnerApplicationsSecurityIntegrationOptions)

    def create_oauth_for_custom_clients(
        self, options: CreateOauthForCustomClientsSecurityIntegrationOptions
    ) -> Any:
        return self._execute(options, CreateOauthForCustomClientsSecurityIntegrationOptions)

    def create_saml2(self, options: CreateSaml2SecurityIntegrationOptions) -> Any:
        return self._execute(options, CreateSaml2SecurityIntegrationOptions)

    def create_scim(self, options: CreateScimSecurityIntegrationOptions) -> Any:
        return self._execute(options, CreateScimSecurityIntegrationOptions)

    # -- ALTER ---------------------------------------------------------------

    def alter_oauth_for_partner_applications(
        self, options: AlterOauthForPartnerApplicationsSecurityIntegrationOptions
    ) -> Any:
        return self._execute(options, AlterOauthForPartnerApplicationsSecurityIntegrationOptions)

    def alter_oauth_for_custom_clients(
        self, options: AlterOauthForCustomClientsSecurityIntegrationOptions
    ) -> Any:
        return self._execute(options, AlterOauthForCustomClientsSecurityIntegrationOptions)

    def alter_saml2(self, options: AlterSaml2SecurityIntegrationOptions) -> Any:
        return self._execute(options, AlterSaml2SecurityIntegrationOptions)

    def alter_scim(self, options: AlterScimSecurityIntegrationOptions) -> Any:
        return self._execute(options, AlterScimSecurityIntegrationOptions)

    # -- DROP / DESCRIBE / SHOW ----------------------------------------------

    def drop(self, options: DropSecurityIntegrationOptions) -> Any:
        return self._execute(options, DropSecurityIntegrationOptions)

    def describe(self, options: DescribeSecurityIntegrationOptions) -> Any:
        return self._execute(options, DescribeSecurityIntegrationOptions)

    def show(self, options: Optional[ShowSecurityIntegrationOptions] = None) -> List[Any]:
        if options is None:
            options = ShowSecurityIntegrationOptions()
        return list(self._execute(options, ShowSecurityIntegrationOptions) or [])

    def show_by_id(self, identifier: Any) -> Any:
        """Return the SHOW row whose name matches ``identifier`` exactly.

        Runs ``SHOW ... LIKE '<name>'`` and filters the rows, because LIKE also
        matches ``_`` and ``%`` wildcards.  Rows may be dicts or objects with a
        ``name`` attribute.
        """
        if isinstance(identifier, str):
            identifier = AccountObjectIdentifier(identifier)
        rows = self.show(ShowSecurityIntegrationOptions(like=identifier.name()))
        for row in rows:
            name = row.get("name") if isinstance(row, dict) else getattr(row, "name", None)
            if name == identifier.name():
                return row
        raise ObjectNotFoundError(f"Security integration {identifier.fully_qualified_name()} not found")

    # -- Internals -----------------------------------------------------------

    def _execute(self, options: Any, kind: type) -> Any:
        if options is not None and not isinstance(options, kind):
            raise TypeError(f"{kind.__name__} expected, got {type(options).__name__}")
        error = validate_options(options, kind)
        if error is not None:
            logger.debug("Refusing to send %s: %s", kind.__name__, error)
            raise error
        logger.debug("Sending %s", kind.__name__)
        return self.executor(options)
