"""secint-sanity: Option validation for security integration administrative commands.

Validates CREATE/ALTER/DROP/DESCRIBE/SHOW options for OAuth (partner and custom
clients), SAML2 and SCIM security integrations before they are sent to the
platform.  Every independent problem is reported in a single pass.
"""

__version__ = "0.1.0"

from .errors import OptionsValidationError, Violation, join_errors
from .optional import ABSENT, Opt
from .validator import OptionsValidator, validate_options
