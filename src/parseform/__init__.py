"""parseform - Per-field error maps from pydantic validation.

parseform validates form-like input (plain dicts, starlette form data or
query params, query strings) with a pydantic schema and returns either the
typed value or a mapping from field name to message, ready to render next to
each input.

Main features:
- Flat (``"user.email"``) or nested (``{"user": {"email": ...}}``) error maps
- Union alternatives reported field by field
- Optional treatment of empty strings as missing values
"""

from parseform.config.options import ParseOptions
from parseform.core import normalize_form_result, parse_form
from parseform.lib.errors import ConfigError, InvalidInputKindError, ParseFormError
from parseform.models.issue import ValidationIssue
from parseform.models.result import ErrorMap, Failure, ParseOutcome, Success

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "ConfigError",
    "ErrorMap",
    "Failure",
    "InvalidInputKindError",
    "normalize_form_result",
    "parse_form",
    "ParseFormError",
    "ParseOptions",
    "ParseOutcome",
    "Success",
    "ValidationIssue",
]
