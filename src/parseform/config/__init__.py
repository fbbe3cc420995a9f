"""Options and defaults for parseform.

Main components:
- ParseOptions: Validated options for normalize_form_result
- Default values and error map key conventions
- Readable rendering of pydantic validation errors
"""

from parseform.config.options import ParseOptions
from parseform.config.validator import clean_message, flatten_pydantic_errors

__all__ = [
    "ParseOptions",
    "clean_message",
    "flatten_pydantic_errors",
]
