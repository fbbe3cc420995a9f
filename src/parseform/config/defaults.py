"""Default configuration values for parseform."""

# Options applied when the caller passes none
DEFAULT_OPTIONS: dict[str, bool] = {
    "strip_empty_strings": False,
    "flat_result": False,
    "deep_merge": False,
}

# Error map keys
FLAT_KEY_SEPARATOR = "."
ROOT_KEY = ""

# Message stored under the union path when every alternative failed
UNION_MESSAGE = "Invalid input"
UNION_KIND = "invalid_union"

# Prefixes pydantic adds to messages raised from user validators
STRIPPED_MESSAGE_PREFIXES: tuple[str, ...] = (
    "Value error, ",
    "Assertion failed, ",
)
