"""Custom exception hierarchy for parseform.

Validation failures of the user's data are never raised: they are returned as
a ``Failure`` outcome. The exceptions below signal misuse of the package
itself (bad options, unsupported input containers).
"""


class ParseFormError(Exception):
    """Base exception for all parseform errors.

    All parseform-specific exceptions inherit from this class, enabling
    centralized exception handling in calling code.
    """

    pass


class ConfigError(ParseFormError):
    """Exception raised for invalid parse options.

    Attributes:
        field: The option that caused the error
        message: Human-readable error message describing the issue
    """

    def __init__(self, field: str, message: str) -> None:
        """Initialize ConfigError with field and message.

        Args:
            field: Option name where the error occurred
            message: Descriptive error message
        """
        self.field = field
        self.message = message
        super().__init__(f"Configuration error in '{field}': {message}")


class InvalidInputKindError(ParseFormError):
    """Exception raised when the input data container is not supported.

    Raised before validation when ``data`` is neither a plain mapping, a
    multi-valued form container, a query string nor an iterable of pairs.

    Attributes:
        kind: Name of the rejected input type
        message: Human-readable error message
    """

    def __init__(self, kind: str) -> None:
        """Initialize InvalidInputKindError with the rejected type name.

        Args:
            kind: Type name of the unsupported input
        """
        self.kind = kind
        self.message = (
            f"Unsupported input type '{kind}'. Expected a mapping, form data, "
            f"query params, a query string or an iterable of (key, value) pairs"
        )
        super().__init__(self.message)
