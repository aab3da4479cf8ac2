"""Domain errors raised by the orchestration layer."""


class ValidationError(ValueError):
    """Raised when caller input is malformed, before any model call is made.

    The message is meant to be shown to the user as-is.
    """

    def __init__(self, *errors: str) -> None:
        self.errors: list[str] = list(errors)
        super().__init__(f"Invalid input: {', '.join(self.errors)}")


class ConfigurationError(RuntimeError):
    """Raised when settings are not enough to reach the model."""
