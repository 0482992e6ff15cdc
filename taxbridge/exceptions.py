"""Custom exceptions for the TaxBridge tax engine."""


class TaxComputationError(Exception):
    """Base exception for tax computation errors."""


class DataValidationError(TaxComputationError):
    """Raised when a single input value fails validation."""

    def __init__(self, field: str, message: str):
        self.field = field
        super().__init__(f"Validation error on '{field}': {message}")


class InvalidPITInputError(TaxComputationError):
    """Raised when PIT inputs cannot produce a meaningful result.

    Carries every violation so callers can report them together.
    """

    def __init__(self, errors: list[str]):
        self.errors = list(errors)
        super().__init__("Invalid PIT inputs: " + "; ".join(self.errors))


class TaxConfigurationError(TaxComputationError):
    """Raised when a rate table is malformed."""

    def __init__(self, message: str):
        super().__init__(f"Tax configuration error: {message}")
