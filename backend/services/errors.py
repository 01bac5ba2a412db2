"""Errors raised by the form and scoring services."""


class PredictorError(ValueError):
    """Base class for predictor service errors."""


class UnknownFieldError(PredictorError):
    def __init__(self, field: str) -> None:
        self.field = field
        super().__init__(f"Unknown form field: {field!r}")


class IncompleteFormError(PredictorError):
    """Submission attempted while one or more inputs are empty."""

    def __init__(self, fields: list[str]) -> None:
        self.fields = list(fields)
        super().__init__(f"Missing values for: {', '.join(self.fields)}")


class IncompleteInputError(PredictorError):
    """Strict coercion found inputs that are empty or not numeric."""

    def __init__(self, fields: list[str]) -> None:
        self.fields = list(fields)
        super().__init__(f"Non-numeric values for: {', '.join(self.fields)}")
