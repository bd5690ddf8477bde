"""Custom exceptions for the PROMETHEE preference engine."""


class PrometheeError(Exception):
    """Base exception for all engine errors."""

    def __init__(self, message: str, details: dict | None = None):
        """Initialize exception.

        Args:
            message: Error message
            details: Optional dictionary with additional context
        """
        self.message = message
        self.details = details or {}
        super().__init__(self.message)

    def __str__(self) -> str:
        """Return formatted error message."""
        if self.details:
            details_str = ", ".join(f"{k}={v}" for k, v in self.details.items())
            return f"{self.message} ({details_str})"
        return self.message


class InputError(PrometheeError):
    """Malformed problem bundle or problem file."""
    pass


class ComputationError(PrometheeError):
    """Unexpected failure while computing preferences."""
    pass


class ConfigurationError(PrometheeError):
    """Method configuration errors."""
    pass


class InvalidDirectionError(ConfigurationError):
    """Preference direction other than MAX or MIN."""

    def __init__(self, direction: object):
        super().__init__(
            "Preference direction must be MAX or MIN",
            {"direction": direction},
        )


class NullThresholdError(ConfigurationError):
    """A generalised criterion is missing a threshold it requires."""
    pass


class InvalidCombinationFunctionError(ConfigurationError):
    """Combination (Z) function other than multiplication or minimum."""

    def __init__(self, function: object):
        super().__init__(
            "Combination function must be multiplication or minimum",
            {"function": function},
        )


class InvalidOperatingModeError(ConfigurationError):
    """Operating mode other than normal or reinforced_preference."""

    def __init__(self, mode: object):
        super().__init__(
            "Operating mode must be normal or reinforced_preference",
            {"mode": mode},
        )


class PositiveNetBalanceError(ConfigurationError):
    """Weakening and antagonistic effects on a criterion outweigh its weight."""

    def __init__(self, criterion: str, weight: float, exposure: float):
        self.criterion = criterion
        super().__init__(
            f"Net balance of criterion {criterion} is not positive",
            {"criterion": criterion, "weight": weight, "exposure": exposure},
        )
