"""
Exception hierarchy for the options toolkit.
"""


class OptionLabError(Exception):
    """Base class for all errors raised by optionlab."""
    pass


class InvalidParameterError(OptionLabError, ValueError):
    """
    Raised when an input lies outside the domain of the model.

    Subclasses ValueError so callers that already guard numeric input
    with ``except ValueError`` keep working.

    Attributes:
        name: Name of the offending parameter
        value: The rejected value
    """

    def __init__(self, name: str, value, reason: str):
        self.name = name
        self.value = value
        super().__init__(f"{reason}, got {name}={value}")
