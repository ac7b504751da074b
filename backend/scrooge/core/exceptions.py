"""
Application exceptions.
"""


class InvalidAmount(ValueError):
    """Raised when a budget value is negative, non-finite or not a number."""

    def __init__(self, value=None, message: str = "Invalid budget value"):
        super().__init__(message)
        self.value = value
        self.message = message
