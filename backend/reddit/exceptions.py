"""Exceptions raised by the reddit package."""


class InvalidPaginationParameter(ValueError):
    """Raised when a page number or page size is below 1."""

    def __init__(self, name: str, value: int):
        self.name = name
        self.value = value
        super().__init__(f"{name} must be >= 1, got {value}")
