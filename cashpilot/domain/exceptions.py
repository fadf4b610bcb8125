"""Domain-specific exceptions"""


class DomainException(Exception):
    """Base exception for domain layer"""

    pass


class InvalidDateError(DomainException):
    """Date string or period key could not be parsed"""

    def __init__(self, value: object):
        self.value = value
        super().__init__(f"Invalid date value: {value!r}")


class InvalidSettingsError(DomainException):
    """Dashboard settings failed validation"""

    pass
