"""Domain-specific exceptions"""


class DomainException(Exception):
    """Base exception for domain layer"""

    pass


class InvalidDebtDataError(DomainException):
    """Imported debt data is malformed or missing required columns"""

    pass


class ImportTooLargeError(DomainException):
    """Import payload exceeds the configured size or row limits"""

    pass
