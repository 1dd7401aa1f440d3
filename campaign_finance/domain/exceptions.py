"""Domain-specific exceptions"""


class DomainException(Exception):
    """Base exception for domain layer"""

    pass


class RecordSourceError(DomainException):
    """Raw bulk-data file could not be read or fetched"""

    pass
