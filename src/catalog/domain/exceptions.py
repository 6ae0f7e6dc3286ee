"""Domain-level exceptions.

All failures are expressed as subclasses of DomainException so callers
(and the CLI layer) can catch them uniformly and branch on the subclass.
"""


class DomainException(Exception):
    """Base class for all catalog errors."""


class ValidationError(DomainException):
    """A required field is missing, empty or otherwise invalid."""


class DuplicateCodeError(ValidationError):
    """A product with the same code already exists."""


class NotFoundError(DomainException):
    """A requested product does not exist."""


class StorageError(DomainException):
    """The backing file could not be read or written."""
