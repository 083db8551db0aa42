"""Domain-level exceptions.

All failures the core can report are subclasses of DomainException so the
CLI layer can catch them uniformly and display user-friendly messages.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """Input was missing a required field or carried an invalid value."""


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""


class StoreUnavailableError(DomainException):
    """The underlying document store failed to serve a request."""
