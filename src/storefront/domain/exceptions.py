"""Domain-level exceptions.

All business rule violations are expressed as subclasses of DomainException
so the CLI and HTTP layers can catch them uniformly and report them.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """Caller input is missing a required field."""


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""
