class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class DuplicateIdError(DomainError):
    """Raised when an entity id is already taken."""


class ConflictingAssignmentError(DomainError):
    """Raised when a class/subject already has a teacher assigned."""


class DuplicateEmailError(DomainError):
    """Raised when an identity is registered twice for the same email."""


class MalformedInputError(DomainError):
    """Raised when an import file is structurally unusable."""


class AuthenticationError(DomainError):
    """Raised when login credentials are invalid."""
