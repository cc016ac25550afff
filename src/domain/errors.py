"""
Domain Errors

Exceptions raised by the account workflow. Each carries an Error value
(code + message) that the API layer turns into a response body.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Error:
    code: str
    message: str


class DomainError(Exception):
    code = "DOMAIN_ERROR"

    def __init__(self, message: str):
        self.error = Error(self.code, message)
        super().__init__(message)


class InvalidArgumentError(DomainError):
    """A required argument was blank or missing. Always a defect in the caller."""

    code = "INVALID_ARGUMENT"


class TokenExpiredOrInvalidError(DomainError):
    """
    The presented token is not in the store.

    Never issued, expired and already consumed are deliberately one condition:
    the store keeps no tombstone for used tokens.
    """

    code = "TOKEN_EXPIRED_OR_INVALID"


class EntityNotFoundError(DomainError):
    code = "ENTITY_NOT_FOUND"

    def __init__(self, entity: str, message: str | None = None):
        self.entity = entity
        super().__init__(message or f"{entity} not found.")


class StudyNotFoundError(EntityNotFoundError):
    code = "STUDY_NOT_FOUND"

    def __init__(self, identifier: str):
        self.identifier = identifier
        super().__init__("Study", f"Study '{identifier}' not found.")


class InvalidPasswordError(DomainError):
    code = "INVALID_PASSWORD"


class ConcurrentModificationError(DomainError):
    code = "CONCURRENT_MODIFICATION"


def require_not_blank(value, name: str) -> str:
    if value is None or not str(value).strip():
        raise InvalidArgumentError(f"{name} must not be blank")
    return value
