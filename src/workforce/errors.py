"""
Exception hierarchy for Workforce API.

Every fault raised by a resolver derives from WorkforceError and carries a
machine-readable ``code`` that the GraphQL layer exposes under
``extensions.code``.
"""


class WorkforceError(Exception):
    """Base class for all expected application errors."""

    code = "INTERNAL_ERROR"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(WorkforceError):
    """Input failed a field presence or format rule."""

    code = "BAD_USER_INPUT"


class InvalidIdError(WorkforceError):
    """An identifier could not be parsed."""

    code = "INVALID_ID"


class PersistenceError(WorkforceError):
    """The backing store failed (connectivity, constraint violation, timeout)."""

    code = "PERSISTENCE_ERROR"
