# eventboard/core/errors.py
"""
Domain error taxonomy.

Repositories and services raise these; only the HTTP routers translate them
into status codes and client-facing messages.
"""


class AppError(Exception):
    """Base class for all expected application errors."""


class NotFoundError(AppError):
    """An entity (or one side of an association) does not exist."""

    def __init__(self, entity: str, identifier=None):
        self.entity = entity
        self.identifier = identifier
        if identifier is None:
            super().__init__(f"{entity} not found")
        else:
            super().__init__(f"{entity} with id {identifier} not found")


class AlreadyExistsError(AppError):
    """A unique field collides with an existing row."""

    def __init__(self, entity: str, field: str, value):
        self.entity = entity
        self.field = field
        self.value = value
        super().__init__(f"{entity} with {field} {value!r} already exists")


class InvalidCredentialsError(AppError):
    """Unknown email or wrong password; the two cases are not distinguished."""

    def __init__(self):
        super().__init__("invalid credentials")


class InvalidDateFormatError(AppError):
    def __init__(self, value: str):
        self.value = value
        super().__init__(f"invalid date format: {value!r}")


# Token errors
class TokenError(AppError):
    """Base class for bearer token verification failures."""


class InvalidSignatureError(TokenError):
    pass


class TokenExpiredError(TokenError):
    pass


class MalformedTokenError(TokenError):
    pass
