"""Error values returned in the ``error`` slot of every result envelope.

Services raise these; the client facade turns them into envelopes so callers
never see an exception for a domain failure.
"""


class SnapshareError(Exception):
    """Base class for store failures."""

    code = "error"
    default_message = "Something went wrong"

    def __init__(self, message=None):
        self.message = message or self.default_message
        super().__init__(self.message)

    def to_dict(self):
        """Return the ``{message, code}`` shape rendered into envelopes."""
        return {"message": self.message, "code": self.code}


class DuplicateUser(SnapshareError):
    """Sign-up with an email that already belongs to a user."""

    code = "duplicate_user"
    default_message = "User already exists"


class InvalidCredentials(SnapshareError):
    """Sign-in where no user matches both email and password."""

    code = "invalid_credentials"
    default_message = "Invalid credentials"


class NotFound(SnapshareError):
    """A referenced record does not exist."""

    code = "not_found"

    def __init__(self, resource, identifier=None):
        self.resource = resource
        self.identifier = identifier
        if identifier is None:
            message = f"{resource} not found"
        else:
            message = f"{resource} '{identifier}' not found"
        super().__init__(message)


class ValidationError(SnapshareError):
    """Malformed input."""

    code = "validation_error"

    def __init__(self, message, field=None):
        self.field = field
        super().__init__(message)


class DuplicateLike(SnapshareError):
    """The user already likes this post."""

    code = "duplicate_like"
    default_message = "Post already liked"


class NotOwner(SnapshareError):
    """Acting user does not own the record."""

    code = "not_owner"
    default_message = "You can only change your own posts"
