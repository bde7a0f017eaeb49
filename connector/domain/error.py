"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class ValidationFailedError(DomainError):
    """One or more input fields failed validation.

    Carries the individual field messages so the interface layer can
    report them together.
    """

    def __init__(self, errors: list[dict[str, str]]):
        self.errors = errors
        super().__init__("; ".join(error["msg"] for error in errors))

    @classmethod
    def for_field(cls, param: str, msg: str) -> "ValidationFailedError":
        return cls([{"msg": msg, "param": param, "location": "body"}])


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class NotAuthorizedError(DomainError):
    """Raised when a user attempts to remove content they don't own."""

    def __init__(self, resource: str, resource_id: str, user_id: str):
        self.resource = resource
        super().__init__(
            f"User {user_id} is not authorized to remove {resource} {resource_id}"
        )


class DuplicateUserError(DomainError):
    """Raised when registering an email that already has an account."""

    def __init__(self, email: str):
        super().__init__(f"User already exists: {email}")


class InvalidCredentialsError(DomainError):
    """Raised on login with an unknown email or a wrong password.

    Both cases share this error so callers cannot tell them apart.
    """

    def __init__(self):
        super().__init__("Credentials invalid")


class AlreadyLikedError(DomainError):
    """Raised when a user likes a post twice."""

    def __init__(self, post_id: str, user_id: str):
        super().__init__(f"Post {post_id} already liked by {user_id}")


class NotLikedError(DomainError):
    """Raised when a user unlikes a post they have not liked."""

    def __init__(self, post_id: str, user_id: str):
        super().__init__(f"Post {post_id} has not been liked by {user_id}")
