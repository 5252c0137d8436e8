"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class ValidationError(DomainError):
    """Malformed input, such as a bad email or a weak password."""

    def __init__(self, message: str, errors: list[str] | None = None):
        self.errors = errors or [message]
        super().__init__(message)


class ConflictError(DomainError):
    """A unique value (email, username, Discord id, nation) is already taken."""

    pass


class InvalidCredentialsError(DomainError):
    """Raised when a password login fails.

    The message is the same whether the user is unknown, has no password,
    or gave the wrong one.
    """

    def __init__(self):
        super().__init__("Invalid credentials")


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class ExternalAuthError(DomainError):
    """An external service (Discord, PnW) rejected the request or failed."""

    pass


class InvalidStateError(DomainError):
    """The OAuth state parameter did not validate."""

    def __init__(self):
        super().__init__("Invalid state parameter")


class VerificationRequiredError(DomainError):
    """The operation requires a verified (nation-linked) account."""

    def __init__(self):
        super().__init__("PnW nation verification required")
