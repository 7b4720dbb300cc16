"""Custom exceptions for profile use cases."""


class InvalidInputError(ValueError):
    """Raised when a request fails validation before reaching the store."""

    def __init__(self, detail: str, field: str | None = None):
        self.field = field
        super().__init__(detail)


class InvalidCredentialsError(ValueError):
    """Raised when identifier or secret is wrong.

    Deliberately says nothing about which of the two was wrong.
    """

    def __init__(self):
        super().__init__("Invalid credentials")


class ProfileNotFoundError(ValueError):
    """Raised when an identity id does not resolve."""

    def __init__(self):
        super().__init__("Profile not found")
