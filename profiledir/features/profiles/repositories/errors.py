"""Custom exceptions raised by the identity store."""


class DuplicateKeyError(ValueError):
    """Raised when a write would give two identities the same email or phone."""

    def __init__(self, fields: tuple[str, ...]):
        self.fields = fields
        super().__init__(f"Duplicate value for {', '.join(fields)}")

    @property
    def field(self) -> str:
        """The first colliding field."""
        return self.fields[0]


class StoreUnavailableError(ValueError):
    """Raised when the underlying database fails or times out."""

    def __init__(self, detail: str = "Identity store unavailable"):
        super().__init__(detail)
