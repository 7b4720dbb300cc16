import enum


class IdentifierMode(str, enum.Enum):
    """Which alternate identity key an identifier belongs to."""

    EMAIL = "email"
    PHONE = "phone"
