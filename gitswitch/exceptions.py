"""Custom exceptions for gitswitch."""


class GitswitchError(Exception):
    """Base exception for gitswitch."""

    def __init__(self, message: str, details: str | None = None) -> None:
        self.message = message
        self.details = details
        super().__init__(message)

    def __str__(self) -> str:
        return self.message


class IdentityError(GitswitchError):
    """Registration and lookup errors."""

    def __init__(self, message: str, initials: str | None = None) -> None:
        self.initials = initials
        super().__init__(message)


class StoreError(GitswitchError):
    """Errors reading or writing the identity file."""
    pass


class GitConfigError(GitswitchError):
    """Errors related to Git configuration."""
    pass
