"""Domain-specific exceptions for accounts services."""


class AccountsServiceError(Exception):
    """Base exception for accounts services."""
    pass


class EmployeeRegistrationError(AccountsServiceError):
    """Raised when employee registration fails."""
    pass


class InvalidCredentialsError(AccountsServiceError):
    """Raised when authentication credentials are invalid."""
    pass


class InactiveAccountError(AccountsServiceError):
    """Raised when account is deactivated."""
    pass


class EmployeeNotFoundError(AccountsServiceError):
    """Raised when employee does not exist."""
    pass


class AdminNotFoundError(AccountsServiceError):
    """Raised when admin does not exist."""
    pass
