"""Employee and admin authentication services."""

from apps.accounts.models import Admin, Employee
from .exceptions import InvalidCredentialsError, InactiveAccountError


def authenticate_employee(*, email: str, password: str) -> Employee:
    """
    Authenticate employee with email and password.

    Args:
        email: Employee's email
        password: Employee's password

    Returns:
        Authenticated Employee instance

    Raises:
        InvalidCredentialsError: If credentials are invalid
        InactiveAccountError: If account is deactivated
    """
    try:
        employee = Employee.objects.get(email__iexact=email)
    except Employee.DoesNotExist:
        raise InvalidCredentialsError("Invalid credentials")

    if not employee.check_password(password):
        raise InvalidCredentialsError("Invalid credentials")

    if not employee.is_active:
        raise InactiveAccountError("Account is deactivated")

    return employee


def authenticate_admin(*, email: str, password: str) -> Admin:
    """
    Authenticate admin with email and password.

    Raises:
        InvalidCredentialsError: If credentials are invalid
    """
    admin = Admin.objects.filter(email__iexact=email).first()
    if admin is None or not admin.check_password(password):
        raise InvalidCredentialsError("Invalid credentials")

    return admin
