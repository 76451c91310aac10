"""Employee registration service."""

import logging

from django.db import transaction, IntegrityError

from apps.accounts.models import Employee
from .exceptions import EmployeeRegistrationError

logger = logging.getLogger(__name__)


@transaction.atomic
def register_employee(
    *,
    email: str,
    password: str,
    name: str
) -> Employee:
    """
    Register a new employee.

    A stable ``employee_id`` is generated on creation; it is the key entries
    use to reference the employee, independent of the row primary key.

    Args:
        email: Employee's email address
        password: Employee's password (will be hashed)
        name: Display name

    Returns:
        Created Employee instance

    Raises:
        EmployeeRegistrationError: If required fields are missing or the
            email is already registered
    """
    if not email or not password or not name:
        raise EmployeeRegistrationError("Name, email and password required")

    if Employee.objects.filter(email__iexact=email).exists():
        raise EmployeeRegistrationError("An employee with this email already exists")

    try:
        employee = Employee.objects.create_user(
            email=email,
            password=password,
            name=name,
        )
    except IntegrityError:
        # Unique email constraint caught a concurrent registration
        raise EmployeeRegistrationError("An employee with this email already exists")

    logger.info("Registered employee %s", employee.employee_id)
    return employee
