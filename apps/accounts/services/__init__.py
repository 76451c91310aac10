"""Services for accounts business logic."""

from .exceptions import (
    AccountsServiceError,
    EmployeeRegistrationError,
    InvalidCredentialsError,
    InactiveAccountError,
    EmployeeNotFoundError,
    AdminNotFoundError,
)
from .employee_registration import register_employee
from .authentication import authenticate_employee, authenticate_admin
from .employee_directory import (
    list_employees,
    get_employee,
    employee_exists,
    get_admin,
    employee_names,
)

__all__ = [
    # Exceptions
    'AccountsServiceError',
    'EmployeeRegistrationError',
    'InvalidCredentialsError',
    'InactiveAccountError',
    'EmployeeNotFoundError',
    'AdminNotFoundError',
    # Services
    'register_employee',
    'authenticate_employee',
    'authenticate_admin',
    'list_employees',
    'get_employee',
    'employee_exists',
    'get_admin',
    'employee_names',
]
