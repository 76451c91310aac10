"""Employee and admin lookups used by other apps."""

from uuid import UUID

from django.db.models import QuerySet

from apps.accounts.models import Admin, Employee
from .exceptions import AdminNotFoundError, EmployeeNotFoundError


def list_employees() -> QuerySet:
    """Return all employees ordered by name."""
    return Employee.objects.only('id', 'employee_id', 'name', 'email').order_by('name', 'email')


def get_employee(*, employee_id: UUID) -> Employee:
    """
    Look up an employee by stable employee_id.

    Raises:
        EmployeeNotFoundError: If no employee has this employee_id
    """
    try:
        return Employee.objects.get(employee_id=employee_id)
    except Employee.DoesNotExist:
        raise EmployeeNotFoundError("Employee not found")


def employee_exists(*, employee_id: UUID) -> bool:
    return Employee.objects.filter(employee_id=employee_id).exists()


def get_admin(*, admin_id: UUID) -> Admin:
    """
    Look up an admin by stable admin_id.

    Raises:
        AdminNotFoundError: If no admin has this admin_id
    """
    try:
        return Admin.objects.get(admin_id=admin_id)
    except Admin.DoesNotExist:
        raise AdminNotFoundError("Invalid adminId")


def employee_names(employee_ids) -> dict:
    """Map each known employee_id to the employee's name; unknown ids are absent."""
    return dict(
        Employee.objects
        .filter(employee_id__in=list(employee_ids))
        .values_list('employee_id', 'name')
    )
