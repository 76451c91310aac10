import pytest
from rest_framework.test import APIClient
from apps.accounts.models import Admin, Employee


@pytest.fixture
def api_client():
    """Return an unauthenticated API client."""
    return APIClient()


@pytest.fixture
def employee(db):
    """Create and return a test employee."""
    return Employee.objects.create_user(
        email='employee@example.com',
        password='TestPass123!',
        name='Test Employee',
    )


@pytest.fixture
def employee_inactive(db):
    """Create and return a deactivated employee."""
    return Employee.objects.create_user(
        email='inactive@example.com',
        password='TestPass123!',
        name='Inactive Employee',
        is_active=False,
    )


@pytest.fixture
def other_employee(db):
    """Create and return another test employee."""
    return Employee.objects.create_user(
        email='other@example.com',
        password='OtherPass123!',
        name='Another Employee',
    )


@pytest.fixture
def admin_account(db):
    """Create and return an admin."""
    admin = Admin(email='admin@example.com', name='Admin')
    admin.set_password('AdminPass123!')
    admin.save()
    return admin
