import pytest
from rest_framework.test import APIClient
from apps.accounts.models import Admin


@pytest.fixture
def api_client():
    """Return an unauthenticated API client."""
    return APIClient()


@pytest.fixture
def admin_account(db):
    """Create and return an admin who owns links."""
    admin = Admin(email='links-admin@example.com', name='Links Admin')
    admin.set_password('AdminPass123!')
    admin.save()
    return admin
