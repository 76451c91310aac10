import io
import pytest
import qrcode
from decimal import Decimal
from rest_framework.test import APIClient
from apps.accounts.models import Admin, Employee
from apps.entries.models import Entry
from apps.links.models import Link


def render_qr_png(data, **options):
    """Render ``data`` as a QR code and return the PNG bytes."""
    qr = qrcode.QRCode(
        version=None,
        error_correction=qrcode.constants.ERROR_CORRECT_M,
        box_size=options.get('box_size', 10),
        border=options.get('border', 4),
    )
    qr.add_data(data)
    qr.make(fit=True)

    img = qr.make_image(fill_color="black", back_color="white")
    buffer = io.BytesIO()
    img.save(buffer)
    return buffer.getvalue()


@pytest.fixture
def api_client():
    """Return an unauthenticated API client."""
    return APIClient()


@pytest.fixture
def qr_png():
    """Factory fixture: render text as a QR code PNG."""
    return render_qr_png


@pytest.fixture
def admin_account(db):
    admin = Admin(email='admin@example.com', name='Entry Admin')
    admin.set_password('AdminPass123!')
    admin.save()
    return admin


@pytest.fixture
def employee(db):
    """Create and return the submitting employee."""
    return Employee.objects.create_user(
        email='asha@example.com',
        password='TestPass123!',
        name='Asha',
    )


@pytest.fixture
def other_employee(db):
    """Create and return a second employee."""
    return Employee.objects.create_user(
        email='ravi@example.com',
        password='TestPass123!',
        name='Ravi',
    )


@pytest.fixture
def link(admin_account):
    return Link.objects.create(title='March Reimbursements', created_by=admin_account)


@pytest.fixture
def other_link(admin_account):
    return Link.objects.create(title='April Reimbursements', created_by=admin_account)


@pytest.fixture
def make_entry(db):
    """Factory fixture: store an entry directly, bypassing submission."""
    counter = {'n': 0}

    def _make(link, employee_id, amount, upi_id=None, name='Submitter'):
        counter['n'] += 1
        return Entry.objects.create(
            link_id=link.id,
            employee_id=employee_id,
            name=name,
            upi_id=upi_id or f'payee{counter["n"]}@okaxis',
            amount=Decimal(str(amount)),
        )

    return _make


@pytest.fixture
def summary_fixture(link, employee, other_employee, make_entry):
    """Link with amounts [100, 250, 50] from Asha and [75] from Ravi."""
    make_entry(link, employee.employee_id, '100.00', name='Asha')
    make_entry(link, employee.employee_id, '250.00', name='Asha')
    make_entry(link, employee.employee_id, '50.00', name='Asha')
    make_entry(link, other_employee.employee_id, '75.00', name='Ravi')
    return link
