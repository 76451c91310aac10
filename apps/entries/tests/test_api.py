import pytest
from uuid import uuid4
from django.core.files.uploadedfile import SimpleUploadedFile
from django.urls import reverse
from rest_framework import status
from apps.entries.models import Entry
from apps.links.models import Link


def _upload(png, name='qr.png'):
    return SimpleUploadedFile(name, png, content_type='image/png')


# =============================================================================
# Submission Tests
# =============================================================================

@pytest.mark.django_db
class TestSubmitEntry:
    """Tests for POST /api/entries/links/{link_id}/submit/"""

    def test_submit_qr_image(self, api_client, link, employee, qr_png):
        """Multipart upload is decoded and the UPI id echoed back."""
        url = reverse('entries:entry-submit', args=[link.id])
        data = {
            'employee_id': str(employee.employee_id),
            'name': 'Asha',
            'amount': '250.00',
            'qr_image': _upload(qr_png('upi://pay?pa=hotel%40okaxis&pn=Hotel')),
        }
        response = api_client.post(url, data, format='multipart')

        assert response.status_code == status.HTTP_201_CREATED
        assert response.data['upi_id'] == 'hotel@okaxis'
        assert response.data['entry']['amount'] == '250.00'
        assert response.data['entry']['link_id'] == str(link.id)
        assert response.data['entry']['employee_id'] == str(employee.employee_id)
        assert Entry.objects.filter(link=link, upi_id='hotel@okaxis').exists()

    def test_submit_explicit_upi_id(self, api_client, link, employee):
        url = reverse('entries:entry-submit', args=[link.id])
        data = {
            'employee_id': str(employee.employee_id),
            'name': 'Asha',
            'amount': '75',
            'upi_id': 'taxi@ybl',
        }
        response = api_client.post(url, data, format='json')

        assert response.status_code == status.HTTP_201_CREATED
        assert response.data['upi_id'] == 'taxi@ybl'

    def test_duplicate_returns_conflict(self, api_client, link, employee, qr_png):
        url = reverse('entries:entry-submit', args=[link.id])
        png = qr_png('upi://pay?pa=twice@okaxis')

        def post():
            return api_client.post(url, {
                'employee_id': str(employee.employee_id),
                'name': 'Asha',
                'amount': '10',
                'qr_image': _upload(png),
            }, format='multipart')

        assert post().status_code == status.HTTP_201_CREATED
        response = post()

        assert response.status_code == status.HTTP_409_CONFLICT
        assert 'already been used' in response.data['error']
        assert Entry.objects.filter(link=link).count() == 1

    def test_unreadable_image(self, api_client, link, employee):
        url = reverse('entries:entry-submit', args=[link.id])
        data = {
            'employee_id': str(employee.employee_id),
            'name': 'Asha',
            'amount': '10',
            'qr_image': _upload(b'not an image at all'),
        }
        response = api_client.post(url, data, format='multipart')

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert 'error' in response.data

    def test_overlong_upi_id_in_qr_is_bad_request(self, api_client, link, employee, qr_png):
        url = reverse('entries:entry-submit', args=[link.id])
        data = {
            'employee_id': str(employee.employee_id),
            'name': 'Asha',
            'amount': '10',
            'qr_image': _upload(qr_png('upi://pay?pa=' + 'x' * 300 + '@ok')),
        }
        response = api_client.post(url, data, format='multipart')

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert 'longer than' in response.data['error']
        assert not Entry.objects.exists()

    def test_missing_image_and_upi_id(self, api_client, link, employee):
        url = reverse('entries:entry-submit', args=[link.id])
        data = {
            'employee_id': str(employee.employee_id),
            'name': 'Asha',
            'amount': '10',
        }
        response = api_client.post(url, data, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert 'qr_image' in response.data['error']

    def test_missing_amount(self, api_client, link, employee):
        url = reverse('entries:entry-submit', args=[link.id])
        data = {
            'employee_id': str(employee.employee_id),
            'name': 'Asha',
            'upi_id': 'x@okaxis',
        }
        response = api_client.post(url, data, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert 'amount' in response.data

    def test_non_positive_amount(self, api_client, link, employee):
        url = reverse('entries:entry-submit', args=[link.id])
        data = {
            'employee_id': str(employee.employee_id),
            'name': 'Asha',
            'amount': '0',
            'upi_id': 'x@okaxis',
        }
        response = api_client.post(url, data, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST

    def test_unknown_link(self, api_client, employee):
        url = reverse('entries:entry-submit', args=[uuid4()])
        data = {
            'employee_id': str(employee.employee_id),
            'name': 'Asha',
            'amount': '10',
            'upi_id': 'x@okaxis',
        }
        response = api_client.post(url, data, format='json')

        assert response.status_code == status.HTTP_404_NOT_FOUND

    def test_unknown_employee(self, api_client, link):
        url = reverse('entries:entry-submit', args=[link.id])
        data = {
            'employee_id': str(uuid4()),
            'name': 'Asha',
            'amount': '10',
            'upi_id': 'x@okaxis',
        }
        response = api_client.post(url, data, format='json')

        assert response.status_code == status.HTTP_404_NOT_FOUND


# =============================================================================
# Listing Tests
# =============================================================================

@pytest.mark.django_db
class TestEntryListings:
    """Tests for the entry listing endpoints."""

    def test_link_entries(self, api_client, summary_fixture):
        url = reverse('entries:link-entries', args=[summary_fixture.id])
        response = api_client.get(url)

        assert response.status_code == status.HTTP_200_OK
        assert len(response.data) == 4

    def test_link_entries_filtered_by_employee(self, api_client, summary_fixture, other_employee):
        url = reverse('entries:link-entries', args=[summary_fixture.id])
        response = api_client.get(url, {'employee_id': str(other_employee.employee_id)})

        assert response.status_code == status.HTTP_200_OK
        assert len(response.data) == 1
        assert response.data[0]['amount'] == '75.00'

    def test_employee_entries(self, api_client, summary_fixture, employee):
        url = reverse('entries:employee-entries', args=[employee.employee_id])
        response = api_client.get(url)

        assert response.status_code == status.HTTP_200_OK
        assert len(response.data) == 3

    def test_employee_links(self, api_client, link, other_link, employee, make_entry):
        make_entry(link, employee.employee_id, '10')
        make_entry(other_link, employee.employee_id, '10')

        url = reverse('entries:employee-links', args=[employee.employee_id])
        response = api_client.get(url, {'page': 1, 'limit': 1})

        assert response.status_code == status.HTTP_200_OK
        assert response.data['total'] == 2
        assert response.data['pages'] == 2
        assert len(response.data['links']) == 1

    def test_employee_links_empty(self, api_client, employee):
        url = reverse('entries:employee-links', args=[employee.employee_id])
        response = api_client.get(url)

        assert response.status_code == status.HTTP_200_OK
        assert response.data == {'links': [], 'total': 0, 'page': 1, 'pages': 0}

    def test_employee_links_rejects_zero_page(self, api_client, employee):
        url = reverse('entries:employee-links', args=[employee.employee_id])
        response = api_client.get(url, {'page': 0})

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert 'page' in response.data

    def test_employee_link_entries(self, api_client, summary_fixture, employee):
        url = reverse('entries:employee-link-entries', args=[employee.employee_id, summary_fixture.id])
        response = api_client.get(url, {'limit': 2})

        assert response.status_code == status.HTTP_200_OK
        assert response.data['total'] == 3
        assert response.data['pages'] == 2
        assert response.data['total_amount'] == '400.00'
        assert len(response.data['entries']) == 2
        assert 'is_latest' not in response.data

    def test_my_link_entries(self, api_client, summary_fixture, other_link, other_employee):
        latest = Link.objects.order_by('-created_at', '-id').first()
        url = reverse('entries:my-link-entries', args=[summary_fixture.id])
        response = api_client.get(url, {'employee_id': str(other_employee.employee_id)})

        assert response.status_code == status.HTTP_200_OK
        assert response.data['total'] == 1
        assert response.data['total_amount'] == '75.00'
        assert response.data['page'] == 1
        assert response.data['pages'] == 1
        assert response.data['is_latest'] is (latest.id == summary_fixture.id)

    def test_my_link_entries_requires_employee(self, api_client, link):
        url = reverse('entries:my-link-entries', args=[link.id])
        response = api_client.get(url)

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert 'employee_id' in response.data


# =============================================================================
# Summary Tests
# =============================================================================

@pytest.mark.django_db
class TestLinkSummary:
    """Tests for GET /api/entries/links/{link_id}/summary/"""

    def test_summary(self, api_client, summary_fixture, employee, other_employee):
        url = reverse('entries:link-summary', args=[summary_fixture.id])
        response = api_client.get(url)

        assert response.status_code == status.HTTP_200_OK
        assert response.data['title'] == 'March Reimbursements'
        assert response.data['grand_total'] == '475.00'

        rows = {row['employee_id']: row for row in response.data['rows']}
        assert rows[str(employee.employee_id)]['entry_count'] == 3
        assert rows[str(employee.employee_id)]['employee_total'] == '400.00'
        assert rows[str(other_employee.employee_id)]['name'] == 'Ravi'
        assert rows[str(other_employee.employee_id)]['employee_total'] == '75.00'

    def test_summary_unknown_link(self, api_client, db):
        url = reverse('entries:link-summary', args=[uuid4()])
        response = api_client.get(url)

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.data['error'] == 'Link not found'
