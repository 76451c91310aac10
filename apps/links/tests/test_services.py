"""Service layer tests for the links app."""

import pytest
from datetime import timedelta
from uuid import uuid4
from django.utils import timezone

from apps.accounts.services import AdminNotFoundError
from apps.links.models import Link, DEFAULT_LINK_TITLE
from apps.links.services import (
    create_link,
    get_link_by_id,
    link_exists,
    links_newest_first,
    get_latest_link,
    get_latest_link_id,
    LinkNotFoundError,
    InvalidLinkError,
)


@pytest.mark.django_db
class TestCreateLink:
    """Test create_link()."""

    def test_create_link_success(self, admin_account):
        link = create_link(title='Travel Claims', admin_id=admin_account.admin_id)

        assert link.title == 'Travel Claims'
        assert link.created_by_id == admin_account.admin_id
        assert link.created_at is not None
        assert link.submission_path == f'/api/entries/links/{link.id}/submit/'

    @pytest.mark.parametrize('title, use_admin', [('', True), ('Claims', False)])
    def test_title_and_admin_required(self, admin_account, title, use_admin):
        admin_id = admin_account.admin_id if use_admin else None

        with pytest.raises(InvalidLinkError) as exc:
            create_link(title=title, admin_id=admin_id)

        assert 'required' in str(exc.value)

    def test_unknown_admin(self, db):
        with pytest.raises(AdminNotFoundError):
            create_link(title='Claims', admin_id=uuid4())

    def test_default_title(self, admin_account):
        link = Link.objects.create(created_by=admin_account)

        assert link.title == DEFAULT_LINK_TITLE == 'Entry Form'


@pytest.mark.django_db
class TestLinkLookups:
    """Test lookups used by submission and reporting."""

    def test_get_link_by_id(self, admin_account):
        link = Link.objects.create(title='Lookup', created_by=admin_account)

        assert get_link_by_id(link_id=link.id) == link
        assert link_exists(link_id=link.id) is True

    def test_get_missing_link(self, db):
        with pytest.raises(LinkNotFoundError):
            get_link_by_id(link_id=uuid4())

        assert link_exists(link_id=uuid4()) is False

    def test_latest_link_is_newest_created(self, admin_account):
        base = timezone.now()
        ids = []
        for minutes in (5, 15, 10):
            link = Link.objects.create(title=f'At {minutes}', created_by=admin_account)
            Link.objects.filter(id=link.id).update(created_at=base + timedelta(minutes=minutes))
            ids.append(link.id)

        assert get_latest_link().title == 'At 15'
        assert get_latest_link_id() == ids[1]
        assert [l.title for l in links_newest_first()] == ['At 15', 'At 10', 'At 5']

    def test_latest_link_none_when_empty(self, db):
        assert get_latest_link() is None
        assert get_latest_link_id() is None
