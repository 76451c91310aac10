"""Link management service - creation and lookups for links."""

import logging
from typing import Optional
from uuid import UUID

from django.db.models import QuerySet

from apps.accounts.services import get_admin
from apps.links.models import Link
from .exceptions import LinkNotFoundError, InvalidLinkError

logger = logging.getLogger(__name__)

# Newest first; ties on created_at are broken by the higher id
NEWEST_FIRST = ('-created_at', '-id')


def create_link(*, title: str, admin_id: UUID) -> Link:
    """
    Create a new link owned by an admin.

    Args:
        title: Link title shown on the entry form
        admin_id: Stable identifier of the creating admin

    Returns:
        Created Link instance

    Raises:
        InvalidLinkError: If title or admin_id is missing
        AdminNotFoundError: If no admin has this admin_id
    """
    if not title or not admin_id:
        raise InvalidLinkError("title and adminId required")

    admin = get_admin(admin_id=admin_id)
    link = Link.objects.create(title=title, created_by=admin)

    logger.info("Admin %s created link %s", admin.admin_id, link.id)
    return link


def get_link_by_id(*, link_id: UUID) -> Link:
    """
    Retrieve a link by ID.

    Raises:
        LinkNotFoundError: If link doesn't exist
    """
    try:
        return Link.objects.get(id=link_id)
    except Link.DoesNotExist:
        raise LinkNotFoundError("Link not found")


def link_exists(*, link_id: UUID) -> bool:
    return Link.objects.filter(id=link_id).exists()


def links_newest_first() -> QuerySet:
    """All links ordered newest first (reverse of creation order)."""
    return Link.objects.order_by(*NEWEST_FIRST)


def get_latest_link() -> Optional[Link]:
    """Return the single most recently created link, or None if there are none."""
    return links_newest_first().first()


def get_latest_link_id() -> Optional[UUID]:
    return links_newest_first().values_list('id', flat=True).first()
