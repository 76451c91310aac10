"""
Reporting service - link summaries and the annotated link listing.

Combines entry aggregates with link and employee metadata. Read-only.
"""

import logging
from decimal import Decimal
from uuid import UUID

from django.db.models import Count, Sum

from apps.accounts.services import employee_names
from apps.entries.models import Entry
from apps.links.services import get_link_by_id, links_newest_first

logger = logging.getLogger(__name__)


def get_link_summary(*, link_id: UUID) -> dict:
    """
    Summarize a link's entries per employee.

    Entries are grouped by the stable employee_id and each group is joined to
    the employee's name. The join is an inner join: groups whose employee
    record no longer exists are left out of both ``rows`` and
    ``grand_total``.

    Args:
        link_id: Link to summarize

    Returns:
        Dictionary with:
        - title: str - the link's title
        - rows: list of dicts with employee_id, name, entry_count and
          employee_total, highest total first
        - grand_total: Decimal - sum of every row's employee_total

    Raises:
        LinkNotFoundError: If the link doesn't exist
    """
    link = get_link_by_id(link_id=link_id)

    groups = list(
        Entry.objects
        .filter(link_id=link.id)
        .order_by()
        .values('employee_id')
        .annotate(entry_count=Count('id'), employee_total=Sum('amount'))
    )

    names = employee_names(group['employee_id'] for group in groups)

    rows = []
    dropped = 0
    for group in groups:
        name = names.get(group['employee_id'])
        if name is None:
            dropped += 1
            continue
        rows.append({
            'employee_id': group['employee_id'],
            'name': name,
            'entry_count': group['entry_count'],
            'employee_total': group['employee_total'],
        })

    if dropped:
        logger.warning(
            "Link %s summary omits %d employee group(s) with no employee record",
            link.id, dropped
        )

    rows.sort(key=lambda row: (-row['employee_total'], row['name']))
    grand_total = sum((row['employee_total'] for row in rows), Decimal('0.00'))

    return {
        'title': link.title,
        'rows': rows,
        'grand_total': grand_total,
    }


def list_links_with_latest() -> list:
    """
    All links, newest first, each carrying an ``is_latest`` attribute.

    Exactly one link (the first in the list) is flagged when any exist.
    Links created in the same instant are ordered by id, highest first.
    """
    links = list(links_newest_first())
    for index, link in enumerate(links):
        link.is_latest = index == 0
    return links
