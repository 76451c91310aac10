"""
Aggregation service - paginated entry listings and grouped sums.

All reads go straight to the entry table; nothing here writes or locks.
Sums use the DecimalField's exact arithmetic and Coalesce to zero, so an
empty selection totals Decimal('0.00') rather than None.
"""

import math
from decimal import Decimal
from typing import Optional
from uuid import UUID

from django.conf import settings
from django.db.models import DecimalField, QuerySet, Sum, Value
from django.db.models.functions import Coalesce

from apps.entries.models import Entry
from apps.links.services import get_latest_link_id, links_newest_first
from .exceptions import InvalidPaginationError

ZERO = Decimal('0.00')

NEWEST_FIRST = ('-created_at', '-id')


def _check_page(page: int, limit: int) -> None:
    if int(page) < 1 or int(limit) < 1:
        raise InvalidPaginationError("page and limit must be positive integers")


def _page_count(total: int, limit: int) -> int:
    return math.ceil(total / limit)


def total_amount(queryset: QuerySet) -> Decimal:
    """Sum ``amount`` over every row of the queryset (0.00 when empty)."""
    return queryset.aggregate(
        total=Coalesce(
            Sum('amount'),
            Value(ZERO),
            output_field=DecimalField(max_digits=14, decimal_places=2),
        )
    )['total']


def get_entries_by_link(*, link_id: UUID, employee_id: Optional[UUID] = None) -> QuerySet:
    """
    Entries submitted against a link, in store order.

    Args:
        link_id: Link to list
        employee_id: Optional filter to a single employee
    """
    queryset = Entry.objects.filter(link_id=link_id)
    if employee_id:
        queryset = queryset.filter(employee_id=employee_id)
    return queryset


def get_entries_by_employee(*, employee_id: UUID) -> QuerySet:
    """Entries submitted by an employee, in store order."""
    return Entry.objects.filter(employee_id=employee_id)


def get_links_by_employee(
    *,
    employee_id: UUID,
    page: int = 1,
    limit: Optional[int] = None
) -> dict:
    """
    Page through the distinct links an employee has submitted to.

    The distinct link ids are sorted by their string value before slicing so
    page boundaries stay put between calls. The links on the requested page
    are then fetched and shown newest first.

    Args:
        employee_id: Stable employee identifier
        page: 1-based page number
        limit: Page size, defaults to ``settings.EMPLOYEE_LINKS_PAGE_SIZE``

    Returns:
        Dictionary with:
        - links: list[Link] for this page, newest first
        - total: int - number of distinct links (not entries)
        - page: int
        - pages: int - ceil(total / limit)

        With no entries at all the result is
        ``{'links': [], 'total': 0, 'page': 1, 'pages': 0}``.

    Raises:
        InvalidPaginationError: If page or limit is below 1
    """
    if limit is None:
        limit = settings.EMPLOYEE_LINKS_PAGE_SIZE
    _check_page(page, limit)
    page, limit = int(page), int(limit)

    link_ids = sorted(
        set(
            Entry.objects
            .filter(employee_id=employee_id)
            .values_list('link_id', flat=True)
        ),
        key=str,
    )
    total = len(link_ids)

    if total == 0:
        return {'links': [], 'total': 0, 'page': 1, 'pages': 0}

    skip = (page - 1) * limit
    paged_ids = link_ids[skip:skip + limit]

    links = list(links_newest_first().filter(id__in=paged_ids))

    return {
        'links': links,
        'total': total,
        'page': page,
        'pages': _page_count(total, limit),
    }


def _employee_link_page(*, employee_id, link_id, page, limit) -> dict:
    _check_page(page, limit)
    page, limit = int(page), int(limit)

    queryset = Entry.objects.filter(employee_id=employee_id, link_id=link_id)
    total = queryset.count()

    skip = (page - 1) * limit
    entries = list(queryset.order_by(*NEWEST_FIRST)[skip:skip + limit])

    return {
        'entries': entries,
        'total': total,
        'total_amount': total_amount(queryset),
        'page': page,
        'pages': _page_count(total, limit),
    }


def get_employee_link_entries(
    *,
    employee_id: UUID,
    link_id: UUID,
    page: int = 1,
    limit: Optional[int] = None
) -> dict:
    """
    Admin view of one employee's entries for one link.

    Args:
        employee_id: Stable employee identifier
        link_id: Link identifier
        page: 1-based page number
        limit: Page size, defaults to ``settings.ADMIN_LINK_ENTRIES_PAGE_SIZE`` (20)

    Returns:
        Dictionary with:
        - entries: list[Entry] for this page, newest first
        - total: int - number of matching entries
        - total_amount: Decimal - sum over all matching entries, not just this page
        - page: int
        - pages: int
    """
    if limit is None:
        limit = settings.ADMIN_LINK_ENTRIES_PAGE_SIZE

    return _employee_link_page(
        employee_id=employee_id,
        link_id=link_id,
        page=page,
        limit=limit,
    )


def get_my_link_entries(
    *,
    employee_id: UUID,
    link_id: UUID,
    page: int = 1,
    limit: Optional[int] = None
) -> dict:
    """
    Employee view of their own entries for one link.

    Same shape as get_employee_link_entries plus ``is_latest``. Note that
    ``is_latest`` answers "is this the newest link in the whole system"; it
    does not consider which links the employee has used.

    Args:
        employee_id: Stable employee identifier
        link_id: Link identifier
        page: 1-based page number
        limit: Page size, defaults to ``settings.EMPLOYEE_LINK_ENTRIES_PAGE_SIZE`` (10)
    """
    if limit is None:
        limit = settings.EMPLOYEE_LINK_ENTRIES_PAGE_SIZE

    result = _employee_link_page(
        employee_id=employee_id,
        link_id=link_id,
        page=page,
        limit=limit,
    )

    latest_id = get_latest_link_id()
    result['is_latest'] = latest_id is not None and str(latest_id) == str(link_id)
    return result
