"""
Links services - Business logic layer.

Link creation by admins and the lookups the entries app relies on
(existence checks and newest-link determination).
"""

from .link_management import (
    create_link,
    get_link_by_id,
    link_exists,
    links_newest_first,
    get_latest_link,
    get_latest_link_id,
)

from .exceptions import (
    LinksServiceError,
    LinkNotFoundError,
    InvalidLinkError,
)

__all__ = [
    # Link Management Services
    'create_link',
    'get_link_by_id',
    'link_exists',
    'links_newest_first',
    'get_latest_link',
    'get_latest_link_id',
    # Exceptions
    'LinksServiceError',
    'LinkNotFoundError',
    'InvalidLinkError',
]
