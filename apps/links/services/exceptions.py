"""Domain exceptions for links app."""


class LinksServiceError(Exception):
    """Base exception for all links service errors."""
    pass


class LinkNotFoundError(LinksServiceError):
    """Link does not exist."""
    pass


class InvalidLinkError(LinksServiceError):
    """Missing or malformed link fields."""
    pass
