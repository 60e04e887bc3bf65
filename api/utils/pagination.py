"""Pagination helpers used by the inquiry query service.

Offset pagination driven by ``page`` and ``limit`` values that come straight
from the query string. Bad input never raises: it falls back to defaults.
"""

import math

from django.conf import settings


def coerce_positive_int(value, default):
    """Return ``value`` as a positive int, or ``default`` if it is missing or unusable."""
    try:
        number = int(str(value).strip())
    except (TypeError, ValueError):
        return default
    return number if number > 0 else default


class PageLimitPagination:
    """
    Page/limit pagination over a queryset.

    - ``page`` defaults to 1, ``limit`` to ``INQUIRY_PAGE_SIZE`` (10).
    - ``limit`` is capped at ``INQUIRY_MAX_PAGE_SIZE``.
    - Out-of-range pages yield an empty list rather than an error.
    """

    default_page = 1

    def __init__(self, page=None, limit=None):
        self.default_limit = getattr(settings, "INQUIRY_PAGE_SIZE", 10)
        self.max_limit = getattr(settings, "INQUIRY_MAX_PAGE_SIZE", 100)
        self.page = coerce_positive_int(page, self.default_page)
        self.limit = min(coerce_positive_int(limit, self.default_limit), self.max_limit)
        self.total = 0

    @property
    def offset(self):
        return (self.page - 1) * self.limit

    @property
    def total_pages(self):
        return math.ceil(self.total / self.limit) if self.total else 0

    def paginate_queryset(self, queryset):
        """Count the full queryset and return the rows for the current page."""
        self.total = queryset.count()
        if self.offset >= self.total:
            return []
        return list(queryset[self.offset:self.offset + self.limit])

    def get_pagination_data(self):
        return {
            "currentPage": self.page,
            "limit": self.limit,
            "totalPages": self.total_pages,
            "totalInquiries": self.total,
            "hasNextPage": self.page < self.total_pages,
            "hasPrevPage": self.page > 1,
        }
