import math
from dataclasses import dataclass
from typing import Generic, List, TypeVar

from django.db.models import QuerySet

T = TypeVar("T")


@dataclass
class PageResult(Generic[T]):
    """One page of a result set plus the metadata clients navigate with."""

    items: List[T]
    total: int
    page: int
    page_size: int

    @property
    def total_pages(self) -> int:
        if self.page_size <= 0:
            return 0
        return math.ceil(self.total / self.page_size)

    @property
    def has_next(self) -> bool:
        return self.page < self.total_pages

    @property
    def has_prev(self) -> bool:
        # Reported literally, even past the last page or on an empty set.
        return self.page > 1

    def map(self, fn) -> "PageResult":
        return PageResult(
            items=[fn(item) for item in self.items],
            total=self.total,
            page=self.page,
            page_size=self.page_size,
        )


def paginate(queryset, page: int, page_size: int) -> PageResult:
    """Count the filtered set, then slice out one page.

    ``page`` and ``page_size`` must already be validated as >= 1.
    """
    if isinstance(queryset, QuerySet):
        total = queryset.count()
    else:
        total = len(queryset)
    offset = (page - 1) * page_size
    items = list(queryset[offset:offset + page_size]) if offset < total else []
    return PageResult(items=items, total=total, page=page, page_size=page_size)
