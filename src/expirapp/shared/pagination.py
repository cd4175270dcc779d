"""Page/limit handling shared by every list query."""

from dataclasses import dataclass, field
from typing import Any

DEFAULT_LIMIT = 10
MAX_LIMIT = 100


@dataclass(frozen=True)
class Page:
    items: list[Any] = field(default_factory=list)
    total: int = 0
    page: int = 1
    limit: int = DEFAULT_LIMIT


def normalize(page: int | None, limit: int | None) -> tuple[int, int]:
    """Clamp paging input: a page below 1 becomes 1, a limit outside 1..100 becomes 10."""
    page = page if page and page >= 1 else 1
    limit = limit if limit and 1 <= limit <= MAX_LIMIT else DEFAULT_LIMIT
    return page, limit


def paginate(queryset, page: int | None = None, limit: int | None = None) -> Page:
    """Run a protean queryset for one page of results."""
    page, limit = normalize(page, limit)
    result = queryset.limit(limit).offset((page - 1) * limit).all()
    return Page(items=list(result.items), total=result.total, page=page, limit=limit)


def fetch_all(queryset, batch_size: int = MAX_LIMIT) -> list[Any]:
    """Collect every record a queryset matches, one batch at a time."""
    records = []
    offset = 0
    while True:
        result = queryset.limit(batch_size).offset(offset).all()
        records.extend(result.items)
        offset += batch_size
        if offset >= result.total or not result.items:
            return records
