"""Pagination, search and lookup primitives shared by the Storefront views.

Listing operations accept a ``PageRequest`` and return either

    {"data": [...], "total": n, "page": p, "limit": l, "total_pages": t}

or, for store inventory listings, the same numbers grouped under ``meta``.
"""

import math

from protean.utils.globals import current_domain
from pydantic import BaseModel, Field

DEFAULT_PAGE_SIZE = 10

OUT_OF_STOCK_MAX_LIMIT = 20
OUT_OF_STOCK_DEFAULT_LIMIT = 5

TOP_STORES_MAX_LIMIT = 10
TOP_STORES_DEFAULT_LIMIT = 4

FETCH_BATCH_SIZE = 500


class PageRequest(BaseModel):
    """One-based page window over a listing."""

    page: int = Field(default=1, ge=1)
    limit: int = Field(default=DEFAULT_PAGE_SIZE, ge=1)

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.limit


def total_pages(total: int, limit: int) -> int:
    return math.ceil(total / limit)


def _page(data, total: int, pagination: PageRequest) -> dict:
    return {
        "data": data,
        "total": total,
        "page": pagination.page,
        "limit": pagination.limit,
        "total_pages": total_pages(total, pagination.limit),
    }


def page_of(queryset, pagination: PageRequest | None = None) -> dict:
    """Evaluate one page of ``queryset`` in the storage layer.

    The reported total is the size of the full match set, before slicing.
    """
    pagination = pagination or PageRequest()
    result = queryset.offset(pagination.offset).limit(pagination.limit).all()
    return _page(list(result.items), result.total, pagination)


def paginate(records, pagination: PageRequest | None = None) -> dict:
    """Slice an already materialized, already ordered sequence of records."""
    pagination = pagination or PageRequest()
    records = list(records)
    window = records[pagination.offset : pagination.offset + pagination.limit]
    return _page(window, len(records), pagination)


def with_meta(page: dict) -> dict:
    """Regroup a page's counters under ``meta``."""
    return {
        "data": page["data"],
        "meta": {
            "page": page["page"],
            "limit": page["limit"],
            "total": page["total"],
            "total_pages": page["total_pages"],
        },
    }


def fetch_all(queryset, batch_size: int = FETCH_BATCH_SIZE) -> list:
    """Drain ``queryset`` in batches, ignoring the provider's default limit."""
    records = []
    offset = 0
    while True:
        result = queryset.offset(offset).limit(batch_size).all()
        records.extend(result.items)
        offset += batch_size
        if offset >= result.total:
            return records


def count(aggregate_cls, **criteria) -> int:
    queryset = current_domain.repository_for(aggregate_cls)._dao.query
    if criteria:
        queryset = queryset.filter(**criteria)
    return queryset.limit(1).all().total


def index_by_id(aggregate_cls, identifiers, **criteria) -> dict:
    """Load the records of ``aggregate_cls`` with the given ids, keyed by id.

    Extra ``criteria`` narrow the lookup further in the storage layer.
    """
    wanted = sorted({str(identifier) for identifier in identifiers if identifier})
    if not wanted:
        return {}

    queryset = current_domain.repository_for(aggregate_cls)._dao.query.filter(id__in=wanted, **criteria)
    return {str(record.id): record for record in fetch_all(queryset)}


def clamp_limit(value, maximum: int, fallback: int) -> int:
    """Constrain a requested row limit into ``[1, maximum]``.

    Non-numeric and non-positive requests get ``fallback``.
    """
    try:
        number = float(value)
    except (TypeError, ValueError):
        return fallback

    if math.isnan(number) or number <= 0:
        return fallback
    if math.isinf(number):
        return maximum

    return max(1, min(int(number), maximum))
