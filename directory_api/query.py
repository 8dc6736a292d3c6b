"""
Translation of pagination and sort parameters into store queries.

Recognised parameters:
- ``page[size]``: rows per page, falls back to the resource default
- ``page[number]``: 1-indexed page
- ``sort``: comma separated field names, ``-`` prefix for descending

The primary key is always the last sort key, so rows with equal sort values
keep the same relative order on every page. ``filter[...]`` parameters are
accepted and ignored; filtering happens in the client.
"""

import logging
from dataclasses import dataclass
from typing import Iterable, Mapping, Optional, Tuple

from sqlalchemy import Select, asc, desc

from .errors import InvalidQuery
from .utils.types import MAX_STORE_INTEGER
from .utils.validators import parse_positive_int

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SortKey:
    field: str
    descending: bool = False

    def __str__(self):
        return f"-{self.field}" if self.descending else self.field


@dataclass(frozen=True)
class Page:
    size: int
    number: int = 1

    @property
    def offset(self) -> int:
        return (self.number - 1) * self.size


@dataclass(frozen=True)
class ListQuery:
    page: Page
    sort: Tuple[SortKey, ...] = ()


def parse_page(size: Optional[str], number: Optional[str], default_size: int, max_size: int) -> Page:
    try:
        page_size = parse_positive_int(size, "page[size]", default_size)
        page_number = parse_positive_int(number, "page[number]", 1)
    except ValueError as e:
        raise InvalidQuery(str(e)) from e

    if page_size > max_size:
        raise InvalidQuery(f"page[size] must be at most {max_size}, got {page_size}")

    page = Page(size=page_size, number=page_number)
    if page.offset > MAX_STORE_INTEGER:
        raise InvalidQuery(f"page[number] is out of range, got {page_number}")
    return page


def parse_sort(raw: Optional[str], sortable: Iterable[str]) -> Tuple[SortKey, ...]:
    if raw is None or raw.strip() == "":
        return ()

    allowed = set(sortable)
    keys = []
    seen = set()
    for token in raw.split(","):
        token = token.strip()
        descending = token.startswith("-")
        name = token[1:] if descending else token
        if name not in allowed:
            raise InvalidQuery(f"Invalid sort field: {token!r}")
        # First occurrence of a field decides its direction
        if name in seen:
            continue
        seen.add(name)
        keys.append(SortKey(name, descending))
    return tuple(keys)


def translate(params: Mapping[str, str], default_size: int, max_size: int, sortable: Iterable[str]) -> ListQuery:
    """Builds a ListQuery from raw query-string parameters."""
    ignored = sorted(k for k in params if k.startswith("filter["))
    if ignored:
        logger.debug("Ignoring filter parameters %s", ignored)

    return ListQuery(
        page=parse_page(params.get("page[size]"), params.get("page[number]"), default_size, max_size),
        sort=parse_sort(params.get("sort"), sortable),
    )


def apply(stmt: Select, model, query: ListQuery) -> Select:
    """Adds ORDER BY (with primary key tie-break) and LIMIT/OFFSET to a select."""
    order = []
    for key in query.sort:
        column = getattr(model, key.field)
        order.append(desc(column) if key.descending else asc(column))
    if not any(key.field == "id" for key in query.sort):
        order.append(asc(model.id))

    return stmt.order_by(*order).limit(query.page.size).offset(query.page.offset)
