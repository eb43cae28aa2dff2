import math
import re
from dataclasses import dataclass
from typing import List, Sequence, TypeVar

from fastapi import Query

from app.core.exceptions import ValidationFailedError
from app.schemas.common.page_response import PageResponse

T = TypeVar("T")

ASC = "ASC"
DESC = "DESC"

DEFAULT_PAGE = 0
DEFAULT_SIZE = 10
DEFAULT_SORT_BY = "createdAt"
DEFAULT_SORT_DIRECTION = DESC

_CAMEL_BOUNDARY = re.compile(r"(?<!^)(?=[A-Z])")


def parse_direction(value: str | None) -> str:
    if value is not None and value.upper() == ASC:
        return ASC
    return DESC


def to_snake(name: str) -> str:
    return _CAMEL_BOUNDARY.sub("_", name).lower()


def sort_column(model, field: str):
    name = to_snake((field or "").strip())
    if name not in model.__table__.columns:
        raise ValidationFailedError(f"Unknown sort field: {field}")
    return getattr(model, name)


@dataclass
class PageRequest:
    page: int = DEFAULT_PAGE
    size: int = DEFAULT_SIZE
    sort_by: str = DEFAULT_SORT_BY
    sort_direction: str = DEFAULT_SORT_DIRECTION

    @property
    def offset(self) -> int:
        return self.page * self.size

    @property
    def ascending(self) -> bool:
        return parse_direction(self.sort_direction) == ASC

    def order_clause(self, model):
        column = sort_column(model, self.sort_by)
        return column.asc() if self.ascending else column.desc()

    def apply(self, query, model):
        """Order, offset and limit a SQLAlchemy query."""
        return query.order_by(self.order_clause(model)).offset(self.offset).limit(self.size)


def page_request_params(
    page: int = Query(DEFAULT_PAGE, ge=0),
    size: int = Query(DEFAULT_SIZE, ge=1),
    sort_by: str = Query(DEFAULT_SORT_BY, alias="sortBy"),
    sort_direction: str = Query(DEFAULT_SORT_DIRECTION, alias="sortDirection"),
) -> PageRequest:
    return PageRequest(page=page, size=size, sort_by=sort_by, sort_direction=sort_direction)


def build_page(items: List[T], total: int, page_request: PageRequest) -> PageResponse[T]:
    total_pages = math.ceil(total / page_request.size) if page_request.size > 0 else 0
    return PageResponse(
        content=items,
        page=page_request.page,
        size=page_request.size,
        total=total,
        total_pages=total_pages,
        has_next=(page_request.page + 1) < total_pages,
        has_prev=page_request.page > 0,
    )


def empty_page(page_request: PageRequest) -> PageResponse:
    return build_page([], 0, page_request)


def slice_items(items: Sequence[T], page_request: PageRequest) -> List[T]:
    """In-memory page of an already loaded sequence."""
    if not items:
        return []

    start = page_request.offset
    if start >= len(items):
        return []
    end = min(start + page_request.size, len(items))
    return list(items[start:end])


def paginate(query, model, page_request: PageRequest) -> tuple[list, int]:
    """Run a query for one page; returns (rows, total row count)."""
    ordered = page_request.apply(query, model)
    total = query.order_by(None).count()
    return ordered.all(), total
