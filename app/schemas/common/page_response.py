from typing import List, Generic, TypeVar

from app.schemas.common.camel_model import CamelModel

T = TypeVar("T")


class PageResponse(CamelModel, Generic[T]):
    content: List[T]
    page: int
    size: int
    total: int
    total_pages: int
    has_next: bool
    has_prev: bool
