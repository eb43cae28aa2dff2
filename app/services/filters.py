from enum import Enum
from typing import Optional


class FilterKind(str, Enum):
    keyword_and_status = "keyword_and_status"
    keyword = "keyword"
    status = "status"
    category = "category"
    none = "none"


def normalize_keyword(keyword: Optional[str]) -> Optional[str]:
    if keyword is None or not keyword.strip():
        return None
    return keyword.strip()


def resolve_filter(keyword: Optional[str], status=None, category=None) -> FilterKind:
    """
    Pick the single filter a list query applies.

    Filters do not combine: keyword+status wins, then keyword, then status,
    then category. A keyword together with a category filters by keyword only.
    """
    if normalize_keyword(keyword) is not None:
        if status is not None:
            return FilterKind.keyword_and_status
        return FilterKind.keyword
    if status is not None:
        return FilterKind.status
    if category is not None:
        return FilterKind.category
    return FilterKind.none
