"""Paging, sorting, filter precedence and statistics helpers"""

import pytest

from app.core.exceptions import ValidationFailedError
from app.core.pagination import (
    ASC,
    DESC,
    PageRequest,
    build_page,
    empty_page,
    parse_direction,
    slice_items,
    sort_column,
    to_snake,
)
from app.models.meeting_db.meeting_db import Meeting
from app.models.post_db.post_db import Post
from app.services.choices import MeetingStatus, MeetingType, PostStatus, ProjectCategory
from app.services.filters import FilterKind, normalize_keyword, resolve_filter
from app.services.meeting_service import STATUS_KEYS
from app.services.statistics import count_by_key, count_by_name


class TestSortDirection:
    """Only ASC (any case) sorts ascending"""

    @pytest.mark.parametrize("value", ["ASC", "asc", "Asc", "aSc"])
    def test_asc_any_case(self, value):
        assert parse_direction(value) == ASC
        assert PageRequest(sort_direction=value).ascending

    @pytest.mark.parametrize("value", ["DESC", "desc", "", "up", " asc", None])
    def test_everything_else_descends(self, value):
        assert parse_direction(value) == DESC
        assert not PageRequest(sort_direction=value).ascending


class TestSortField:
    """Sort fields arrive camelCase and resolve to columns"""

    def test_to_snake(self):
        assert to_snake("createdAt") == "created_at"
        assert to_snake("displayOrder") == "display_order"
        assert to_snake("title") == "title"

    def test_known_field_resolves(self):
        assert sort_column(Post, "publishedAt") is Post.published_at
        assert sort_column(Meeting, "meetingDate") is Meeting.meeting_date

    def test_unknown_field_rejected(self):
        with pytest.raises(ValidationFailedError) as exc_info:
            sort_column(Post, "noSuchField")
        assert exc_info.value.status_code == 400


class TestPageEnvelope:
    """Page metadata arithmetic"""

    def test_first_page(self):
        page = build_page(list(range(10)), 23, PageRequest(page=0, size=10))
        assert page.total_pages == 3
        assert page.has_next is True
        assert page.has_prev is False

    def test_last_page(self):
        page = build_page([1, 2, 3], 23, PageRequest(page=2, size=10))
        assert page.total_pages == 3
        assert page.has_next is False
        assert page.has_prev is True

    def test_empty_page(self):
        page = empty_page(PageRequest(page=0, size=10))
        assert page.content == []
        assert page.total == 0
        assert page.total_pages == 0
        assert page.has_next is False

    def test_offset(self):
        assert PageRequest(page=3, size=20).offset == 60


class TestSliceItems:
    """In-memory paging of a loaded list"""

    def test_last_partial_page(self):
        assert slice_items(list(range(23)), PageRequest(page=2, size=10)) == [20, 21, 22]

    def test_past_the_end(self):
        assert slice_items(list(range(5)), PageRequest(page=4, size=10)) == []

    def test_empty(self):
        assert slice_items([], PageRequest()) == []


class TestFilterPrecedence:
    """One filter applies per list query"""

    def test_keyword_and_status(self):
        assert resolve_filter("ai", PostStatus.DRAFT, None) == FilterKind.keyword_and_status

    def test_keyword_beats_category(self):
        assert resolve_filter("ai", None, ProjectCategory.RESEARCH) == FilterKind.keyword

    def test_status_beats_category(self):
        assert resolve_filter(None, PostStatus.DRAFT, ProjectCategory.RESEARCH) == FilterKind.status

    def test_category_only(self):
        assert resolve_filter(None, None, ProjectCategory.RESEARCH) == FilterKind.category

    def test_blank_keyword_ignored(self):
        assert resolve_filter("   ", None, None) == FilterKind.none
        assert normalize_keyword("  ai ") == "ai"


class TestStatistics:
    """Group-by rows turn into zero-filled maps"""

    def test_count_by_name_zero_fills(self):
        counts = count_by_name(PostStatus, [(PostStatus.PUBLISHED, 4)])
        assert counts == {"DRAFT": 0, "PUBLISHED": 4, "ARCHIVED": 0}

    def test_count_by_name_skips_null_group(self):
        counts = count_by_name(MeetingType, [(None, 2), (MeetingType.REVIEW, 1)])
        assert counts["REVIEW"] == 1
        assert sum(counts.values()) == 1

    def test_count_by_key(self):
        counts = count_by_key(STATUS_KEYS, [(MeetingStatus.COMPLETED, 2)])
        assert counts == {
            "scheduled_meetings": 0,
            "in_progress_meetings": 0,
            "completed_meetings": 2,
            "cancelled_meetings": 0,
        }
