"""
Unit Tests for Pagination Utilities.
"""

from fittrack.backend.core.config import get_app_config
from fittrack.backend.core.pagination import (
    PaginationParams,
    create_paginated_response,
    get_pagination_params,
    resolve_limit,
)
from fittrack.backend.schemas.family_member import FamilyMemberResponse


class TestResolveLimit:

    def test_missing_limit_uses_configured_default(self):
        assert resolve_limit(None) == get_app_config().application.pagination.default_limit

    def test_limit_above_max_is_clamped(self):
        max_limit = get_app_config().application.pagination.max_limit
        assert resolve_limit(max_limit + 500) == max_limit

    def test_limit_within_range_kept(self):
        assert resolve_limit(5) == 5

    def test_dependency_builds_params(self):
        assert get_pagination_params(limit=10, offset=20) == PaginationParams(limit=10, offset=20)


class TestCreatePaginatedResponse:

    def test_has_more_when_items_remain(self, member_row):
        response = create_paginated_response(
            items=[member_row],
            item_schema=FamilyMemberResponse,
            total=3,
            limit=1,
            offset=0,
            request_id="req-1",
        )

        assert response["success"] is True
        assert response["data"][0]["name"] == "Sam"
        assert response["pagination"] == {"total": 3, "limit": 1, "offset": 0, "has_more": True}
        assert response["metadata"]["request_id"] == "req-1"

    def test_last_page_has_no_more(self, member_row):
        response = create_paginated_response(
            items=[member_row],
            item_schema=FamilyMemberResponse,
            total=3,
            limit=1,
            offset=2,
        )
        assert response["pagination"]["has_more"] is False

    def test_empty_page(self):
        response = create_paginated_response(
            items=[],
            item_schema=FamilyMemberResponse,
            total=0,
            limit=50,
            offset=0,
        )
        assert response["data"] == []
        assert response["pagination"]["has_more"] is False
