"""parse_listing_query 테스트"""

from getabonus.application.query_params import parse_listing_query
from getabonus.domain.value_objects.sort_spec import SortDirection


class TestParseListingQuery:
    """query string 변환 테스트"""

    def test_empty_params(self):
        query = parse_listing_query({})

        assert query.search == ""
        assert query.filters.active_count() == 0
        assert query.sort.field == "safetyIndex"
        assert query.sort.direction is SortDirection.DESC
        assert query.page == 1

    def test_full_params(self):
        query = parse_listing_query({
            "minSafetyIndex": "8.5",
            "minExpertRating": "9",
            "minUserRating": "7",
            "license": "Malta Gaming Authority",
            "paymentMethods": "Bitcoin,Ethereum",
            "features": "VIP Program",
            "gameProviders": "NetEnt, Play'n GO",
            "establishedYear": "2015",
            "search": "crypto",
            "sort": "name",
            "order": "asc",
            "page": "2",
        })

        assert query.filters.min_safety_index == 8.5
        assert query.filters.min_expert_rating == 9.0
        assert query.filters.min_user_rating == 7.0
        assert query.filters.license == "Malta Gaming Authority"
        assert query.filters.payment_methods == ("Bitcoin", "Ethereum")
        assert query.filters.features == ("VIP Program",)
        assert query.filters.game_providers == ("NetEnt", "Play'n GO")
        assert query.filters.established_year == 2015
        assert query.search == "crypto"
        assert query.sort.field == "name"
        assert query.sort.direction is SortDirection.ASC
        assert query.page == 2

    def test_invalid_numbers_are_not_applied(self):
        """숫자가 아닌 값은 facet 미적용"""
        query = parse_listing_query({"minSafetyIndex": "high", "establishedYear": "recent", "page": "x"})

        assert query.filters.min_safety_index is None
        assert query.filters.established_year is None
        assert query.page == 1

    def test_empty_list_values(self):
        query = parse_listing_query({"paymentMethods": " , ,", "license": "  "})

        assert query.filters.payment_methods is None
        assert query.filters.license is None

    def test_negative_page_clamped(self):
        assert parse_listing_query({"page": "-2"}).page == 1

    def test_unknown_order_defaults_to_desc(self):
        assert parse_listing_query({"order": "random"}).sort.direction is SortDirection.DESC
