"""SiteApiAdapter 단위 테스트"""

import httpx
import pytest

from getabonus.infrastructure.adapters.site_api_adapter import SiteApiAdapter


def make_adapter(routes: dict[str, object], status_code: int = 200) -> SiteApiAdapter:
    """경로별 JSON 응답을 돌려주는 MockTransport 어댑터"""
    requests: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        requests.append(request)
        if request.url.path not in routes:
            return httpx.Response(404, json={"message": "Not found"})
        return httpx.Response(status_code, json=routes[request.url.path])

    adapter = SiteApiAdapter("https://getabonus.example/", transport=httpx.MockTransport(handler))
    adapter.requests = requests
    return adapter


class TestFetchCasinos:
    """카지노 목록 조회 테스트"""

    def test_converts_records(self, sample_catalog_data):
        adapter = make_adapter({"/api/casinos": sample_catalog_data["casinos"][:2]})

        casinos = adapter.fetch_casinos()

        assert [c.id for c in casinos] == ["casino-a", "casino-b"]
        assert casinos[0].safety_index == 5.0
        assert casinos[0].payment_methods == ["Bitcoin", "Skrill"]
        assert casinos[0].created_at.year == 2024

    def test_skips_malformed_records(self):
        adapter = make_adapter({"/api/casinos": [{"name": "no id"}, "garbage", {"id": "ok", "safetyIndex": "7.1"}]})

        casinos = adapter.fetch_casinos()

        assert [c.id for c in casinos] == ["ok"]

    def test_http_error_returns_empty(self):
        adapter = make_adapter({"/api/casinos": {"message": "Failed to fetch casinos"}}, status_code=500)
        assert adapter.fetch_casinos() == []

    def test_non_list_payload_returns_empty(self):
        adapter = make_adapter({"/api/casinos": {"unexpected": True}})
        assert adapter.fetch_casinos() == []

    def test_connection_error_returns_empty(self):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        adapter = SiteApiAdapter("https://getabonus.example", transport=httpx.MockTransport(handler))

        assert adapter.fetch_casinos() == []


class TestFetchReviews:
    """리뷰 조회 테스트"""

    def test_user_reviews_path(self, sample_catalog_data):
        reviews = sample_catalog_data["reviews"][:2]
        adapter = make_adapter({"/api/reviews/casino/casino-a": reviews})

        result = adapter.fetch_user_reviews("casino-a")

        assert [r.overall_rating for r in result] == [7, 9]
        assert result[0].category_ratings.bonuses == 8
        assert result[0].category_ratings.payouts is None

    def test_expert_reviews_path(self, sample_catalog_data):
        adapter = make_adapter({"/api/expert-reviews/casino/casino-a": sample_catalog_data["expertReviews"]})

        [expert] = adapter.fetch_expert_reviews("casino-a")

        assert expert.overall_rating == 9.0
        assert expert.category_ratings.customer_support == 8.8
        assert expert.explanation("bonuses") == "Fair wagering terms"

    def test_unknown_casino_returns_empty(self):
        adapter = make_adapter({})
        assert adapter.fetch_user_reviews("missing") == []


class TestFetchBonusesAndGames:
    """보너스/게임 조회 테스트"""

    def test_bonuses_query_param(self, sample_catalog_data):
        adapter = make_adapter({"/api/bonuses": sample_catalog_data["bonuses"][:1]})

        [bonus] = adapter.fetch_bonuses("casino-a")

        assert bonus.code == "WELCOME200"
        assert adapter.requests[-1].url.params["casinoId"] == "casino-a"

    def test_bonuses_without_casino(self, sample_catalog_data):
        adapter = make_adapter({"/api/bonuses": sample_catalog_data["bonuses"]})

        adapter.fetch_bonuses()

        assert "casinoId" not in adapter.requests[-1].url.params

    def test_games(self, sample_catalog_data):
        adapter = make_adapter({"/api/games": sample_catalog_data["games"]})

        [game] = adapter.fetch_games()

        assert game.name == "Starburst"
        assert game.rtp == pytest.approx(96.1)

    def test_bonus_reviews_path(self):
        adapter = make_adapter(
            {"/api/reviews/bonus/bonus-1": [{"id": "r1", "bonusId": "bonus-1", "overallRating": 6}]}
        )

        [review] = adapter.fetch_bonus_reviews("bonus-1")

        assert review.bonus_id == "bonus-1"
        assert review.overall_rating == 6

    def test_game_reviews_path(self):
        adapter = make_adapter(
            {"/api/reviews/game/game-1": [{"id": "r1", "gameId": "game-1", "overallRating": 9}]}
        )

        [review] = adapter.fetch_game_reviews("game-1")

        assert review.game_id == "game-1"

    def test_game_reviews_http_error(self):
        adapter = make_adapter({"/api/reviews/game/game-1": {"message": "Failed to fetch game reviews"}}, 500)
        assert adapter.fetch_game_reviews("game-1") == []
