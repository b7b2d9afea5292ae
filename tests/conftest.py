"""pytest 공통 픽스처 정의"""

from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Callable

import pytest

from getabonus.domain.entities.bonus import Bonus
from getabonus.domain.entities.casino import Casino
from getabonus.domain.entities.game import Game
from getabonus.domain.entities.review import ExpertReview, Review
from getabonus.domain.ports.catalog_source import CatalogSource
from getabonus.domain.value_objects.category_ratings import CategoryRatings


class InMemoryCatalog(CatalogSource):
    """테스트용 메모리 CatalogSource"""

    def __init__(
        self,
        casinos: list[Casino] | None = None,
        user_reviews: list[Review] | None = None,
        expert_reviews: list[ExpertReview] | None = None,
        bonuses: list[Bonus] | None = None,
        games: list[Game] | None = None,
    ):
        self.casinos = casinos or []
        self.user_reviews = user_reviews or []
        self.expert_reviews = expert_reviews or []
        self.bonuses = bonuses or []
        self.games = games or []

    def fetch_casinos(self) -> list[Casino]:
        return list(self.casinos)

    def fetch_user_reviews(self, casino_id: str) -> list[Review]:
        return [r for r in self.user_reviews if r.casino_id == casino_id]

    def fetch_expert_reviews(self, casino_id: str) -> list[ExpertReview]:
        return [r for r in self.expert_reviews if r.casino_id == casino_id]

    def fetch_bonus_reviews(self, bonus_id: str) -> list[Review]:
        return [r for r in self.user_reviews if r.bonus_id == bonus_id]

    def fetch_game_reviews(self, game_id: str) -> list[Review]:
        return [r for r in self.user_reviews if r.game_id == game_id]

    def fetch_bonuses(self, casino_id: str | None = None) -> list[Bonus]:
        return [b for b in self.bonuses if casino_id is None or b.casino_id == casino_id]

    def fetch_games(self) -> list[Game]:
        return list(self.games)


@pytest.fixture
def make_casino() -> Callable[..., Casino]:
    """카지노 엔티티 팩토리 픽스처"""

    def _make(casino_id: str = "casino-1", **overrides: Any) -> Casino:
        values: dict[str, Any] = {
            "id": casino_id,
            "name": f"Casino {casino_id}",
            "safety_index": 5.0,
            "description": "Trusted online casino",
        }
        values.update(overrides)
        return Casino(**values)

    return _make


@pytest.fixture
def make_review() -> Callable[..., Review]:
    """유저 리뷰 엔티티 팩토리 픽스처"""
    counter = {"n": 0}

    def _make(overall_rating: int, casino_id: str = "casino-1", **overrides: Any) -> Review:
        counter["n"] += 1
        values: dict[str, Any] = {
            "id": f"review-{counter['n']}",
            "overall_rating": overall_rating,
            "casino_id": casino_id,
        }
        values.update(overrides)
        return Review(**values)

    return _make


@pytest.fixture
def make_expert_review() -> Callable[..., ExpertReview]:
    """전문가 리뷰 엔티티 팩토리 픽스처"""
    counter = {"n": 0}

    def _make(overall_rating: float, casino_id: str = "casino-1", **overrides: Any) -> ExpertReview:
        counter["n"] += 1
        values: dict[str, Any] = {
            "id": f"expert-{counter['n']}",
            "casino_id": casino_id,
            "overall_rating": overall_rating,
        }
        values.update(overrides)
        return ExpertReview(**values)

    return _make


@pytest.fixture
def sample_casino() -> Casino:
    """샘플 카지노 엔티티 픽스처"""
    return Casino(
        id="stake",
        name="Stake Casino",
        safety_index=9.2,
        description="Crypto casino with provably fair games",
        website_url="https://stake.com",
        license="Curacao eGaming",
        established_year=2017,
        payment_methods=["Bitcoin", "Ethereum", "Litecoin"],
        game_providers=["Pragmatic Play", "Evolution Gaming"],
        features=["Crypto Casino", "Provably Fair", "VIP Program"],
        is_featured=True,
        created_at=datetime(2024, 1, 15, tzinfo=timezone.utc),
    )


@pytest.fixture
def sample_category_ratings() -> CategoryRatings:
    """샘플 카테고리 평점 픽스처"""
    return CategoryRatings(
        bonuses=9.0,
        design=8.5,
        payouts=9.2,
        customer_support=8.8,
        game_selection=9.1,
        mobile_experience=8.7,
    )


@pytest.fixture
def in_memory_catalog() -> Callable[..., InMemoryCatalog]:
    return InMemoryCatalog


@pytest.fixture
def temp_json_file(tmp_path: Path) -> Path:
    """임시 JSON 파일 경로 픽스처"""
    return tmp_path / "casinos-listing.json"


@pytest.fixture
def sample_catalog_data() -> dict[str, Any]:
    """사이트 data.json 형식의 샘플 데이터 픽스처"""
    return {
        "casinos": [
            {
                "id": "casino-a",
                "name": "Casino A",
                "description": "Fast crypto payouts",
                "websiteUrl": "https://casino-a.example.com",
                "safetyIndex": "5.0",
                "userRating": "0",
                "license": "Malta Gaming Authority",
                "establishedYear": 2019,
                "paymentMethods": ["Bitcoin", "Skrill"],
                "gameProviders": ["NetEnt"],
                "features": ["Live Casino"],
                "isActive": True,
                "isFeatured": True,
                "createdAt": "2024-01-15T00:00:00.000Z",
            },
            {
                "id": "casino-b",
                "name": "Casino B",
                "safetyIndex": "8.7",
                "isActive": True,
                "isFeatured": False,
            },
            {
                "id": "casino-inactive",
                "name": "Closed Casino",
                "safetyIndex": "9.9",
                "isActive": False,
            },
        ],
        "bonuses": [
            {
                "id": "bonus-1",
                "casinoId": "casino-a",
                "title": "Welcome Bonus 200% + 50 Free Spins",
                "type": "welcome",
                "amount": "200% up to €500",
                "wageringRequirement": "35x",
                "code": "WELCOME200",
                "validUntil": "2026-12-31T00:00:00.000Z",
                "isActive": True,
            },
            {
                "id": "bonus-2",
                "casinoId": "casino-b",
                "title": "Expired cashback",
                "type": "cashback",
                "isActive": False,
            },
        ],
        "games": [
            {
                "id": "game-1",
                "name": "Starburst",
                "provider": "NetEnt",
                "type": "slot",
                "rtp": 96.1,
                "volatility": "low",
                "isActive": True,
            }
        ],
        "reviews": [
            {
                "id": "review-1",
                "casinoId": "casino-a",
                "title": "Great",
                "content": "Fast withdrawals",
                "overallRating": 7,
                "bonusesRating": 8,
                "designRating": 6,
                "isPublished": True,
            },
            {
                "id": "review-2",
                "casinoId": "casino-a",
                "overallRating": 9,
                "isPublished": True,
            },
            {
                "id": "review-hidden",
                "casinoId": "casino-a",
                "overallRating": 1,
                "isPublished": False,
            },
            {
                "id": "review-bonus",
                "bonusId": "bonus-1",
                "overallRating": 6,
            },
        ],
        "expertReviews": [
            {
                "id": "expert-1",
                "casinoId": "casino-a",
                "authorId": "expert_001",
                "bonusesRating": 9.0,
                "bonusesExplanation": "Fair wagering terms",
                "designRating": 8.5,
                "payoutsRating": 9.2,
                "customerSupportRating": 8.8,
                "gameSelectionRating": 9.1,
                "mobileExperienceRating": 8.7,
                "overallRating": "9.0",
                "summary": "Excellent choice for all players.",
            }
        ],
    }
