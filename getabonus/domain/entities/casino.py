from dataclasses import dataclass, field
from datetime import datetime

from getabonus.domain.value_objects.casino_ratings import CasinoRatings


@dataclass(eq=False)
class Casino:
    """리뷰 사이트에 노출되는 카지노 Entity"""

    id: str
    name: str
    safety_index: float  # 저장된 기본 안전 지수 (리뷰가 없을 때 사용)
    description: str = ""
    website_url: str = ""
    logo_url: str = ""
    affiliate_url: str = ""
    user_rating: float = 0.0
    total_reviews: int = 0
    license: str | None = None
    established_year: int | None = None
    payment_methods: list[str] = field(default_factory=list)
    supported_currencies: list[str] = field(default_factory=list)
    game_providers: list[str] = field(default_factory=list)
    features: list[str] = field(default_factory=list)
    restricted_countries: list[str] = field(default_factory=list)
    is_active: bool = True
    is_featured: bool = False
    created_at: datetime | None = None
    updated_at: datetime | None = None
    ratings: CasinoRatings | None = None

    def __eq__(self, other: object) -> bool:
        """ID 기반 동등성 비교"""
        if not isinstance(other, Casino):
            return NotImplemented
        return self.id == other.id

    def __hash__(self) -> int:
        """ID 기반 해시"""
        return hash(self.id)

    def search_fields(self) -> list[str]:
        """텍스트 검색 대상 문자열 목록"""
        return [
            self.name,
            self.description or "",
            *self.features,
            *self.payment_methods,
            *self.game_providers,
        ]

    def expert_rating(self) -> float:
        """집계된 전문가 평점 (집계 전이면 0)"""
        return self.ratings.expert_rating if self.ratings else 0.0

    def aggregated_user_rating(self) -> float:
        """집계된 유저 평점, 유저 리뷰가 없으면 저장된 user_rating"""
        if self.ratings and self.ratings.has_user_reviews():
            return self.ratings.user_rating
        return self.user_rating
