from dataclasses import dataclass


@dataclass(frozen=True)
class ItemRatings:
    """보너스/게임 단위 유저 평점 요약 (평균, 리뷰 수)"""

    user_average: float = 0.0
    total_reviews: int = 0

    def __post_init__(self):
        if self.total_reviews < 0:
            raise ValueError(f"total_reviews must be non-negative, got {self.total_reviews}")

    def has_reviews(self) -> bool:
        return self.total_reviews > 0


@dataclass(frozen=True)
class CardRating:
    """게임 카드에 표시하는 결합 평점

    review_count는 유저 평점이 결합에 쓰였을 때만 리뷰 수, 아니면 0.
    """

    rating: float
    review_count: int = 0

    def formatted(self) -> str:
        return f"{self.rating:.1f}"
