from dataclasses import dataclass

from getabonus.domain.value_objects.rating_breakdown import RatingBreakdown


# === 안전 지수 색상 임계값 (0-10 스케일) ===
VERY_HIGH_THRESHOLD = 9.0
HIGH_THRESHOLD = 8.0
ABOVE_AVERAGE_THRESHOLD = 7.0

# === 평점 라벨 임계값 ===
EXCELLENT_THRESHOLD = 8
GOOD_THRESHOLD = 6
AVERAGE_THRESHOLD = 4


def score_color(safety_index: float) -> str:
    """안전 지수에 따른 색상 분류"""
    if safety_index >= VERY_HIGH_THRESHOLD:
        return "green"
    if safety_index >= HIGH_THRESHOLD:
        return "blue"
    if safety_index >= ABOVE_AVERAGE_THRESHOLD:
        return "yellow"
    return "red"


def rating_label(rating: float) -> str:
    """카테고리 평점에 따른 라벨"""
    if rating >= EXCELLENT_THRESHOLD:
        return "Excellent"
    if rating >= GOOD_THRESHOLD:
        return "Good"
    if rating >= AVERAGE_THRESHOLD:
        return "Average"
    return "Poor"


@dataclass(frozen=True)
class CasinoRatings:
    """카지노 한 곳의 표시용 평점 묶음 (전문가 + 유저 + 안전 지수)

    값은 반올림하지 않은 원본 정밀도로 보관한다. 소수점 한 자리 표시는
    표시 계층에서 처리한다.
    """

    safety_index: float
    expert_rating: float = 0.0
    user_rating: float = 0.0
    total_user_reviews: int = 0
    user_breakdown: RatingBreakdown | None = None
    expert_breakdown: RatingBreakdown | None = None

    def __post_init__(self):
        if self.total_user_reviews < 0:
            raise ValueError(f"total_user_reviews must be >= 0: {self.total_user_reviews}")

    def score_color(self) -> str:
        return score_color(self.safety_index)

    def has_user_reviews(self) -> bool:
        return self.total_user_reviews > 0

    def has_expert_rating(self) -> bool:
        return self.expert_rating > 0
