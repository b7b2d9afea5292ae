from dataclasses import dataclass
from enum import Enum

from getabonus.domain.value_objects.category_ratings import CATEGORY_KEYS


class MissingCategoryPolicy(Enum):
    """리뷰에 카테고리 평점이 없을 때의 평균 계산 방식

    ZERO: 누락 값을 0으로 합산하고 분모에 포함 (기존 사이트 동작)
    EXCLUDE: 누락 값을 해당 카테고리 분모에서 제외
    """

    ZERO = "zero"
    EXCLUDE = "exclude"


@dataclass(frozen=True)
class RatingBreakdown:
    """종합 평점 + 카테고리별 평균을 나타내는 Value Object"""

    overall: float | None = None
    bonuses: float | None = None
    design: float | None = None
    payouts: float | None = None
    customer_support: float | None = None
    game_selection: float | None = None
    mobile_experience: float | None = None

    def categories(self) -> dict[str, float | None]:
        """카테고리 평균만 순서대로 반환 (overall 제외)"""
        return {key: getattr(self, key) for key in CATEGORY_KEYS}

    def as_dict(self) -> dict[str, float | None]:
        return {"overall": self.overall, **self.categories()}
