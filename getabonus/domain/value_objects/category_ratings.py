from dataclasses import dataclass


# === 카테고리 정의 (표시 순서 고정) ===
CATEGORY_KEYS: tuple[str, ...] = (
    "bonuses",
    "design",
    "payouts",
    "customer_support",
    "game_selection",
    "mobile_experience",
)

MIN_CATEGORY_RATING = 0.0
MAX_CATEGORY_RATING = 10.0


@dataclass(frozen=True)
class CategoryRatings:
    """6개 카테고리 평점을 나타내는 Value Object (0-10, 누락 허용)"""

    bonuses: float | None = None
    design: float | None = None
    payouts: float | None = None
    customer_support: float | None = None
    game_selection: float | None = None
    mobile_experience: float | None = None

    def __post_init__(self):
        for key in CATEGORY_KEYS:
            value = getattr(self, key)
            if value is None:
                continue
            if not MIN_CATEGORY_RATING <= value <= MAX_CATEGORY_RATING:
                raise ValueError(
                    f"{key} must be {MIN_CATEGORY_RATING}-{MAX_CATEGORY_RATING}: {value}"
                )

    def get(self, key: str) -> float | None:
        """카테고리 이름으로 평점 조회"""
        if key not in CATEGORY_KEYS:
            raise KeyError(key)
        return getattr(self, key)

    def as_dict(self) -> dict[str, float]:
        """값이 있는 카테고리만 딕셔너리로 반환"""
        return {key: getattr(self, key) for key in CATEGORY_KEYS if getattr(self, key) is not None}

    def is_empty(self) -> bool:
        return not self.as_dict()
