from dataclasses import dataclass, field
from datetime import datetime

from getabonus.domain.value_objects.category_ratings import CategoryRatings


MIN_OVERALL_RATING = 1
MAX_OVERALL_RATING = 10


@dataclass(eq=False)
class Review:
    """방문자가 작성한 유저 리뷰 Entity

    casino / bonus / game 중 정확히 하나에 연결된다.
    카테고리 평점은 카지노 리뷰에만 채워진다.
    """

    id: str
    overall_rating: int
    casino_id: str | None = None
    bonus_id: str | None = None
    game_id: str | None = None
    title: str = ""
    content: str = ""
    category_ratings: CategoryRatings = field(default_factory=CategoryRatings)
    pros: list[str] = field(default_factory=list)
    cons: list[str] = field(default_factory=list)
    helpful_votes: int = 0
    is_published: bool = True
    is_verified: bool = False
    created_at: datetime | None = None

    def __post_init__(self):
        targets = [t for t in (self.casino_id, self.bonus_id, self.game_id) if t]
        if len(targets) != 1:
            raise ValueError(
                f"review must be linked to exactly one of casino/bonus/game: id={self.id}"
            )
        if isinstance(self.overall_rating, bool) or not isinstance(self.overall_rating, int):
            raise ValueError(f"overall_rating must be an integer: {self.overall_rating!r}")
        if not MIN_OVERALL_RATING <= self.overall_rating <= MAX_OVERALL_RATING:
            raise ValueError(
                f"overall_rating must be {MIN_OVERALL_RATING}-{MAX_OVERALL_RATING}: {self.overall_rating}"
            )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Review):
            return NotImplemented
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)


@dataclass(eq=False)
class ExpertReview:
    """관리자가 작성한 카지노 전문가 리뷰 Entity"""

    id: str
    casino_id: str
    overall_rating: float
    category_ratings: CategoryRatings = field(default_factory=CategoryRatings)
    explanations: dict[str, str] = field(default_factory=dict)  # 카테고리 → 설명
    summary: str = ""
    author_id: str | None = None
    created_at: datetime | None = None

    def __post_init__(self):
        if not 0 <= self.overall_rating <= 10:
            raise ValueError(f"overall_rating must be 0-10: {self.overall_rating}")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ExpertReview):
            return NotImplemented
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)

    def explanation(self, category: str) -> str:
        return self.explanations.get(category, "")
