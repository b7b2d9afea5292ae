"""전문가 리뷰와 유저 리뷰를 결합해 표시용 평점을 계산하는 도메인 서비스

카지노 상세, 보너스 상세, 게임 카드, 필터가 모두 이 모듈을 통해 같은 규칙으로
평점을 계산한다. 결과는 반올림하지 않는다.
"""

from collections.abc import Iterable, Mapping, Sequence

from getabonus.domain.entities.casino import Casino
from getabonus.domain.entities.review import ExpertReview, Review
from getabonus.domain.value_objects import casino_ratings
from getabonus.domain.value_objects.casino_ratings import CasinoRatings
from getabonus.domain.value_objects.category_ratings import CATEGORY_KEYS, CategoryRatings
from getabonus.domain.value_objects.item_ratings import CardRating, ItemRatings
from getabonus.domain.value_objects.rating_breakdown import MissingCategoryPolicy, RatingBreakdown


# === 장단점 자동 생성 기준 ===
PRO_THRESHOLD = 8
CON_THRESHOLD = 4

# === 게임 카드 ===
# 게임 전문가 평점은 아직 고정값
GAME_EXPERT_RATING = 8.2
GAME_CARD_FALLBACK = 8.2

# 카테고리 → (장점 문구, 단점 문구). 기존 콘텐츠와 동일한 문구 유지
PROS_AND_CONS_STATEMENTS: dict[str, tuple[str, str]] = {
    "bonuses": ("Excellent bonus offers", "Limited bonus options"),
    "design": ("Great user interface", "Poor website design"),
    "payouts": ("Fast withdrawals", "Slow payout process"),
    "customer_support": ("Responsive customer support", "Poor customer service"),
    "game_selection": ("Wide game selection", "Limited game variety"),
    "mobile_experience": ("Great mobile experience", "Poor mobile optimization"),
}


def _mean(values: Sequence[float]) -> float:
    if not values:
        return 0.0
    return sum(values) / len(values)


class RatingAggregator:
    """안전 지수 / 카테고리 평균 / 장단점 계산

    입력 컬렉션은 저장소 계층에서 이미 게시(published) 여부로 걸러진 것으로
    간주하며 다시 확인하지 않는다.
    """

    def __init__(self, missing_policy: MissingCategoryPolicy = MissingCategoryPolicy.ZERO):
        self.missing_policy = missing_policy

    # ------------------------------------------------------------------
    # 평균
    # ------------------------------------------------------------------

    @staticmethod
    def expert_average(expert_reviews: Iterable[ExpertReview]) -> float:
        """전문가 리뷰 overall 평균 (없으면 0)"""
        return _mean([float(r.overall_rating) for r in expert_reviews])

    @staticmethod
    def user_average(user_reviews: Iterable[Review]) -> float:
        """유저 리뷰 overall 평균 (없으면 0)"""
        return _mean([float(r.overall_rating) for r in user_reviews])

    @staticmethod
    def combine(expert_avg: float, user_avg: float, fallback: float) -> float:
        """전문가/유저 평균 결합

        둘 다 있으면 단순 평균, 하나만 있으면 그 값, 둘 다 없으면 fallback.
        """
        if expert_avg > 0 and user_avg > 0:
            return (expert_avg + user_avg) / 2
        if expert_avg > 0:
            return expert_avg
        if user_avg > 0:
            return user_avg
        return fallback

    def compute_safety_index(
        self,
        expert_reviews: Iterable[ExpertReview],
        user_reviews: Iterable[Review],
        fallback: float,
    ) -> float:
        """표시용 안전 지수 계산"""
        return self.combine(
            self.expert_average(expert_reviews or []),
            self.user_average(user_reviews or []),
            fallback,
        )

    # ------------------------------------------------------------------
    # 카테고리별 평균
    # ------------------------------------------------------------------

    def compute_category_breakdown(
        self,
        user_reviews: Iterable[Review],
        policy: MissingCategoryPolicy | None = None,
    ) -> RatingBreakdown | None:
        """유저 리뷰의 종합/카테고리별 평균 (리뷰가 없으면 None)"""
        user_reviews = list(user_reviews)
        if not user_reviews:
            return None

        policy = policy or self.missing_policy
        averages = {
            key: self._category_mean([r.category_ratings for r in user_reviews], key, policy)
            for key in CATEGORY_KEYS
        }
        return RatingBreakdown(overall=self.user_average(user_reviews), **averages)

    def compute_expert_breakdown(self, expert_reviews: Iterable[ExpertReview]) -> RatingBreakdown | None:
        """전문가 리뷰의 카테고리별 평균 (누락 카테고리는 분모에서 제외)"""
        expert_reviews = list(expert_reviews)
        if not expert_reviews:
            return None

        averages = {
            key: self._category_mean(
                [r.category_ratings for r in expert_reviews], key, MissingCategoryPolicy.EXCLUDE
            )
            for key in CATEGORY_KEYS
        }
        return RatingBreakdown(overall=self.expert_average(expert_reviews), **averages)

    @staticmethod
    def _category_mean(
        ratings: Sequence[CategoryRatings],
        key: str,
        policy: MissingCategoryPolicy,
    ) -> float | None:
        values = [r.get(key) for r in ratings]
        if policy is MissingCategoryPolicy.ZERO:
            return sum(v or 0.0 for v in values) / len(values)

        present = [v for v in values if v is not None]
        if not present:
            return None
        return sum(present) / len(present)

    # ------------------------------------------------------------------
    # 장단점
    # ------------------------------------------------------------------

    @staticmethod
    def generate_pros_and_cons(
        ratings: CategoryRatings,
        statements: Mapping[str, tuple[str, str]] | None = None,
    ) -> tuple[list[str], list[str]]:
        """카테고리 평점으로 장점(>=8)과 단점(<=4) 문구 생성"""
        if statements is None:
            statements = PROS_AND_CONS_STATEMENTS
        pros: list[str] = []
        cons: list[str] = []

        for key in CATEGORY_KEYS:
            rating = ratings.get(key)
            if rating is None or key not in statements:
                continue
            pro, con = statements[key]
            if rating >= PRO_THRESHOLD:
                pros.append(pro)
            elif rating <= CON_THRESHOLD:
                cons.append(con)

        return pros, cons

    # ------------------------------------------------------------------
    # 요약
    # ------------------------------------------------------------------

    def summarize(
        self,
        casino: Casino,
        expert_reviews: Iterable[ExpertReview],
        user_reviews: Iterable[Review],
        policy: MissingCategoryPolicy | None = None,
    ) -> CasinoRatings:
        """카지노 상세 화면용 평점 묶음 생성"""
        expert_reviews = list(expert_reviews)
        user_reviews = list(user_reviews)
        expert_avg = self.expert_average(expert_reviews)
        user_avg = self.user_average(user_reviews)

        return CasinoRatings(
            safety_index=self.combine(expert_avg, user_avg, casino.safety_index),
            expert_rating=expert_avg,
            user_rating=user_avg,
            total_user_reviews=len(user_reviews),
            user_breakdown=self.compute_category_breakdown(user_reviews, policy),
            expert_breakdown=self.compute_expert_breakdown(expert_reviews),
        )

    # ------------------------------------------------------------------
    # 보너스 / 게임
    # ------------------------------------------------------------------

    def item_ratings(self, user_reviews: Iterable[Review]) -> ItemRatings:
        """보너스나 게임 하나의 유저 평점 평균과 리뷰 수"""
        user_reviews = list(user_reviews)
        return ItemRatings(
            user_average=self.user_average(user_reviews),
            total_reviews=len(user_reviews),
        )

    def game_card_rating(
        self,
        user_reviews: Iterable[Review],
        expert_rating: float = GAME_EXPERT_RATING,
    ) -> CardRating:
        """게임 카드용 결합 평점 (전문가 고정값 + 유저 평균)"""
        summary = self.item_ratings(user_reviews)
        rating = self.combine(expert_rating, summary.user_average, GAME_CARD_FALLBACK)
        review_count = summary.total_reviews if summary.user_average > 0 else 0
        return CardRating(rating=rating, review_count=review_count)

    @staticmethod
    def score_color(safety_index: float) -> str:
        return casino_ratings.score_color(safety_index)

    @staticmethod
    def rating_label(rating: float) -> str:
        return casino_ratings.rating_label(rating)
