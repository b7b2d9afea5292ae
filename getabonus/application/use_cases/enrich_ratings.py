import logging
from dataclasses import replace

from getabonus.domain.entities.casino import Casino
from getabonus.domain.ports.catalog_source import CatalogSource
from getabonus.domain.services.rating_aggregator import RatingAggregator

logger = logging.getLogger(__name__)


class EnrichCasinoRatingsUseCase:
    """카지노 목록에 집계 평점을 추가하는 Use Case

    use_aggregated=True이면 safety_index / user_rating도 집계값으로 바꿔서
    필터와 정렬이 집계 결과를 기준으로 동작하게 한다. 유저 리뷰가 없는
    카지노는 저장된 user_rating / total_reviews를 그대로 둔다.
    """

    def __init__(
        self,
        catalog: CatalogSource,
        aggregator: RatingAggregator | None = None,
        use_aggregated: bool = True,
    ):
        self.catalog = catalog
        self.aggregator = aggregator or RatingAggregator()
        self.use_aggregated = use_aggregated

    def execute(self, casinos: list[Casino]) -> list[Casino]:
        """각 카지노의 리뷰를 조회해 평점 묶음을 붙인 새 목록 반환"""
        enriched_casinos = []

        for casino in casinos:
            expert_reviews = self.catalog.fetch_expert_reviews(casino.id)
            user_reviews = self.catalog.fetch_user_reviews(casino.id)
            ratings = self.aggregator.summarize(casino, expert_reviews, user_reviews)

            enriched = replace(casino, ratings=ratings)
            if self.use_aggregated:
                enriched.safety_index = ratings.safety_index
                # 리뷰 행이 없으면 저장된 유저 평점/리뷰 수 유지
                if ratings.has_user_reviews():
                    enriched.user_rating = ratings.user_rating
                    enriched.total_reviews = ratings.total_user_reviews
            enriched_casinos.append(enriched)

        logger.info(f"Enriched ratings for {len(enriched_casinos)} casinos")
        return enriched_casinos
