import logging

from getabonus.application.listing_state import ListingQuery
from getabonus.application.use_cases.enrich_ratings import EnrichCasinoRatingsUseCase
from getabonus.domain.entities.casino import Casino
from getabonus.domain.ports.catalog_source import CatalogSource
from getabonus.domain.services.casino_query_pipeline import CasinoQueryPipeline
from getabonus.domain.value_objects.page import Page

logger = logging.getLogger(__name__)


class BuildCasinoListingUseCase:
    """카지노 목록 페이지를 만드는 Use Case (조회 → 평점 집계 → 필터/정렬/페이지)"""

    def __init__(
        self,
        catalog: CatalogSource,
        enrich: EnrichCasinoRatingsUseCase | None = None,
        pipeline: CasinoQueryPipeline | None = None,
    ):
        self.catalog = catalog
        self.enrich = enrich or EnrichCasinoRatingsUseCase(catalog)
        self.pipeline = pipeline or CasinoQueryPipeline()

    def execute(self, query: ListingQuery) -> Page[Casino]:
        casinos = self.enrich.execute(self.catalog.fetch_casinos())
        page = self.pipeline.run(
            casinos,
            query=query.search,
            facets=query.filters,
            sort=query.sort,
            page=query.page,
        )
        logger.info(
            f"Listing page {page.page}/{page.total_pages}: "
            f"{len(page.items)} of {page.total_count} casinos"
        )
        return page
