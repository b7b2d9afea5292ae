from getabonus.domain.services.casino_query_pipeline import CasinoQueryPipeline
from getabonus.domain.services.rating_aggregator import RatingAggregator

__all__ = ["CasinoQueryPipeline", "RatingAggregator"]
