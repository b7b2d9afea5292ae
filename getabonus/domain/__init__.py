from getabonus.domain.entities import Bonus, Casino, ExpertReview, Game, Review
from getabonus.domain.ports import CatalogSource, ListingRepository
from getabonus.domain.services import CasinoQueryPipeline, RatingAggregator
from getabonus.domain.value_objects import CasinoFilters, CasinoRatings, CategoryRatings, Page, SortSpec

__all__ = [
    "Bonus",
    "Casino",
    "CasinoFilters",
    "CasinoQueryPipeline",
    "CasinoRatings",
    "CatalogSource",
    "CategoryRatings",
    "ExpertReview",
    "Game",
    "ListingRepository",
    "Page",
    "RatingAggregator",
    "Review",
    "SortSpec",
]
