from getabonus.application.use_cases.build_listing import BuildCasinoListingUseCase
from getabonus.application.use_cases.enrich_ratings import EnrichCasinoRatingsUseCase
from getabonus.application.use_cases.rate_items import RateCatalogItemsUseCase, RatedBonus, RatedGame
from getabonus.application.use_cases.save_listing import SaveListingUseCase

__all__ = [
    "BuildCasinoListingUseCase",
    "EnrichCasinoRatingsUseCase",
    "RateCatalogItemsUseCase",
    "RatedBonus",
    "RatedGame",
    "SaveListingUseCase",
]
