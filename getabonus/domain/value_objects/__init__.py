from getabonus.domain.value_objects.casino_filters import CasinoFilters
from getabonus.domain.value_objects.casino_ratings import CasinoRatings
from getabonus.domain.value_objects.category_ratings import CATEGORY_KEYS, CategoryRatings
from getabonus.domain.value_objects.item_ratings import CardRating, ItemRatings
from getabonus.domain.value_objects.page import Page
from getabonus.domain.value_objects.rating_breakdown import MissingCategoryPolicy, RatingBreakdown
from getabonus.domain.value_objects.sort_spec import SortDirection, SortSpec

__all__ = [
    "CATEGORY_KEYS",
    "CardRating",
    "CasinoFilters",
    "CasinoRatings",
    "CategoryRatings",
    "ItemRatings",
    "MissingCategoryPolicy",
    "Page",
    "RatingBreakdown",
    "SortDirection",
    "SortSpec",
]
