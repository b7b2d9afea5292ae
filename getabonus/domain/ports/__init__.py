from getabonus.domain.ports.catalog_source import CatalogSource
from getabonus.domain.ports.listing_repository import ListingRepository

__all__ = ["CatalogSource", "ListingRepository"]
