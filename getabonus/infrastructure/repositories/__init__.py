from getabonus.infrastructure.repositories.json_catalog import JsonCatalogSource
from getabonus.infrastructure.repositories.json_file_repo import JsonFileRepository

__all__ = ["JsonCatalogSource", "JsonFileRepository"]
