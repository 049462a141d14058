from .json_catalogue_repository import JsonCatalogueRepository

__all__ = [
    "JsonCatalogueRepository",
]
