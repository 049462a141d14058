from .catalogue_repository import ICatalogueRepository

__all__ = [
    "ICatalogueRepository",
]
