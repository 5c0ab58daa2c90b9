from .interface import CatalogInterface, LOOKUP_SQL
from .sqlite_impl import Catalog, check_catalog
from .models import CatalogRow, ResolvedAudioEntry

__all__ = [
    "CatalogInterface",
    "LOOKUP_SQL",
    "Catalog",
    "check_catalog",
    "CatalogRow",
    "ResolvedAudioEntry",
]
