from .base import CatalogSource
from .shopify_client import ShopifyCatalogClient

__all__ = ["CatalogSource", "ShopifyCatalogClient"]
