from .catalog_viewmodel import CatalogViewModel
from .detail_viewmodel import DetailViewModel
from .orders_viewmodel import OrdersViewModel

__all__ = ["CatalogViewModel", "DetailViewModel", "OrdersViewModel"]
