"""Product catalogue."""
from mp_orders.domain.products.product import MAX_NAME_LENGTH, Product

__all__ = ["MAX_NAME_LENGTH", "Product"]
