"""StockLevel — the response shape of every stock command."""

from dataclasses import dataclass

from protean.utils.globals import current_domain

from stockroom.product.product import Product


@dataclass(frozen=True)
class StockLevel:
    """Snapshot of a product's stock right after a command ran."""

    quantity_in_stock: int


def project_stock_level(product: Product) -> StockLevel:
    return StockLevel(quantity_in_stock=product.quantity_in_stock)


def get_stock_level(product_id: int) -> StockLevel:
    """Read the current stock of a product without changing it."""
    product = current_domain.repository_for(Product).find(product_id)
    return project_stock_level(product)
