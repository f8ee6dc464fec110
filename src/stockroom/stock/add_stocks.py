"""Add stocks — command and handler for increasing a product's stock."""

import structlog
from protean import handle
from protean.fields import DateTime, Integer
from protean.utils.globals import current_domain

from stockroom.domain import stockroom
from stockroom.exceptions import StockCommandTimeout, StockConflictError
from stockroom.product.product import Product
from stockroom.shared.deadline import ensure_before_deadline
from stockroom.shared.unit_of_work import product_unit_of_work
from stockroom.stock.projection import project_stock_level

logger = structlog.get_logger(__name__)


@stockroom.command(part_of="Product")
class AddStocks:
    """Increase the stock of a product by a positive quantity."""

    product_id = Integer(required=True)
    quantity = Integer(required=True, min_value=1)
    deadline = DateTime()  # Optional: abort if not committed by then


@stockroom.command_handler(part_of=Product)
class AddStocksHandler:
    @handle(AddStocks)
    def add_stocks(self, command):
        repo = current_domain.repository_for(Product)

        try:
            ensure_before_deadline(command.deadline, command.product_id, "lookup")
            with product_unit_of_work(command.product_id):
                product = repo.find(command.product_id)
                ensure_before_deadline(command.deadline, command.product_id, "lookup")

                product.add_stock(command.quantity)
                repo.save(product)
                ensure_before_deadline(command.deadline, command.product_id, "commit")
        except (StockConflictError, StockCommandTimeout) as exc:
            logger.warning(
                "Stock increase not applied",
                product_id=command.product_id,
                quantity=command.quantity,
                reason=type(exc).__name__,
            )
            raise

        logger.info(
            "Stock increased",
            product_id=command.product_id,
            quantity=command.quantity,
            quantity_in_stock=product.quantity_in_stock,
        )
        return project_stock_level(product)
