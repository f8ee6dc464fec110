"""Product registration — command and handler."""

import structlog
from protean import handle
from protean.exceptions import ValidationError
from protean.fields import Integer, String
from protean.utils.globals import current_domain

from stockroom.domain import stockroom
from stockroom.product.product import Product
from stockroom.shared.unit_of_work import product_unit_of_work

logger = structlog.get_logger(__name__)


@stockroom.command(part_of="Product")
class RegisterProduct:
    """Register a product under a caller-chosen id with its opening stock."""

    product_id = Integer(required=True)
    name = String(required=True, max_length=255)
    quantity_in_stock = Integer(default=0, min_value=0)


@stockroom.command_handler(part_of=Product)
class RegisterProductHandler:
    """Registers products under caller-chosen ids.

    The duplicate check and the insert are not atomic. Two registrations of
    one id racing each other can both pass the check: the in-memory store then
    keeps the last writer, while SQL stores reject the second row through the
    primary key. Ids are expected to come from a single product catalogue.
    """

    @handle(RegisterProduct)
    def register_product(self, command):
        repo = current_domain.repository_for(Product)
        with product_unit_of_work(command.product_id):
            if repo.exists(command.product_id):
                raise ValidationError({"product_id": [f"Product {command.product_id} is already registered"]})

            product = Product.register(
                product_id=command.product_id,
                name=command.name,
                quantity_in_stock=command.quantity_in_stock or 0,
            )
            repo.save(product)

        logger.info("Product registered", product_id=product.product_id, quantity_in_stock=product.quantity_in_stock)
        return product.product_id
