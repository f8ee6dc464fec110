"""Product aggregate — the unit of stock bookkeeping.

Stock Model:
    quantity_in_stock: units currently held, never below zero
    revision:          bumped on every save, used to detect lost updates
"""

from datetime import UTC, datetime

from protean.exceptions import ValidationError
from protean.fields import DateTime, Integer, String

from stockroom.domain import stockroom


@stockroom.aggregate
class Product:
    """A stocked product, identified by an integer id."""

    product_id = Integer(identifier=True)
    name = String(required=True, max_length=255)
    quantity_in_stock = Integer(default=0, min_value=0)
    revision = Integer(default=0)
    created_at = DateTime()
    updated_at = DateTime()

    @classmethod
    def register(cls, product_id, name, quantity_in_stock=0):
        now = datetime.now(UTC)
        return cls(
            product_id=product_id,
            name=name,
            quantity_in_stock=quantity_in_stock,
            created_at=now,
            updated_at=now,
        )

    # -------------------------------------------------------------------
    # Stock mutations
    # -------------------------------------------------------------------
    def add_stock(self, quantity):
        """Increase stock by a positive delta."""
        if quantity is None or quantity <= 0:
            raise ValidationError({"quantity": ["Quantity must be positive"]})

        self.quantity_in_stock = self.quantity_in_stock + quantity
        self.updated_at = datetime.now(UTC)

    def remove_stock(self, quantity):
        """Decrease stock by a positive delta, down to zero at most."""
        if quantity is None or quantity <= 0:
            raise ValidationError({"quantity": ["Quantity must be positive"]})

        if quantity > self.quantity_in_stock:
            raise ValidationError(
                {"quantity": [f"Cannot remove {quantity} units, only {self.quantity_in_stock} in stock"]}
            )

        self.quantity_in_stock = self.quantity_in_stock - quantity
        self.updated_at = datetime.now(UTC)
