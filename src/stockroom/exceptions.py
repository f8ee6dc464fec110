"""Typed failures raised by stockroom commands.

Each error extends the matching Protean exception so generic handlers keep
working, while carrying the product id for callers that need it.
"""

from protean.exceptions import ExpectedVersionError, ObjectNotFoundError, ProteanException


class ProductNotFound(ObjectNotFoundError):
    """No product is registered under the requested id."""

    def __init__(self, product_id):
        self.product_id = product_id
        super().__init__({"product_id": [f"Product {product_id} does not exist"]})


class StockConflictError(ExpectedVersionError):
    """The product changed in the store after it was loaded.

    The mutation was not applied. Callers may retry with a fresh read.
    """

    def __init__(self, product_id, expected_revision=None, actual_revision=None):
        self.product_id = product_id
        self.expected_revision = expected_revision
        self.actual_revision = actual_revision
        super().__init__(
            {
                "product_id": [
                    f"Product {product_id} was modified concurrently "
                    f"(expected revision {expected_revision}, found {actual_revision})"
                ]
            }
        )


class StockCommandTimeout(ProteanException):
    """The command's deadline passed before its changes were committed."""

    def __init__(self, product_id, stage):
        self.product_id = product_id
        self.stage = stage
        super().__init__({"deadline": [f"Deadline exceeded during {stage} of product {product_id}"]})
