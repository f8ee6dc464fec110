"""Repository for the Product aggregate."""

from protean.exceptions import ExpectedVersionError, ObjectNotFoundError

from stockroom.domain import stockroom
from stockroom.exceptions import ProductNotFound, StockConflictError
from stockroom.product.product import Product


@stockroom.repository(part_of=Product)
class ProductRepository:
    """Point lookups and explicit, revision-checked saves for products."""

    def find(self, product_id: int) -> Product:
        """Load a product, raising ProductNotFound when the id is unknown."""
        try:
            return self.get(product_id)
        except ObjectNotFoundError:
            raise ProductNotFound(product_id) from None

    def exists(self, product_id: int) -> bool:
        return self._dao.query.filter(product_id=product_id).all().total > 0

    def save(self, product: Product) -> Product:
        """Persist ``product`` if nobody else saved it since it was loaded.

        The stored revision must match the one the product was loaded with.
        On success the revision is bumped and the write is staged with the
        current unit of work.

        Inside a unit of work the stored revision is read from that unit's own
        snapshot, so writes committed by others meanwhile are only caught when
        it commits. ``product_unit_of_work`` raises those as StockConflictError.
        """
        try:
            stored_revision = self._dao.get(product.product_id).revision
        except ObjectNotFoundError:
            stored_revision = None

        if stored_revision is not None and stored_revision != product.revision:
            raise StockConflictError(
                product.product_id,
                expected_revision=product.revision,
                actual_revision=stored_revision,
            )

        product.revision = product.revision + 1
        try:
            self.add(product)
        except ExpectedVersionError as exc:
            raise StockConflictError(product.product_id, expected_revision=product.revision - 1) from exc

        return product
