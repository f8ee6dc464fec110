"""Unit of work for single-product stock writes."""

from contextlib import contextmanager

from protean.core.unit_of_work import UnitOfWork
from protean.exceptions import ExpectedVersionError

from stockroom.exceptions import StockConflictError


@contextmanager
def product_unit_of_work(product_id):
    """Commit the enclosed writes on exit.

    A version clash detected at commit time is raised as StockConflictError
    so callers see the same error whether the clash was found by
    ``ProductRepository.save`` or by the store.
    """
    try:
        with UnitOfWork():
            yield
    except StockConflictError:
        raise
    except ExpectedVersionError as exc:
        raise StockConflictError(product_id) from exc
