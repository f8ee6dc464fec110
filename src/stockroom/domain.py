"""Stockroom bounded context — products and their stock levels.

Every feature is a vertical slice: one module holding a command, its handler
and the projection it returns. Slices are discovered when ``stockroom.init()``
traverses this package.
"""

from protean.domain import Domain

from stockroom.utils.logging import configure_logging, get_logger

configure_logging()

logger = get_logger(__name__)

# Domain Composition Root
stockroom = Domain(name="stockroom")
