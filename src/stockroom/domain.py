"""Stockroom bounded context: products and their stock on hand.

Products are created with an empty shelf and move stock through buy
(receive) and sell (issue) operations. This is a standard CQRS aggregate
persisted through the configured provider (not event sourced).
"""

from protean.domain import Domain

from stockroom.utils.logging import configure_logging, get_logger

# Configure logging for the application
configure_logging()

# Get logger for this module
logger = get_logger(__name__)

# Domain Composition Root
stockroom = Domain(name="stockroom")
