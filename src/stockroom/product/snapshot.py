"""JSON snapshots of the product catalogue.

Exports capture every stored field, quantity included, so that an import
restores products exactly as they were: same identity, same stock on hand.
"""

import json
from pathlib import Path

import structlog
from protean.utils.globals import current_domain

from stockroom.product.product import Product

logger = structlog.get_logger(__name__)


def dump_products() -> list[dict]:
    """Every stored product as a JSON-ready record, in stocking order."""
    products = current_domain.repository_for(Product).list()
    return [
        {
            **product.summary(),
            "created_at": product.created_at.isoformat() if product.created_at else None,
        }
        for product in products
    ]


def load_products(records: list[dict]) -> int:
    """Rehydrate ``records`` and store them as new products.

    Returns the number of products stored.
    """
    repo = current_domain.repository_for(Product)
    for record in records:
        repo.save(Product.reconstruct(record))
    logger.info("Products imported", count=len(records))
    return len(records)


def export_to_file(path) -> int:
    records = dump_products()
    Path(path).write_text(json.dumps(records, indent=2), encoding="utf-8")
    logger.info("Products exported", count=len(records), path=str(path))
    return len(records)


def import_from_file(path) -> int:
    records = json.loads(Path(path).read_text(encoding="utf-8"))
    return load_products(records)
