import logging
from decimal import Decimal
from typing import Iterator, Optional

from pydantic import ValidationError

from .exceptions import DuplicateProductError, NegativeValueError, ProductNotFoundError
from .schemas import Product

logger = logging.getLogger(__name__)


class ProductListing:
    """
    Read-only view over the store's records.
    Each iteration walks the current records in insertion order, so the same
    listing can be iterated again after the store changes.
    """

    def __init__(self, records: list[Product]):
        self._records = records

    def __iter__(self) -> Iterator[Product]:
        yield from self._records

    def __len__(self) -> int:
        return len(self._records)


class InventoryStore:
    """
    In-memory, ordered collection of stock records for one session.

    Responsibilities:
    - Keep ids unique
    - Look records up by id
    - Apply quantity and price updates without ever storing a negative value
    - Remove records by id
    """

    def __init__(self):
        self._records: list[Product] = []

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[Product]:
        return iter(self.list_all())

    def __contains__(self, product_id: int) -> bool:
        return self.exists(product_id)

    def is_empty(self) -> bool:
        return not self._records

    # --- Queries ---

    def exists(self, product_id: int) -> bool:
        """Returns True if a record with this id is already stored."""
        return any(record.id == product_id for record in self._records)

    def find_by_id(self, product_id: int) -> Optional[Product]:
        """Linear scan for the first record with the given id."""
        return next(
            (record for record in self._records if record.id == product_id), None
        )

    def list_all(self) -> ProductListing:
        return ProductListing(self._records)

    # --- Mutations ---

    def add(self, record: Product) -> Product:
        """
        Appends a record at the end of the collection.

        Raises:
            DuplicateProductError: a record with the same id is already stored.
        """
        if self.exists(record.id):
            logger.warning(f"Rejected duplicate product id {record.id}.")
            raise DuplicateProductError(record.id)

        self._records.append(record)
        logger.info(f"Added {record.kind.value} product {record.id} ('{record.name}').")
        return record

    def remove(self, product_id: int) -> Product:
        """
        Removes and returns the record with the given id.

        Raises:
            ProductNotFoundError: no record has that id.
        """
        record = self._get(product_id)
        self._records.remove(record)
        logger.info(f"Deleted product {product_id} ('{record.name}').")
        return record

    def update_quantity(self, product_id: int, quantity: int) -> Product:
        return self._update(product_id, "quantity", quantity)

    def update_price(self, product_id: int, price: Decimal) -> Product:
        return self._update(product_id, "price", price)

    # --- Helpers ---

    def _get(self, product_id: int) -> Product:
        record = self.find_by_id(product_id)
        if record is None:
            logger.info(f"Product {product_id} not found.")
            raise ProductNotFoundError(product_id)
        return record

    def _update(self, product_id: int, field: str, value) -> Product:
        record = self._get(product_id)
        previous = getattr(record, field)
        try:
            setattr(record, field, value)
        except ValidationError as e:
            # A failed assignment leaves the previous value in place.
            if any(error["type"] == "greater_than_equal" for error in e.errors()):
                logger.warning(
                    f"Rejected negative {field} {value} for product {product_id}."
                )
                raise NegativeValueError(field, value) from e
            raise

        logger.info(f"Updated {field} of product {product_id}: {previous} -> {value}.")
        return record


def display(record: Product) -> str:
    """Renders a record using its kind-specific format."""
    return record.render()
