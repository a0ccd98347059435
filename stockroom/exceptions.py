from enum import Enum

NOT_FOUND_MESSAGE = "Product with ID {product_id} not found."
DUPLICATE_ID_MESSAGE = "Product with ID {product_id} already exists. Please enter a unique ID."
NEGATIVE_VALUE_MESSAGE = "{field} cannot be negative. Value not updated."


class ErrorType(Enum):
    NOT_FOUND = "not_found"
    DUPLICATE_ID = "duplicate_id"
    NEGATIVE_VALUE = "negative_value"


class StockError(Exception):
    """Base error the store raises and the menu reports."""

    def __init__(self, error_type: ErrorType, message: str):
        self.error_type = error_type
        self.message = message
        super().__init__(message)


class ProductNotFoundError(StockError):
    def __init__(self, product_id: int):
        self.product_id = product_id
        super().__init__(
            ErrorType.NOT_FOUND, NOT_FOUND_MESSAGE.format(product_id=product_id)
        )


class DuplicateProductError(StockError):
    def __init__(self, product_id: int):
        self.product_id = product_id
        super().__init__(
            ErrorType.DUPLICATE_ID, DUPLICATE_ID_MESSAGE.format(product_id=product_id)
        )


class NegativeValueError(StockError):
    def __init__(self, field: str, value):
        self.field = field
        self.value = value
        super().__init__(
            ErrorType.NEGATIVE_VALUE,
            NEGATIVE_VALUE_MESSAGE.format(field=field.capitalize()),
        )
