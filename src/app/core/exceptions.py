"""Domain and store-driver exceptions."""


class ProductNotFoundError(Exception):
    """No eligible product matched the requested identifier."""

    def __init__(self, product_id: int) -> None:
        self.product_id = product_id
        super().__init__(f"Product with ID: {product_id} was not found")


class NoRowsMatchedError(Exception):
    """A conditional write matched zero rows in the record store.

    Store drivers raise this instead of leaking provider-specific error codes.
    """

    def __init__(self, table: str, criteria: dict) -> None:
        self.table = table
        self.criteria = criteria
        super().__init__(f"No rows in '{table}' matched {criteria}")
