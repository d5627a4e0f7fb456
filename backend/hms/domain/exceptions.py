"""Domain-specific exceptions: framework-independent."""


class EntityNotFoundError(Exception):
    """Raised when a requested entity does not exist."""

    def __init__(self, entity_type: str, entity_id: int | str):
        self.entity_type = entity_type
        self.entity_id = entity_id
        super().__init__(f"{entity_type} with id '{entity_id}' not found")


class StoreError(Exception):
    """Raised when the relational store rejects or fails an operation.

    Repositories translate driver/ORM errors into this type so that the
    application layer never depends on SQLAlchemy exception classes.
    """

    def __init__(self, operation: str, table: str, message: str):
        self.operation = operation
        self.table = table
        self.message = message
        super().__init__(f"{operation} on '{table}' failed: {message}")


class ConstraintViolationError(StoreError):
    """Raised when a write violates a store-level constraint (unique, FK, not-null)."""
