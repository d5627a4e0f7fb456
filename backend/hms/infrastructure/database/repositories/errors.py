"""Translation of SQLAlchemy exceptions into domain store errors."""

from collections.abc import Iterator
from contextlib import contextmanager

from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from hms.domain.exceptions import ConstraintViolationError, StoreError


@contextmanager
def translate_store_errors(operation: str, table: str) -> Iterator[None]:
    """Re-raise ORM/driver failures inside the block as StoreError subclasses."""
    try:
        yield
    except IntegrityError as exc:
        raise ConstraintViolationError(operation, table, str(exc.orig)) from exc
    except SQLAlchemyError as exc:
        raise StoreError(operation, table, str(exc)) from exc
