"""Maps failed OperationResults onto HTTP errors."""

from fastapi import HTTPException, status

from hms.application.services import OperationResult
from hms.domain.exceptions import ConstraintViolationError, EntityNotFoundError, StoreError


def raise_for_error(result: OperationResult) -> None:
    """Raise the HTTPException matching ``result.error``; no-op on success."""
    error = result.error
    if error is None:
        return
    if isinstance(error, EntityNotFoundError):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(error))
    if isinstance(error, ConstraintViolationError):
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(error))
    if isinstance(error, StoreError):
        raise HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail=str(error))
    raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(error))
