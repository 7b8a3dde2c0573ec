import contextlib
import logging

from sqlalchemy.exc import SQLAlchemyError

from ..errors import StorageError

logger = logging.getLogger(__name__)


@contextlib.contextmanager
def storage_errors(action: str):
    """Wrap engine failures raised inside the block in ``StorageError``.

    Errors of the core taxonomy (NotFoundError, ConflictError) pass through
    untouched.
    """
    try:
        yield
    except SQLAlchemyError as e:
        logger.error(f"Storage failure: failed to {action}: {e}")
        raise StorageError(f"failed to {action}: {e}") from e
