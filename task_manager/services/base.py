import contextlib
import logging
from datetime import datetime
from typing import Callable, Iterable, List

from sqlalchemy.exc import SQLAlchemyError

from ..errors import StorageError
from ..models import utcnow
from ..repositories import Transaction

logger = logging.getLogger(__name__)


def distinct_ids(ids: Iterable[int]) -> List[int]:
    """Drop repeated ids, keeping first-seen order."""
    seen = set()
    result = []
    for value in ids:
        if value not in seen:
            seen.add(value)
            result.append(value)
    return result


class TransactionalService:
    """Commit/rollback handling shared by the services.

    With ``atomic=True`` each operation is committed once at the end and
    rolled back as a whole on error. With ``atomic=False`` every step is
    committed as soon as it completes, so a failure part-way keeps the steps
    already done (a task may end up with a partial category set).

    Attributes:
        session: Transaction owner shared with the repositories
        atomic: Whether multi-step operations run in one transaction
    """

    def __init__(
        self,
        session: Transaction,
        atomic: bool = True,
        clock: Callable[[], datetime] = utcnow,
    ):
        self.session = session
        self.atomic = atomic
        self._clock = clock

    def now(self) -> datetime:
        return self._clock()

    @contextlib.contextmanager
    def transaction(self, action: str):
        try:
            yield
            self.session.commit()
        except SQLAlchemyError as e:
            self.session.rollback()
            logger.error(f"Failed to {action}: {e}")
            raise StorageError(f"failed to {action}: {e}") from e
        except Exception:
            self.session.rollback()
            raise

    def checkpoint(self) -> None:
        """Commit the step just completed when running non-atomically."""
        if not self.atomic:
            self.session.commit()
