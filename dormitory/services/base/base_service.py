"""
Base service shared by the record services.
"""

from typing import Generic, Optional, TypeVar

from sqlalchemy.orm import Session

from dormitory.core.exceptions import ResourceNotFoundError
from dormitory.core.logging import get_logger
from dormitory.repositories.base import BaseRepository

TRepo = TypeVar("TRepo", bound=BaseRepository)


class BaseService(Generic[TRepo]):
    """
    Holds the db session, the primary repository and a logger named
    after the concrete service.
    """

    # Used in not-found errors raised by find_or_404
    resource_name: str = "Resource"

    def __init__(self, repository: TRepo, db_session: Session):
        self.repository: TRepo = repository
        self.db: Session = db_session
        self._logger = get_logger(f"dormitory.services.{self.__class__.__name__}")

    def find_or_404(self, entity_id: str, message: Optional[str] = None):
        """
        Primary-key lookup on the service's repository.

        Raises:
            ResourceNotFoundError: If no record has that id
        """
        entity = self.repository.find_by_id(entity_id)
        if entity is None:
            self._logger.debug(f"{self.resource_name} {entity_id} not found")
            raise ResourceNotFoundError(self.resource_name, entity_id, message=message)
        return entity
