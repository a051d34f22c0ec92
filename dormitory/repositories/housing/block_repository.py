# dormitory/repositories/housing/block_repository.py
from typing import List, Optional

from sqlalchemy.orm import Session

from dormitory.models.base.enums import BlockStatus
from dormitory.models.housing import Block
from dormitory.repositories.base import BaseRepository


class BlockRepository(BaseRepository[Block]):

    def __init__(self, db: Session):
        super().__init__(Block, db)

    def find_by_block_id(self, block_id: str) -> Optional[Block]:
        return self._query().filter(Block.block_id == block_id).first()

    def find_by_block_ids(self, block_ids: List[str]) -> List[Block]:
        if not block_ids:
            return []
        return self._query().filter(Block.block_id.in_(block_ids)).order_by(Block.block_id).all()

    def list_filtered(self, status: Optional[str] = None, reserved_for: Optional[str] = None) -> List[Block]:
        criteria = {}
        if status:
            criteria["status"] = status
        if reserved_for:
            criteria["reserved_for"] = reserved_for
        return self.find_by_criteria(criteria, order_by=["block_id"])

    def find_active_for(self, reserved_for: List[str]) -> List[Block]:
        """Active blocks reserved for any of the given groups, by block_id."""
        return (
            self._query()
            .filter(Block.status == BlockStatus.ACTIVE.value)
            .filter(Block.reserved_for.in_(reserved_for))
            .order_by(Block.block_id)
            .all()
        )

    def find_by_proctor(self, proctor_id: str) -> List[Block]:
        return self.find_by_criteria({"proctor_id": proctor_id}, order_by=["block_id"])

    def find_with_proctor(self) -> List[Block]:
        return self._query().filter(Block.proctor_id.isnot(None)).order_by(Block.block_id).all()
