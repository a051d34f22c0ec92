# dormitory/repositories/operations/material_repository.py
from typing import List, Optional

from sqlalchemy import func, or_
from sqlalchemy.orm import Session

from dormitory.models.operations import Material
from dormitory.repositories.base import BaseRepository


class MaterialRepository(BaseRepository[Material]):

    def __init__(self, db: Session):
        super().__init__(Material, db)

    def find_for_room(self, block_id: str, room_id: str) -> Optional[Material]:
        return self.find_one_by_criteria({"block": block_id, "room": room_id})

    def list_filtered(self, block: Optional[str] = None, search: Optional[str] = None) -> List[Material]:
        query = self._query()
        if block:
            query = query.filter(Material.block == block)
        if search:
            term = search.strip()
            query = query.filter(
                or_(
                    Material.room.contains(term),
                    func.lower(Material.block).like(f"%{term.lower()}%"),
                    func.lower(Material.unlocker).like(f"%{term.lower()}%"),
                )
            )
        return query.order_by(Material.block, Material.room).all()
