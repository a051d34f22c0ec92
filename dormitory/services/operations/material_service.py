"""
Room material inventory service.
"""

from typing import Any, Dict, List, Optional

from sqlalchemy.orm import Session

from dormitory.core.exceptions import DuplicateEntryError
from dormitory.core.logging import get_logger
from dormitory.models.operations import Material
from dormitory.repositories import MaterialRepository
from dormitory.schemas.material import MaterialCreate, MaterialUpdate
from dormitory.services.base import BaseService

logger = get_logger(__name__)


class MaterialService(BaseService[MaterialRepository]):
    resource_name = "Material"

    def __init__(self, db: Session):
        super().__init__(MaterialRepository(db), db)

    def get_or_404(self, material_id: str) -> Material:
        return self.find_or_404(material_id)

    def list_materials(self, block: Optional[str] = None, search: Optional[str] = None) -> List[Dict[str, Any]]:
        return [m.to_dict() for m in self.repository.list_filtered(block, search)]

    def create_material(self, payload: MaterialCreate) -> Dict[str, Any]:
        if self.repository.find_for_room(payload.block, payload.room):
            raise DuplicateEntryError("Materials for this room already exist", "room", payload.room)
        material = self.repository.create(Material(**payload.to_model_data()))
        return material.to_dict()

    def get_material(self, material_id: str) -> Dict[str, Any]:
        return self.get_or_404(material_id).to_dict()

    def update_material(self, material_id: str, payload: MaterialUpdate) -> Dict[str, Any]:
        material = self.get_or_404(material_id)
        data = payload.to_update_dict()

        block = data.get("block", material.block)
        room = data.get("room", material.room)
        if (block, room) != (material.block, material.room) and self.repository.find_for_room(block, room):
            raise DuplicateEntryError("Materials for this room already exist", "room", room)

        return self.repository.update_entity(material, data).to_dict()

    def delete_material(self, material_id: str) -> None:
        self.repository.delete_entity(self.get_or_404(material_id))
