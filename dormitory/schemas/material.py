"""
Material inventory schemas. Counts are bounded to 0..6.
"""

from typing import Optional

from pydantic import Field

from dormitory.models.base.enums import UnlockerType
from dormitory.models.operations.material import MAX_MATERIAL_COUNT
from dormitory.schemas.common.base import BaseCreateSchema, BaseUpdateSchema


class MaterialCreate(BaseCreateSchema):
    block: str = Field(..., min_length=1)
    room: str = Field(..., min_length=1)
    unlocker: UnlockerType = UnlockerType.ORIGINAL
    locker: int = Field(default=0, ge=0, le=MAX_MATERIAL_COUNT)
    chair: int = Field(default=0, ge=0, le=MAX_MATERIAL_COUNT)
    pure_foam: int = Field(default=0, ge=0, le=MAX_MATERIAL_COUNT)
    damaged_foam: int = Field(default=0, ge=0, le=MAX_MATERIAL_COUNT)
    tiras: int = Field(default=0, ge=0, le=MAX_MATERIAL_COUNT)
    tables: int = Field(default=0, ge=0, le=MAX_MATERIAL_COUNT)
    chibud: int = Field(default=0, ge=0, le=MAX_MATERIAL_COUNT)


class MaterialUpdate(BaseUpdateSchema):
    block: Optional[str] = Field(default=None, min_length=1)
    room: Optional[str] = Field(default=None, min_length=1)
    unlocker: Optional[UnlockerType] = None
    locker: Optional[int] = Field(default=None, ge=0, le=MAX_MATERIAL_COUNT)
    chair: Optional[int] = Field(default=None, ge=0, le=MAX_MATERIAL_COUNT)
    pure_foam: Optional[int] = Field(default=None, ge=0, le=MAX_MATERIAL_COUNT)
    damaged_foam: Optional[int] = Field(default=None, ge=0, le=MAX_MATERIAL_COUNT)
    tiras: Optional[int] = Field(default=None, ge=0, le=MAX_MATERIAL_COUNT)
    tables: Optional[int] = Field(default=None, ge=0, le=MAX_MATERIAL_COUNT)
    chibud: Optional[int] = Field(default=None, ge=0, le=MAX_MATERIAL_COUNT)
