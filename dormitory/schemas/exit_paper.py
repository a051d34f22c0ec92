"""
Exit paper schemas.
"""

from typing import List, Optional

from pydantic import Field

from dormitory.schemas.common.base import BaseSchema


class ExitPaperItemPayload(BaseSchema):
    type_of_cloth: str = Field(..., min_length=1, max_length=100)
    number_of_items: int = Field(..., ge=1)
    color: str = Field(..., min_length=1, max_length=50)


class ExitPaperCreate(BaseSchema):
    items: List[ExitPaperItemPayload] = Field(default_factory=list)


class ExitPaperReview(BaseSchema):
    action: str
    rejection_reason: Optional[str] = None
