from dormitory.schemas.common.base import BaseCreateSchema, BaseSchema, BaseUpdateSchema
from dormitory.schemas.common.pagination import PaginationMeta, PaginationParams
from dormitory.schemas.common.response import ErrorResponse, SuccessResponse

__all__ = [
    "BaseCreateSchema",
    "BaseSchema",
    "BaseUpdateSchema",
    "PaginationMeta",
    "PaginationParams",
    "ErrorResponse",
    "SuccessResponse",
]
