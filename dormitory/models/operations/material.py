"""
Room material inventory model.
"""

from sqlalchemy import CheckConstraint, Integer, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, validates

from dormitory.models.base.base_model import TimestampModel
from dormitory.models.base.enums import UnlockerType

MATERIAL_COUNT_FIELDS = (
    "locker",
    "chair",
    "pure_foam",
    "damaged_foam",
    "tiras",
    "tables",
    "chibud",
)
MAX_MATERIAL_COUNT = 6


class Material(TimestampModel):
    __tablename__ = "materials"

    block: Mapped[str] = mapped_column(String(20), nullable=False, index=True)
    room: Mapped[str] = mapped_column(String(30), nullable=False)
    unlocker: Mapped[str] = mapped_column(
        String(10),
        nullable=False,
        default=UnlockerType.ORIGINAL.value,
    )
    locker: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    chair: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    pure_foam: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    damaged_foam: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    tiras: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    tables: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    chibud: Mapped[int] = mapped_column(Integer, nullable=False, default=0)

    __table_args__ = (
        UniqueConstraint("block", "room", name="uq_materials_block_room"),
        *(
            CheckConstraint(
                f"{name} >= 0 AND {name} <= {MAX_MATERIAL_COUNT}",
                name=f"ck_materials_{name}_range",
            )
            for name in MATERIAL_COUNT_FIELDS
        ),
    )

    @validates(*MATERIAL_COUNT_FIELDS)
    def validate_count(self, key: str, value: int) -> int:
        if value is None:
            return 0
        if not 0 <= int(value) <= MAX_MATERIAL_COUNT:
            raise ValueError(f"{key} must be between 0 and {MAX_MATERIAL_COUNT}")
        return int(value)

    @validates("unlocker")
    def validate_unlocker(self, key: str, value: str) -> str:
        if value not in {u.value for u in UnlockerType}:
            raise ValueError(f"Invalid unlocker: {value}")
        return value
