"""
Room model with occupancy bookkeeping.
"""

from sqlalchemy import Boolean, CheckConstraint, Integer, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from dormitory.models.base.base_model import TimestampModel
from dormitory.models.base.enums import RoomStatus


class Room(TimestampModel):
    __tablename__ = "rooms"

    room_id: Mapped[str] = mapped_column(String(30), unique=True, nullable=False, index=True)
    block: Mapped[str] = mapped_column(String(20), nullable=False, index=True)
    floor: Mapped[int] = mapped_column(Integer, nullable=False)
    room_number: Mapped[str] = mapped_column(String(10), nullable=False)
    status: Mapped[str] = mapped_column(
        String(20),
        nullable=False,
        default=RoomStatus.AVAILABLE.value,
        index=True,
    )
    capacity: Mapped[int] = mapped_column(Integer, nullable=False)
    current_occupancy: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    disability_accessible: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)

    __table_args__ = (
        UniqueConstraint("block", "floor", "room_number", name="uq_rooms_block_floor_number"),
        CheckConstraint("floor >= 0", name="ck_rooms_floor_non_negative"),
        CheckConstraint("capacity >= 1", name="ck_rooms_capacity_positive"),
        CheckConstraint(
            "current_occupancy >= 0 AND current_occupancy <= capacity",
            name="ck_rooms_occupancy_bounds",
        ),
    )

    @property
    def has_space(self) -> bool:
        return self.current_occupancy < self.capacity

    @property
    def is_assignable(self) -> bool:
        return self.status == RoomStatus.AVAILABLE.value and self.has_space

    @property
    def occupancy_rate(self) -> int:
        if not self.capacity:
            return 0
        return round(self.current_occupancy / self.capacity * 100)

    def occupy(self) -> None:
        """Take one slot; the room reads occupied once full."""
        self.current_occupancy = (self.current_occupancy or 0) + 1
        self.status = (
            RoomStatus.OCCUPIED.value
            if self.current_occupancy >= self.capacity
            else RoomStatus.AVAILABLE.value
        )

    def release(self) -> None:
        """Free one slot."""
        self.current_occupancy = max((self.current_occupancy or 0) - 1, 0)
        self.status = RoomStatus.AVAILABLE.value

    def __repr__(self) -> str:
        return (
            f"<Room(room_id={self.room_id}, block={self.block}, "
            f"occupancy={self.current_occupancy}/{self.capacity})>"
        )
