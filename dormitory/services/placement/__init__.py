from dormitory.services.placement.assignment_engine import (
    PlacementService,
    block_accepts,
    eligible_block_groups,
    pick_room,
)

__all__ = ["PlacementService", "block_accepts", "eligible_block_groups", "pick_room"]
