"""
Housing models: blocks, rooms and placements.
"""

from dormitory.models.housing.block import Block
from dormitory.models.housing.placement import ProctorPlacement, StudentPlacement
from dormitory.models.housing.room import Room

__all__ = ["Block", "Room", "StudentPlacement", "ProctorPlacement"]
