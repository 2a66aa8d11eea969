"""Interface that every rotation system implements."""

from __future__ import annotations

from abc import ABC, abstractmethod

from .move import WallKickData
from .pieces import PieceState, PieceType, Rotation


class RotationSystem(ABC):
    """Supplies piece shapes, spawn states and wall kicks."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Name of the rotation system."""

    @abstractmethod
    def clockwise_wall_kicks(
        self, piece_type: PieceType, from_rotation: Rotation
    ) -> WallKickData:
        """Wall kicks for a clockwise turn from ``from_rotation``."""

    @abstractmethod
    def counter_clockwise_wall_kicks(
        self, piece_type: PieceType, from_rotation: Rotation
    ) -> WallKickData:
        """Wall kicks for a counter-clockwise turn from ``from_rotation``."""

    @abstractmethod
    def wall_kicks_180(
        self, piece_type: PieceType, from_rotation: Rotation
    ) -> WallKickData:
        """Wall kicks for a half turn from ``from_rotation``."""

    @abstractmethod
    def shape_data(self, piece_type: PieceType, rotation: Rotation) -> int:
        """Shape bitmask for a piece; bit ``y * 4 + x`` marks a filled cell."""

    @abstractmethod
    def initial_state(
        self, piece_type: PieceType, board_width: int, board_height: int
    ) -> PieceState:
        """Spawn state of a piece on a board of the given size."""

    @abstractmethod
    def supports_180_rotation(self) -> bool:
        """Whether half turns are supported."""

    @abstractmethod
    def clone(self) -> RotationSystem:
        """Return an independent copy of this rotation system."""