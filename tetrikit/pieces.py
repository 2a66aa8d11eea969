"""Tetromino types, rotations, positions and pieces."""

from __future__ import annotations

import enum
from dataclasses import dataclass, replace
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .rotation_system import RotationSystem

#: Side length of the square grid a tetromino shape lives in.
MAX_SIZE = 4


class PieceType(enum.IntEnum):
    """All tetromino types."""

    I = 0
    J = 1
    L = 2
    O = 3
    S = 4
    T = 5
    Z = 6


class Rotation(enum.IntEnum):
    """Rotation states, measured clockwise from the spawn orientation."""

    R0 = 0
    R90 = 1
    R180 = 2
    R270 = 3


def rotate_clockwise(rotation: Rotation) -> Rotation:
    """Return the rotation reached by turning a quarter clockwise."""
    return Rotation((rotation + 1) % 4)


def rotate_counter_clockwise(rotation: Rotation) -> Rotation:
    """Return the rotation reached by turning a quarter counter-clockwise."""
    return Rotation((rotation + 3) % 4)


def rotate_180(rotation: Rotation) -> Rotation:
    """Return the rotation reached by turning half a circle."""
    return Rotation((rotation + 2) % 4)


@dataclass(frozen=True)
class Position:
    """A cell position; (0, 0) is the bottom-left corner of the board."""

    x: int = 0
    y: int = 0

    def __add__(self, other: Position) -> Position:
        if not isinstance(other, Position):
            return NotImplemented
        return Position(self.x + other.x, self.y + other.y)


@dataclass(frozen=True)
class PieceState:
    """The type, position and rotation of a tetromino."""

    piece_type: PieceType = PieceType.I
    position: Position = Position()
    rotation: Rotation = Rotation.R0

    def with_position(self, position: Position) -> PieceState:
        """Return a copy of this state at another position."""
        return replace(self, position=position)

    def with_rotation(self, rotation: Rotation) -> PieceState:
        """Return a copy of this state with another rotation."""
        return replace(self, rotation=rotation)


class Piece:
    """A tetromino whose shape comes from a rotation system."""

    def __init__(self, state: PieceState, rotation_system: RotationSystem) -> None:
        if rotation_system is None:
            raise ValueError("rotation system cannot be None")
        self._state = state
        self._rotation_system = rotation_system
        self._refresh()

    @classmethod
    def blank(cls) -> Piece:
        """Return a piece with the default state, no rotation system and no cells."""
        piece = cls.__new__(cls)
        piece._state = PieceState()
        piece._rotation_system = None
        piece._apply_shape(0)
        return piece

    @property
    def state(self) -> PieceState:
        return self._state

    @state.setter
    def state(self, state: PieceState) -> None:
        self._state = state
        self._refresh()

    @property
    def rotation_system(self) -> RotationSystem | None:
        return self._rotation_system

    @rotation_system.setter
    def rotation_system(self, rotation_system: RotationSystem) -> None:
        if rotation_system is None:
            raise ValueError("rotation system cannot be None")
        self._rotation_system = rotation_system
        self._refresh()

    @property
    def width(self) -> int:
        """Width of the occupied part of the shape grid."""
        return self._width

    @property
    def height(self) -> int:
        """Height of the occupied part of the shape grid."""
        return self._height

    @property
    def shape_data(self) -> int:
        """Shape bitmask; bit ``y * 4 + x`` marks a filled cell."""
        return self._shape_data

    @property
    def column_heights(self) -> tuple[int, ...]:
        """For each shape column, one above its highest filled cell (0 if empty)."""
        return self._column_heights

    @property
    def column_bottoms(self) -> tuple[int, ...]:
        """For each shape column, its lowest filled cell (4 if empty)."""
        return self._column_bottoms

    def filled_cells(self) -> list[Position]:
        """Filled cells relative to the shape grid, row by row from the bottom."""
        return list(self._cells)

    def absolute_filled_cells(self) -> list[Position]:
        """Filled cells in board coordinates."""
        origin = self._state.position
        return [cell + origin for cell in self._cells]

    def _refresh(self) -> None:
        if self._rotation_system is None:
            raise RuntimeError("rotation system not set")
        self._apply_shape(
            self._rotation_system.shape_data(self._state.piece_type, self._state.rotation)
        )

    def _apply_shape(self, mask: int) -> None:
        self._shape_data = mask
        self._cells = tuple(
            Position(x, y)
            for y in range(MAX_SIZE)
            for x in range(MAX_SIZE)
            if (mask >> (y * MAX_SIZE + x)) & 1
        )
        heights = [0] * MAX_SIZE
        bottoms = [MAX_SIZE] * MAX_SIZE
        for cell in self._cells:
            heights[cell.x] = max(heights[cell.x], cell.y + 1)
            bottoms[cell.x] = min(bottoms[cell.x], cell.y)
        self._column_heights = tuple(heights)
        self._column_bottoms = tuple(bottoms)
        self._width = max((cell.x + 1 for cell in self._cells), default=0)
        self._height = max((cell.y + 1 for cell in self._cells), default=0)

    def __repr__(self) -> str:
        return f"Piece({self._state!r})"