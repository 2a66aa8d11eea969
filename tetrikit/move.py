"""Moves and wall kick data."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Iterable, Iterator, Union

from .pieces import Position

#: Largest number of offsets one set of wall kick tests may hold.
MAX_WALL_KICK_TESTS = 16


@dataclass(frozen=True)
class WallKickOffset:
    """An offset tried when a rotation collides."""

    x: int = 0
    y: int = 0

    def to_position(self) -> Position:
        return Position(self.x, self.y)


class WallKickData:
    """An ordered set of wall kick offsets for one rotation."""

    __slots__ = ("_offsets",)

    def __init__(
        self, offsets: Iterable[Union[WallKickOffset, tuple[int, int]]] = ()
    ) -> None:
        items = tuple(
            o if isinstance(o, WallKickOffset) else WallKickOffset(*o) for o in offsets
        )
        if len(items) > MAX_WALL_KICK_TESTS:
            raise ValueError("too many wall kick tests")
        self._offsets = items

    @property
    def offsets(self) -> tuple[WallKickOffset, ...]:
        return self._offsets

    def offset(self, index: int) -> WallKickOffset:
        """Return the offset at ``index``, raising IndexError if there is none."""
        if not 0 <= index < len(self._offsets):
            raise IndexError("wall kick index out of range")
        return self._offsets[index]

    def __len__(self) -> int:
        return len(self._offsets)

    def __iter__(self) -> Iterator[WallKickOffset]:
        return iter(self._offsets)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, WallKickData):
            return NotImplemented
        return self._offsets == other._offsets

    def __hash__(self) -> int:
        return hash(self._offsets)

    def __repr__(self) -> str:
        return f"WallKickData({list(self._offsets)!r})"


class MoveType(enum.Enum):
    """Kinds of move a piece can make."""

    LEFT = "Left"
    RIGHT = "Right"
    DOWN = "Down"
    UP = "Up"
    ROTATE_CLOCKWISE = "RotateClockwise"
    ROTATE_COUNTER_CLOCKWISE = "RotateCounterClockwise"
    ROTATE_180 = "Rotate180"
    HARD_DROP = "HardDrop"
    SOFT_DROP = "SoftDrop"
    HOLD = "Hold"


_ROTATIONS = frozenset(
    {MoveType.ROTATE_CLOCKWISE, MoveType.ROTATE_COUNTER_CLOCKWISE, MoveType.ROTATE_180}
)
_TRANSLATIONS = frozenset(
    {
        MoveType.LEFT,
        MoveType.RIGHT,
        MoveType.DOWN,
        MoveType.UP,
        MoveType.HARD_DROP,
        MoveType.SOFT_DROP,
    }
)


@dataclass(frozen=True)
class Move:
    """A single move, with the wall kick used if it is a rotation (-1 for none)."""

    type: MoveType
    wall_kick_index: int = -1

    def __post_init__(self) -> None:
        if not self.is_rotation() and self.wall_kick_index >= 0:
            raise ValueError("wall kick index only valid for rotation moves")

    def is_rotation(self) -> bool:
        return self.type in _ROTATIONS

    def is_translation(self) -> bool:
        return self.type in _TRANSLATIONS

    def __str__(self) -> str:
        if self.is_rotation() and self.wall_kick_index >= 0:
            return f"{self.type.value}(WK:{self.wall_kick_index})"
        return self.type.value