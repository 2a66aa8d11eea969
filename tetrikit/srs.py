"""The Super Rotation System."""

from __future__ import annotations

from .move import WallKickData
from .pieces import PieceState, PieceType, Position, Rotation
from .rotation_system import RotationSystem

# Shape masks by rotation (R0, R90, R180, R270); bit ``y * 4 + x`` marks a cell.
_SHAPES: dict[PieceType, tuple[int, int, int, int]] = {
    PieceType.I: (
        0b0000111100000000,
        0b0010001000100010,
        0b0000000011110000,
        0b0100010001000100,
    ),
    PieceType.O: (
        0b0000011001100000,
        0b0000011001100000,
        0b0000011001100000,
        0b0000011001100000,
    ),
    PieceType.T: (
        0b0000010011100000,
        0b0000010001100100,
        0b0000000011100100,
        0b0000010011000100,
    ),
    PieceType.L: (
        0b0000001011100000,
        0b0000010001000110,
        0b0000000011101000,
        0b0000110001000100,
    ),
    PieceType.J: (
        0b0000100011100000,
        0b0000011001000100,
        0b0000000011100010,
        0b0000010001001100,
    ),
    PieceType.S: (
        0b0000011011000000,
        0b0000010001100010,
        0b0000000001101100,
        0b0000100011000100,
    ),
    PieceType.Z: (
        0b0000110001100000,
        0b0000001001100100,
        0b0000000011000110,
        0b0000010011001000,
    ),
}

_JLSTZ_CLOCKWISE = (
    WallKickData([(0, 0), (-1, 0), (-1, 1), (0, -2), (-1, -2)]),
    WallKickData([(0, 0), (1, 0), (1, -1), (0, 2), (1, 2)]),
    WallKickData([(0, 0), (1, 0), (1, 1), (0, -2), (1, -2)]),
    WallKickData([(0, 0), (-1, 0), (-1, -1), (0, 2), (-1, 2)]),
)

_JLSTZ_COUNTER_CLOCKWISE = (
    WallKickData([(0, 0), (1, 0), (1, 1), (0, -2), (1, -2)]),
    WallKickData([(0, 0), (1, 0), (1, -1), (0, 2), (1, 2)]),
    WallKickData([(0, 0), (-1, 0), (-1, 1), (0, -2), (-1, -2)]),
    WallKickData([(0, 0), (-1, 0), (-1, -1), (0, 2), (-1, 2)]),
)

_I_CLOCKWISE = (
    WallKickData([(0, 0), (-2, 0), (1, 0), (-2, -1), (1, 2)]),
    WallKickData([(0, 0), (-1, 0), (2, 0), (-1, 2), (2, -1)]),
    WallKickData([(0, 0), (2, 0), (-1, 0), (2, 1), (-1, -2)]),
    WallKickData([(0, 0), (1, 0), (-2, 0), (1, -2), (-2, 1)]),
)

_I_COUNTER_CLOCKWISE = (
    WallKickData([(0, 0), (-1, 0), (2, 0), (-1, 2), (2, -1)]),
    WallKickData([(0, 0), (2, 0), (-1, 0), (2, 1), (-1, -2)]),
    WallKickData([(0, 0), (1, 0), (-2, 0), (1, -2), (-2, 1)]),
    WallKickData([(0, 0), (-2, 0), (1, 0), (-2, -1), (1, 2)]),
)

_NO_KICKS = WallKickData([(0, 0)])

_JLSTZ = frozenset(
    {PieceType.J, PieceType.L, PieceType.S, PieceType.T, PieceType.Z}
)

# Pieces spawn with their bottom row at this height, if the board allows it.
_SPAWN_ROW = 21


def _kick_table(
    piece_type: PieceType,
    from_rotation: Rotation,
    i_table: tuple[WallKickData, ...],
    jlstz_table: tuple[WallKickData, ...],
) -> WallKickData:
    index = int(from_rotation)
    if not 0 <= index < 4:
        raise IndexError("rotation out of range")
    if piece_type == PieceType.I:
        return i_table[index]
    if piece_type == PieceType.O:
        return _NO_KICKS
    if piece_type in _JLSTZ:
        return jlstz_table[index]
    raise ValueError("invalid piece type for wall kicks")


class SRS(RotationSystem):
    """The standard Super Rotation System."""

    @property
    def name(self) -> str:
        return "SRS"

    def clockwise_wall_kicks(
        self, piece_type: PieceType, from_rotation: Rotation
    ) -> WallKickData:
        return _kick_table(piece_type, from_rotation, _I_CLOCKWISE, _JLSTZ_CLOCKWISE)

    def counter_clockwise_wall_kicks(
        self, piece_type: PieceType, from_rotation: Rotation
    ) -> WallKickData:
        return _kick_table(
            piece_type, from_rotation, _I_COUNTER_CLOCKWISE, _JLSTZ_COUNTER_CLOCKWISE
        )

    def wall_kicks_180(
        self, piece_type: PieceType, from_rotation: Rotation
    ) -> WallKickData:
        return _NO_KICKS

    def shape_data(self, piece_type: PieceType, rotation: Rotation) -> int:
        try:
            shapes = _SHAPES[piece_type]
        except (KeyError, TypeError):
            raise ValueError("invalid piece type") from None
        return shapes[int(rotation)]

    def initial_state(
        self, piece_type: PieceType, board_width: int, board_height: int
    ) -> PieceState:
        # Centred horizontally, rounding towards zero.
        x = int((board_width - 4) / 2)
        y = min(_SPAWN_ROW, board_height - 1)
        return PieceState(piece_type, Position(x, y), Rotation.R0)

    def supports_180_rotation(self) -> bool:
        return False

    def clone(self) -> SRS:
        return SRS()

    def __repr__(self) -> str:
        return "SRS()"