import pytest

from tetrikit.move import WallKickData, WallKickOffset
from tetrikit.pieces import (
    Piece,
    PieceState,
    PieceType,
    Position,
    Rotation,
    rotate_180,
    rotate_clockwise,
    rotate_counter_clockwise,
)
from tetrikit.rotation_system import RotationSystem
from tetrikit.srs import SRS


@pytest.fixture
def srs():
    return SRS()


def test_name(srs):
    assert srs.name == "SRS"


def test_does_not_support_180(srs):
    assert srs.supports_180_rotation() is False


def test_clone_is_new_srs(srs):
    copy = srs.clone()
    assert isinstance(copy, SRS)
    assert copy is not srs
    assert copy.name == srs.name


def test_is_rotation_system_usable_by_piece(srs):
    assert isinstance(srs, RotationSystem)
    piece = Piece(PieceState(PieceType.O), srs)
    assert {(c.x, c.y) for c in piece.filled_cells()} == {(1, 1), (2, 1), (1, 2), (2, 2)}
    assert piece.width == 3
    assert piece.height == 3


def test_i_shape_masks(srs):
    assert srs.shape_data(PieceType.I, Rotation.R0) == 0b0000111100000000
    assert srs.shape_data(PieceType.I, Rotation.R90) == 0b0010001000100010


def test_t_spawn_shape(srs):
    assert srs.shape_data(PieceType.T, Rotation.R0) == 0b0000010011100000


@pytest.mark.parametrize("piece_type", list(PieceType))
@pytest.mark.parametrize("rotation", list(Rotation))
def test_every_shape_has_four_cells(srs, piece_type, rotation):
    mask = srs.shape_data(piece_type, rotation)
    assert bin(mask).count("1") == 4
    assert mask < 1 << 16


@pytest.mark.parametrize("rotation", list(Rotation))
def test_o_shape_same_for_all_rotations(srs, rotation):
    assert srs.shape_data(PieceType.O, rotation) == srs.shape_data(
        PieceType.O, Rotation.R0
    )


@pytest.mark.parametrize("piece_type", list(PieceType))
def test_shapes_differ_for_half_turn_except_o(srs, piece_type):
    a = srs.shape_data(piece_type, Rotation.R0)
    b = srs.shape_data(piece_type, Rotation.R180)
    assert (a == b) == (piece_type == PieceType.O)


def test_invalid_piece_type_shape(srs):
    with pytest.raises(ValueError):
        srs.shape_data(99, Rotation.R0)


def test_invalid_piece_type_kicks(srs):
    with pytest.raises(ValueError):
        srs.clockwise_wall_kicks(99, Rotation.R0)
    with pytest.raises(ValueError):
        srs.counter_clockwise_wall_kicks(99, Rotation.R0)


def test_jlstz_clockwise_from_spawn(srs):
    kicks = srs.clockwise_wall_kicks(PieceType.T, Rotation.R0)
    assert kicks == WallKickData([(0, 0), (-1, 0), (-1, 1), (0, -2), (-1, -2)])


def test_i_clockwise_from_spawn(srs):
    kicks = srs.clockwise_wall_kicks(PieceType.I, Rotation.R0)
    assert kicks == WallKickData([(0, 0), (-2, 0), (1, 0), (-2, -1), (1, 2)])


def test_i_counter_clockwise_from_spawn(srs):
    kicks = srs.counter_clockwise_wall_kicks(PieceType.I, Rotation.R0)
    assert kicks == WallKickData([(0, 0), (-1, 0), (2, 0), (-1, 2), (2, -1)])


@pytest.mark.parametrize("piece_type", [t for t in PieceType if t != PieceType.O])
@pytest.mark.parametrize("rotation", list(Rotation))
def test_kicks_start_with_no_offset(srs, piece_type, rotation):
    for kicks in (
        srs.clockwise_wall_kicks(piece_type, rotation),
        srs.counter_clockwise_wall_kicks(piece_type, rotation),
    ):
        assert len(kicks) == 5
        assert kicks.offset(0) == WallKickOffset(0, 0)


@pytest.mark.parametrize("rotation", list(Rotation))
def test_jlstz_share_kicks(srs, rotation):
    expected = srs.clockwise_wall_kicks(PieceType.J, rotation)
    for piece_type in (PieceType.L, PieceType.S, PieceType.T, PieceType.Z):
        assert srs.clockwise_wall_kicks(piece_type, rotation) == expected


@pytest.mark.parametrize("rotation", list(Rotation))
def test_i_clockwise_undone_by_counter_clockwise(srs, rotation):
    # Turning back reverses each kick of the forward turn.
    forward = srs.clockwise_wall_kicks(PieceType.I, rotation)
    back = srs.counter_clockwise_wall_kicks(PieceType.I, rotate_clockwise(rotation))
    assert [(o.x, o.y) for o in back] == [(-o.x, -o.y) for o in forward]


@pytest.mark.parametrize("rotation", list(Rotation))
def test_o_piece_has_single_empty_kick(srs, rotation):
    for kicks in (
        srs.clockwise_wall_kicks(PieceType.O, rotation),
        srs.counter_clockwise_wall_kicks(PieceType.O, rotation),
    ):
        assert list(kicks) == [WallKickOffset(0, 0)]


@pytest.mark.parametrize("piece_type", list(PieceType))
def test_180_kicks_are_empty(srs, piece_type):
    kicks = srs.wall_kicks_180(piece_type, rotate_180(Rotation.R0))
    assert list(kicks) == [WallKickOffset(0, 0)]


def test_counter_clockwise_rotation_index_used(srs):
    a = srs.counter_clockwise_wall_kicks(PieceType.Z, Rotation.R0)
    b = srs.counter_clockwise_wall_kicks(
        PieceType.Z, rotate_counter_clockwise(Rotation.R0)
    )
    assert a != b


def test_initial_state_standard_board(srs):
    state = srs.initial_state(PieceType.T, 10, 40)
    assert state == PieceState(PieceType.T, Position(3, 21), Rotation.R0)


def test_initial_state_low_board_clamps_to_top(srs):
    state = srs.initial_state(PieceType.L, 10, 20)
    assert state.position.y == 19
    assert state.rotation == Rotation.R0
    assert state.piece_type == PieceType.L


@pytest.mark.parametrize("width", [4, 10, 32])
def test_initial_state_piece_fits_horizontally(srs, width):
    state = srs.initial_state(PieceType.I, width, 40)
    piece = Piece(state, srs)
    xs = [c.x for c in piece.absolute_filled_cells()]
    assert min(xs) >= 0
    assert max(xs) < width